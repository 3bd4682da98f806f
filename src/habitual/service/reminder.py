# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Callable, Optional

from habitual.model.habit import Habit
from habitual.service.tracker import HabitTracker
from habitual.time import Reference

logger = logging.getLogger(__name__)


def get_reminder_habits(
    tracker: HabitTracker, reference: Optional[Reference] = None
) -> list[Habit]:
    """Habits that have not reached their weekly target yet."""
    return [habit for _, habit in tracker.list_habits("active", reference)]


class Reminder:
    """
    Periodically hands the pending habits to a callback.

    At most one timer is outstanding: start() on a running reminder does
    nothing, stop() cancels the pending tick.
    """

    def __init__(
        self,
        tracker: HabitTracker,
        interval_seconds: float,
        callback: Callable[[list[Habit]], None],
    ) -> None:
        self.tracker = tracker
        self.interval_seconds = interval_seconds
        self.callback = callback
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        with self._lock:
            if self._timer is not None:
                return
            self.__schedule()
        logger.debug("Reminder started, every %ss", self.interval_seconds)

    def stop(self) -> None:
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            self._timer = None
        logger.debug("Reminder stopped")

    def __schedule(self) -> None:
        self._timer = threading.Timer(self.interval_seconds, self.__tick)
        self._timer.daemon = True
        self._timer.start()

    def __is_current(self) -> bool:
        return self._timer is threading.current_thread()

    def __tick(self) -> None:
        with self._lock:
            if not self.__is_current():
                return
        try:
            self.callback(get_reminder_habits(self.tracker))
        except Exception:
            logger.exception("Reminder callback failed")
        with self._lock:
            # Only the current timer re-arms; stop() or a restart replaced it
            if not self.__is_current():
                return
            self.__schedule()
