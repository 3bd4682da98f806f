"""
Tests for the periodic reminder.
"""

import threading
import time

from habitual.service.reminder import Reminder, get_reminder_habits


class TestReminderHabits:
    def test_only_unfinished_habits(self, tracker):
        tracker.add_habit("Read", 1)
        tracker.add_habit("Write", 0)
        tracker.add_habit("Run", 2)
        tracker.complete_habit(0)

        assert [h["name"] for h in get_reminder_habits(tracker)] == ["Run"]

    def test_empty_when_everything_is_done(self, tracker):
        tracker.add_habit("Write", 0)
        assert get_reminder_habits(tracker) == []


class TestReminder:
    def test_start_is_idempotent(self, tracker):
        reminder = Reminder(tracker, 60, lambda pending: None)
        try:
            reminder.start()
            timer = reminder._timer
            reminder.start()

            assert reminder.is_running
            assert reminder._timer is timer
        finally:
            reminder.stop()

    def test_stop_cancels(self, tracker):
        reminder = Reminder(tracker, 60, lambda pending: None)
        reminder.start()
        timer = reminder._timer

        reminder.stop()
        timer.join(timeout=1)

        assert not reminder.is_running
        assert not timer.is_alive()

    def test_stop_without_start(self, tracker):
        reminder = Reminder(tracker, 60, lambda pending: None)
        reminder.stop()
        assert not reminder.is_running

    def test_callback_receives_pending_habits(self, tracker):
        tracker.add_habit("Run", 2)
        received = []
        fired = threading.Event()

        def callback(pending):
            received.append([h["name"] for h in pending])
            fired.set()

        reminder = Reminder(tracker, 0.01, callback)
        try:
            reminder.start()
            assert fired.wait(timeout=2)
        finally:
            reminder.stop()

        assert received[0] == ["Run"]

    def test_failing_callback_keeps_reminding(self, tracker):
        calls = []
        fired_twice = threading.Event()

        def callback(pending):
            calls.append(1)
            if len(calls) >= 2:
                fired_twice.set()
            raise RuntimeError("boom")

        reminder = Reminder(tracker, 0.01, callback)
        try:
            reminder.start()
            assert fired_twice.wait(timeout=2)
        finally:
            reminder.stop()

    def test_restart_during_callback_keeps_one_timer(self, tracker):
        calls = []
        first_call = threading.Event()
        release = threading.Event()

        def callback(pending):
            calls.append(1)
            if len(calls) == 1:
                first_call.set()
                release.wait(timeout=2)

        reminder = Reminder(tracker, 0.05, callback)
        try:
            reminder.start()
            assert first_call.wait(timeout=2)
            reminder.stop()
            reminder.start()
            release.set()
            time.sleep(0.5)
        finally:
            reminder.stop()

        # a second timer chain would roughly double the tick count
        assert len(calls) <= 0.5 / 0.05 + 3

        stopped_at = len(calls)
        time.sleep(0.3)
        assert len(calls) == stopped_at
        assert not reminder.is_running
