import pendulum
import pytest

from habitual import configuration, state
from habitual.repository.configuration import CONFIGURATION_REPO
from habitual.repository.habit_store import MemoryHabitStore
from habitual.service.tracker import HabitTracker
from habitual.view import state as view_state

# Monday of a known week; the week runs 2024-01-08 .. 2024-01-14
MONDAY = pendulum.datetime(2024, 1, 8, 10, 30, tz="local")


@pytest.fixture(autouse=True)
def _isolated_paths(tmp_path, monkeypatch):
    """Keep config and data files inside a temp directory for every test."""
    # Wide enough that rich never wraps table cells
    monkeypatch.setenv("COLUMNS", "200")
    saved_config = configuration.CONFIG_PATH
    saved_data = configuration.DATA_PATH

    configuration.set_config_path(tmp_path / "config")
    configuration.set_data_path(tmp_path / "data")
    CONFIGURATION_REPO.reload()
    state.set_tracker(None)
    view_state.set_show_header(False)
    yield
    configuration.set_config_path(saved_config)
    configuration.set_data_path(saved_data)
    CONFIGURATION_REPO.reload()
    state.set_tracker(None)
    view_state.set_show_header(True)


@pytest.fixture
def monday():
    return MONDAY


@pytest.fixture
def clock():
    """A settable clock; assign clock.current to move time."""

    class Clock:
        current = MONDAY

        def __call__(self):
            return self.current

    return Clock()


@pytest.fixture
def memory_store():
    return MemoryHabitStore()


@pytest.fixture
def tracker(memory_store, clock):
    return HabitTracker(memory_store, now=clock)
