# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "habitual"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_HABITS_PATH: Path = DATA_PATH / "habits.json"


class Configuration(TypedDict):
    data_path: Optional[str]
    profile_name: str
    reminder_interval_seconds: int
    progress_bar_width: int
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "profile_name": "User",
        "reminder_interval_seconds": 10,
        "progress_bar_width": 20,
        "show_header": True,
    }


def set_config_path(config_path: Path) -> None:
    """Point the configuration at a different directory."""
    global CONFIG_PATH, APP_CONFIG_PATH

    CONFIG_PATH = config_path
    APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_HABITS_PATH

    DATA_PATH = data_path
    DATA_HABITS_PATH = DATA_PATH / "habits.json"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the habit
    store is created.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    try:
        config: Optional[Configuration] = load(
            APP_CONFIG_PATH.read_text(), Loader=Loader
        )
    except (OSError, YAMLError):
        return
    if not isinstance(config, dict):
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
