# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from habitual import configuration

logger = logging.getLogger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        raw_config: Any = None
        try:
            raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        except FileNotFoundError:
            logger.debug("No config at %s, using defaults", configuration.APP_CONFIG_PATH)
        except (OSError, YAMLError) as e:
            logger.warning(
                "Could not read config %s, using defaults: %s",
                configuration.APP_CONFIG_PATH,
                e,
            )

        if not isinstance(raw_config, dict):
            raw_config = {}

        # Fill in any settings missing from older config files
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in raw_config:
                raw_config[key] = value

        self._config = cast(configuration.Configuration, raw_config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reload(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        profile_name: Optional[str] = None,
        reminder_interval_seconds: Optional[int] = None,
        progress_bar_width: Optional[int] = None,
        show_header: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if profile_name is not None:
            self.config["profile_name"] = profile_name
        if reminder_interval_seconds is not None:
            self.config["reminder_interval_seconds"] = reminder_interval_seconds
        if progress_bar_width is not None:
            self.config["progress_bar_width"] = progress_bar_width
        if show_header is not None:
            self.config["show_header"] = show_header


CONFIGURATION_REPO = ConfigurationRepository()
