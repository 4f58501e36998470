# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timelane import configuration


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
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError(
                f"Configuration file is empty: {configuration.APP_CONFIG_PATH}"
            )

        # Fill in settings added after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        default_view_mode: Optional[str] = None,
        viewport_width: Optional[int] = None,
        left_padding: Optional[int] = None,
        lane_height: Optional[int] = None,
        min_item_width: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if default_view_mode is not None:
            self.config["default_view_mode"] = default_view_mode
        if viewport_width is not None:
            self.config["viewport_width"] = viewport_width
        if left_padding is not None:
            self.config["left_padding"] = left_padding
        if lane_height is not None:
            self.config["lane_height"] = lane_height
        if min_item_width is not None:
            self.config["min_item_width"] = min_item_width
        if log_level is not None:
            self.config["log_level"] = log_level.upper()


CONFIGURATION_REPO = ConfigurationRepository()
