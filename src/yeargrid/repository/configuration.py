# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from yeargrid import configuration
from yeargrid.color import MARKED_COLOR


def get_default_config() -> configuration.Configuration:
    return {
        "show_header": True,
        "scope_marks_by_year": True,
        "data_path": None,
        "marked_color": MARKED_COLOR,
    }


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
            raise ValueError()

        # Migration: fill in any setting added after the file was written
        for key, value in get_default_config().items():
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
        scope_marks_by_year: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        marked_color: Optional[str] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if scope_marks_by_year is not None:
            self.config["scope_marks_by_year"] = scope_marks_by_year
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if marked_color is not None:
            self.config["marked_color"] = marked_color

    def reset(self) -> None:
        """Drop the cached configuration so the next access reads the file."""
        self._config = None
        self.is_dirty = False


CONFIGURATION_REPO = ConfigurationRepository()
