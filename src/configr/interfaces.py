from __future__ import annotations

from pathlib import Path
from typing import Protocol, TextIO, TypeVar, Union

from configr.models import ConfigLoadRequest

ConfigT_co = TypeVar("ConfigT_co", covariant=True)


class TemplateRenderer(Protocol):
    @classmethod
    def render_template(cls, handle: TextIO) -> None:
        """Write the initial content of a freshly created, empty config file."""


class ConfigLoader(Protocol[ConfigT_co]):
    """
    Loads a typed configuration value from `<base_dir>/<app-name>/config.toml`.

    Implementations create missing directories and files and scaffold new files through
    the target type's `TemplateRenderer`.
    """

    def load(self, request: ConfigLoadRequest) -> ConfigT_co:
        ...

    def load_with_dir(self, app_name: str, base_dir: Union[str, Path]) -> ConfigT_co:
        ...
