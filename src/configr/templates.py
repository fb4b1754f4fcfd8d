from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import TextIO, Type, TypeVar, Union

import toml
from pydantic import BaseModel, ValidationError

from configr.errors import TemplateRenderError
from configr.interfaces import ConfigLoader
from configr.loader import TomlConfigLoader
from configr.models import ConfigLoadRequest

ConfigSelf = TypeVar("ConfigSelf", bound="Config")


class Config(BaseModel):
    """
    Base for configuration models loaded from `<config dir>/<app-name>/config.toml`.

    Subclasses pick how a missing file is scaffolded by deriving from
    `FieldTemplateConfig` or `DefaultConfig`, or by overriding `render_template`.

        class BotConfig(FieldTemplateConfig):
            bot_username: str
            client_id: str

        config = BotConfig.load("Bot App")
    """

    @classmethod
    @abstractmethod
    def render_template(cls, handle: TextIO) -> None:
        """Write the initial content of a freshly created config file. Concrete models derive from
        `FieldTemplateConfig` or `DefaultConfig` instead of loading `Config` directly."""
        raise NotImplementedError(f"{cls.__name__} does not implement render_template")

    @classmethod
    def load(cls: Type[ConfigSelf], app_name: str, force_user_dir: bool = False) -> ConfigSelf:
        loader: ConfigLoader[ConfigSelf] = TomlConfigLoader(cls)
        return loader.load(ConfigLoadRequest(app_name=app_name, force_user_dir=force_user_dir))

    @classmethod
    def load_with_dir(cls: Type[ConfigSelf], app_name: str, base_dir: Union[str, Path]) -> ConfigSelf:
        return TomlConfigLoader(cls).load_with_dir(app_name, base_dir)


class FieldTemplateConfig(Config):
    """Scaffolds one `name=` line per declared field, which fails to parse until edited."""

    @classmethod
    def render_template(cls, handle: TextIO) -> None:
        for name in cls.model_fields:
            handle.write(f"{name}=\n")
        handle.flush()


class DefaultConfig(Config):
    """Scaffolds the TOML serialization of `cls()`, so the first load already succeeds."""

    @classmethod
    def render_template(cls, handle: TextIO) -> None:
        try:
            defaults = cls().model_dump(mode="json", exclude_none=True)
            text = toml.dumps(defaults)
            # Defaults that do not survive a round trip would fail on the very first load.
            toml.loads(text)
        except (ValidationError, TypeError, ValueError) as exc:
            raise TemplateRenderError(None, exc) from exc
        handle.write(text)
        handle.flush()
