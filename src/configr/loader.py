from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Generic, Type, TypeVar, Union

import toml
from pydantic import ValidationError

from configr import dirs
from configr.errors import (
    ConfigError,
    CreateFsError,
    DeserializeError,
    ReadConfigError,
    TemplateRenderError,
)
from configr.interfaces import TemplateRenderer
from configr.models import CONFIG_FILE_NAME, ConfigLoadRequest

if TYPE_CHECKING:
    from configr.templates import Config

logger = logging.getLogger(__name__)

ConfigT = TypeVar("ConfigT", bound="Config")


def normalize_app_name(app_name: str) -> str:
    """Replace spaces with hyphens and lower-case ASCII letters; other characters are kept as-is."""
    return "".join(c.lower() if c.isascii() else c for c in app_name.replace(" ", "-"))


def resolve_config_path(app_name: str, base_dir: Union[str, Path]) -> Path:
    """Return `<base_dir>/<app-name>/config.toml` without touching the filesystem."""
    return Path(base_dir) / normalize_app_name(app_name) / CONFIG_FILE_NAME


class TomlConfigLoader(Generic[ConfigT]):
    """
    Loads `config_type` from `<base_dir>/<app-name>/config.toml`.

    `config_type` is a `Config` model; its `render_template` classmethod fills the
    file the first time it is created.
    """

    def __init__(self, config_type: Type[ConfigT]) -> None:
        self._config_type = config_type

    def load(self, request: ConfigLoadRequest) -> ConfigT:
        if not request.force_user_dir:
            system_dir = dirs.system_or_local_dir()
            try:
                return self.load_with_dir(request.app_name, system_dir)
            except ConfigError as exc:
                logger.debug(
                    "config.system_dir_failed base_dir=%s error=%s",
                    system_dir,
                    type(exc).__name__,
                )

        user_dir = dirs.user_config_dir()
        return self.load_with_dir(request.app_name, user_dir)

    def load_with_dir(self, app_name: str, base_dir: Union[str, Path]) -> ConfigT:
        config_path = resolve_config_path(app_name, base_dir)
        config_dir = config_path.parent

        if not config_dir.is_dir():
            try:
                config_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise CreateFsError(config_dir, exc) from exc
            logger.info("config.dir_created path=%s", config_dir)

        if not config_path.exists():
            self._create_from_template(config_path)

        try:
            text = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadConfigError(config_path, exc) from exc

        try:
            data = toml.loads(text)
            return self._config_type.model_validate(data)
        except (toml.TomlDecodeError, ValidationError) as exc:
            raise DeserializeError(config_path, text, exc) from exc

    def _create_from_template(self, config_path: Path) -> None:
        try:
            handle = config_path.open("x", encoding="utf-8")
        except FileExistsError:
            # Another process created it between the existence check and here.
            logger.info("config.create_lost_race path=%s", config_path)
            return
        except OSError as exc:
            raise CreateFsError(config_path, exc) from exc

        renderer: TemplateRenderer = self._config_type
        try:
            with handle:
                renderer.render_template(handle)
        except TemplateRenderError as exc:
            config_path.unlink(missing_ok=True)
            if exc.path is None:
                raise TemplateRenderError(config_path, exc.source) from exc.source
            raise
        except OSError as exc:
            config_path.unlink(missing_ok=True)
            raise CreateFsError(config_path, exc) from exc
        except BaseException:
            config_path.unlink(missing_ok=True)
            raise

        logger.info("config.file_created path=%s template=%s", config_path, self._config_type.__name__)
