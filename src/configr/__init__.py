"""Typed TOML configuration files with first-run scaffolding."""

from configr.dirs import system_or_local_dir, user_config_dir
from configr.errors import (
    ConfigDirError,
    ConfigError,
    CreateFsError,
    DeserializeError,
    ReadConfigError,
    TemplateRenderError,
)
from configr.interfaces import ConfigLoader, TemplateRenderer
from configr.loader import TomlConfigLoader, normalize_app_name, resolve_config_path
from configr.models import CONFIG_FILE_NAME, ConfigLoadRequest
from configr.templates import Config, DefaultConfig, FieldTemplateConfig

__all__ = [
    "CONFIG_FILE_NAME",
    "Config",
    "ConfigDirError",
    "ConfigError",
    "ConfigLoadRequest",
    "ConfigLoader",
    "CreateFsError",
    "DefaultConfig",
    "DeserializeError",
    "FieldTemplateConfig",
    "ReadConfigError",
    "TemplateRenderError",
    "TemplateRenderer",
    "TomlConfigLoader",
    "normalize_app_name",
    "resolve_config_path",
    "system_or_local_dir",
    "user_config_dir",
]
