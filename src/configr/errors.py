from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigError(RuntimeError):
    """Base class for every failure raised while locating or loading a config file."""


class ConfigDirError(ConfigError):
    def __init__(self) -> None:
        super().__init__(
            "Unable to get config directory from OS, if you believe this is an error please file an issue "
            "on the `platformdirs` package"
        )


class CreateFsError(ConfigError):
    def __init__(self, path: Path, source: OSError) -> None:
        self.path = path
        self.source = source
        super().__init__(f"Unable to create configuration file or directory {path}: {source}")


class ReadConfigError(ConfigError):
    def __init__(self, path: Path, source: Exception) -> None:
        self.path = path
        self.source = source
        super().__init__(f"Unable to read configuration file from {path}: {source}")


class DeserializeError(ConfigError):
    """
    The file was read but its content did not parse into the target model.

    The raw text is kept so the rendered message shows exactly what is still wrong,
    e.g. a freshly scaffolded template whose values have not been filled in yet.
    """

    def __init__(self, path: Path, toml: str, source: Exception) -> None:
        self.path = path
        self.toml = toml
        self.source = source
        super().__init__(f"Unable to parse TOML\n{path}\n```\n{toml}```{source}")


class TemplateRenderError(ConfigError):
    def __init__(self, path: Optional[Path], source: Exception) -> None:
        self.path = path
        self.source = source
        super().__init__(f"Unable to render configuration template {path}: {source}")
