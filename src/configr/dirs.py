from __future__ import annotations

import logging
import os
from pathlib import Path

import platformdirs

from configr.errors import ConfigDirError

logger = logging.getLogger(__name__)


def system_or_local_dir() -> Path:
    """Fixed first-choice base directory: /etc on Unix-like systems, the working directory elsewhere."""
    if os.name == "posix":
        return Path("/etc")
    return Path(".")


def user_config_dir() -> Path:
    """
    Return the OS user configuration directory.

    Linux: `$XDG_CONFIG_HOME` (default `~/.config`)
    Windows: `%APPDATA%`
    macOS: `~/Library/Application Support`
    """
    try:
        path = platformdirs.user_config_path()
    except (KeyError, OSError, RuntimeError) as exc:
        logger.debug("config.user_dir_lookup_failed error=%s", exc)
        raise ConfigDirError() from exc

    # An unexpanded "~" means no home directory could be determined.
    if not str(path) or not path.is_absolute():
        logger.debug("config.user_dir_unusable path=%s", path)
        raise ConfigDirError()
    return path
