from __future__ import annotations

import logging
import sys
import tempfile

from configr import ConfigError, DefaultConfig, FieldTemplateConfig
from configr.logging import init_logging
from configr.models import LoggingSettings


class BotConfig(FieldTemplateConfig):
    bot_username: str
    client_id: str
    client_secret: str
    channel: str


class ServerConfig(DefaultConfig):
    host: str = "127.0.0.1"
    port: int = 8080
    dry_run: bool = False


def main() -> int:
    init_logging(LoggingSettings(level="DEBUG"))
    logger = logging.getLogger("smoke")

    with tempfile.TemporaryDirectory() as base_dir:
        server = ServerConfig.load_with_dir("Smoke Server", base_dir)
        logger.info("Config loaded host=%s port=%s", server.host, server.port)

        try:
            BotConfig.load_with_dir("Smoke Bot", base_dir)
        except ConfigError as exc:
            # Expected on first run: the scaffolded template still has empty values.
            print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
