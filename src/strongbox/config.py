"""Configuration management for Strongbox."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

STRONGBOX_HOME = Path(os.environ.get("STRONGBOX_HOME", Path.home() / "strongbox"))
CONFIG_FILE = STRONGBOX_HOME / "config" / "strongbox.conf"
JOURNAL_FILENAME = "journal-entries.json"

# Fallback secrets so a first run works without setup. Not secure.
DEFAULT_DATA_DIRECTORY = "App_Data"
DEFAULT_ENCRYPTION_KEY = "YourSuperSecretKey123456789012345678"
DEFAULT_ENCRYPTION_IV = "1234567890123456"


@dataclass
class Config:
    """Strongbox configuration."""

    data_directory: str = DEFAULT_DATA_DIRECTORY
    encryption_key: str = DEFAULT_ENCRYPTION_KEY
    encryption_iv: str = DEFAULT_ENCRYPTION_IV

    @property
    def uses_default_secrets(self) -> bool:
        return (
            self.encryption_key == DEFAULT_ENCRYPTION_KEY
            or self.encryption_iv == DEFAULT_ENCRYPTION_IV
        )

    @property
    def data_dir(self) -> Path:
        """Data directory; relative paths resolve under STRONGBOX_HOME."""
        path = Path(self.data_directory or DEFAULT_DATA_DIRECTORY).expanduser()
        if not path.is_absolute():
            path = STRONGBOX_HOME / path
        return path

    @property
    def journal_file(self) -> Path:
        return self.data_dir / JOURNAL_FILENAME


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value.startswith(('"', "'")):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from strongbox.conf file."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_directory":
                config.data_directory = value or DEFAULT_DATA_DIRECTORY
            case "encryption_key":
                config.encryption_key = value or DEFAULT_ENCRYPTION_KEY
            case "encryption_iv":
                config.encryption_iv = value or DEFAULT_ENCRYPTION_IV
            case _:
                logger.warning(f"Ignoring unknown config key: {key}")

    return config
