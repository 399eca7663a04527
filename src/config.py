import os
from pathlib import Path

from dotenv import load_dotenv


class ConfigError(ValueError):
    """An environment setting holds a value that cannot be used."""


class Settings:
    """Defaults for the startup prompts and the table rendering."""

    def __init__(self, host="localhost", database="library_db", user="root",
                 port=3306, currency="₹", log_level="WARNING"):
        self.host = host
        self.database = database
        self.user = user
        self.port = port
        self.currency = currency      # Prefix for every salary shown
        self.log_level = log_level


def load_settings(env_file=None):
    """Read settings from the environment, after loading an optional .env file"""
    if env_file is None:
        env_file = Path.cwd() / ".env"
    if Path(env_file).exists():
        load_dotenv(env_file, override=False)

    port = os.getenv("DB_PORT", "3306").strip()
    if not (port.isascii() and port.isdigit()):
        raise ConfigError(f"DB_PORT must be a number, got {port!r}")

    return Settings(
        host=os.getenv("DB_HOST", "localhost"),
        database=os.getenv("DB_NAME", "library_db"),
        user=os.getenv("DB_USER", "root"),
        port=int(port),
        currency=os.getenv("CURRENCY_SYMBOL", "₹"),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    )
