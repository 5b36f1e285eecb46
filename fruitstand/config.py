"""Configuration management for Fruitstand.

Values come from the process environment, optionally populated from a ``.env``
file in the working directory:

- DATABASE_URL: SQLAlchemy connection URL (defaults to SQLite in the instance folder)
- PORT / HOST: where ``server.py`` listens
- FLASK_DEBUG: enable the Werkzeug debugger and reloader
- LOG_LEVEL: root logging level
- SQLALCHEMY_ECHO: echo emitted SQL
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PORT: int = 3000
DEFAULT_HOST: str = "127.0.0.1"


def _bool_from_env(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "yes", "on"}


def _int_from_env(name: str, default: int) -> int:
    value = os.environ.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", name, value, default)
        return default


@dataclass
class Settings:
    """Runtime settings for the web process."""
    database_url: Optional[str] = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    debug: bool = False
    log_level: str = "INFO"
    sqlalchemy_echo: bool = False

    def resolve_database_url(self, instance_path: str) -> str:
        """Return the configured URL or a SQLite file inside ``instance_path``."""
        if self.database_url:
            return self.database_url
        sqlite_path = Path(instance_path) / "fruits.db"
        sqlite_path.parent.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{sqlite_path}"


def load_settings(env_path: Optional[Path] = None) -> Settings:
    """Load settings from environment variables.

    Args:
        env_path: Optional path to a .env file. Defaults to looking in the
            current directory.
    """
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    return Settings(
        database_url=os.environ.get("DATABASE_URL") or None,
        port=_int_from_env("PORT", DEFAULT_PORT),
        host=os.environ.get("HOST", DEFAULT_HOST),
        debug=_bool_from_env("FLASK_DEBUG", False),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        sqlalchemy_echo=_bool_from_env("SQLALCHEMY_ECHO", False),
    )
