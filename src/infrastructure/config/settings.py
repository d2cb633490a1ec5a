from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.engine import make_url

logger = logging.getLogger(__name__)

_LOADED = False

DEFAULT_DATABASE_URL = "sqlite:///storage/todos.db"
DEFAULT_LOG_DIR = "./data/logs"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_TITLE = "My Todos"


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    project_root = Path(__file__).resolve().parents[3]
    candidates = [
        project_root / ".env",
        Path.cwd() / ".env",
    ]
    for path in candidates:
        if not path.exists():
            continue
        # Real environment variables win over the file.
        load_dotenv(dotenv_path=path, override=False)
        logger.debug("Environment loaded from %s", path)


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    debug: bool = False
    log_dir: Path = Path(DEFAULT_LOG_DIR)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    title: str = DEFAULT_TITLE

    @property
    def sqlite_path(self) -> Path | None:
        url = make_url(self.database_url)
        if url.get_backend_name() != "sqlite":
            return None
        if not url.database or url.database == ":memory:":
            return None
        return Path(url.database)


def _parse_port(value: str | None) -> int:
    if not value:
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError:
        logger.warning("Invalid TODO_PORT=%r, using %s", value, DEFAULT_PORT)
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning("TODO_PORT=%s out of range, using %s", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def load_settings() -> Settings:
    load_env()
    return Settings(
        database_url=os.getenv("TODO_DATABASE_URL") or DEFAULT_DATABASE_URL,
        debug=os.getenv("TODO_DEBUG") == "1",
        log_dir=Path(os.getenv("TODO_LOG_DIR") or DEFAULT_LOG_DIR),
        host=os.getenv("TODO_HOST") or DEFAULT_HOST,
        port=_parse_port(os.getenv("TODO_PORT")),
        title=os.getenv("TODO_TITLE") or DEFAULT_TITLE,
    )
