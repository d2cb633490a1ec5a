from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from infrastructure.config.settings import Settings
from infrastructure.data import models  # noqa: F401  registers the todo table

logger = logging.getLogger(__name__)


def create_db_engine(settings: Settings) -> Engine:
    sqlite_path = settings.sqlite_path
    if sqlite_path is not None:
        sqlite_path.parent.mkdir(parents=True, exist_ok=True)
    connect_args = {}
    if settings.database_url.startswith("sqlite"):
        # NiceGUI handlers may run outside the thread that opened the connection.
        connect_args["check_same_thread"] = False
    engine = create_engine(settings.database_url, echo=settings.debug, connect_args=connect_args)
    logger.info("db.engine url=%s", engine.url.render_as_string(hide_password=True))
    return engine


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)


@contextmanager
def get_session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
