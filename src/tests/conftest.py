from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from application.todo import store
from infrastructure.config.settings import Settings
from infrastructure.data.database import create_db_engine, init_db
from infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
)
from infrastructure.data.repositories.sql_todo_repository import SqlTodoRepository


@pytest.fixture()
def in_memory_todo_repo(monkeypatch: pytest.MonkeyPatch) -> InMemoryTodoRepository:
    repo = InMemoryTodoRepository()
    monkeypatch.setattr(store, "_REPOSITORY", repo)
    monkeypatch.setattr(store, "_LISTENERS", [])
    return repo


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path}/todos.db",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def sql_todo_repo(monkeypatch: pytest.MonkeyPatch, test_settings: Settings) -> SqlTodoRepository:
    engine = create_db_engine(test_settings)
    init_db(engine)
    repo = SqlTodoRepository(engine)
    monkeypatch.setattr(store, "_REPOSITORY", repo)
    monkeypatch.setattr(store, "_LISTENERS", [])
    yield repo
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def todo_repo(request: pytest.FixtureRequest):
    """Runs a test once per repository implementation."""
    if request.param == "memory":
        return request.getfixturevalue("in_memory_todo_repo")
    return request.getfixturevalue("sql_todo_repo")
