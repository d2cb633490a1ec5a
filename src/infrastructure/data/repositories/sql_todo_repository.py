from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional

from sqlalchemy import delete, func, not_, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from domain.todo.repositories.todo_repository import TodoRepository
from domain.todo.entities.todo import Todo
from domain.todo.exceptions.todo_exceptions import StorageUnavailableError
from infrastructure.data.models import TodoRecord

logger = logging.getLogger(__name__)


class SqlTodoRepository(TodoRepository):
    """Todo repository backed by a SQLModel table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @contextmanager
    def _session(self) -> Iterator[Session]:
        try:
            with Session(self._engine) as session:
                yield session
        except OperationalError as exc:
            logger.exception("db.unavailable url=%s", self._engine.url.render_as_string(hide_password=True))
            raise StorageUnavailableError("Todo storage is unavailable.") from exc

    def add(self, description: str, position: int, completed: bool = False) -> Todo:
        with self._session() as session:
            record = TodoRecord(description=description, completed=completed, position=position)
            session.add(record)
            session.commit()
            session.refresh(record)
            return record.to_entity()

    def add_many(self, items: Iterable[tuple[str, bool, int]]) -> list[Todo]:
        with self._session() as session:
            records = [
                TodoRecord(description=description, completed=completed, position=position)
                for description, completed, position in items
            ]
            session.add_all(records)
            session.commit()
            for record in records:
                session.refresh(record)
            return [record.to_entity() for record in records]

    def get(self, todo_id: int) -> Optional[Todo]:
        with self._session() as session:
            record = session.get(TodoRecord, todo_id)
            return record.to_entity() if record else None

    def list(self) -> list[Todo]:
        with self._session() as session:
            statement = select(TodoRecord).order_by(TodoRecord.position, TodoRecord.id)
            return [record.to_entity() for record in session.exec(statement).all()]

    def max_position(self) -> Optional[int]:
        with self._session() as session:
            return session.exec(select(func.max(TodoRecord.position))).one()

    def toggle(self, todo_id: int) -> Optional[Todo]:
        # Single statement; no read-then-write window on the row.
        statement = (
            update(TodoRecord)
            .where(TodoRecord.id == todo_id)
            .values(completed=not_(TodoRecord.completed))
        )
        with self._session() as session:
            result = session.connection().execute(statement)
            session.commit()
            if not result.rowcount:
                return None
            record = session.get(TodoRecord, todo_id)
            return record.to_entity() if record else None

    def set_position(self, todo_id: int, position: int) -> bool:
        statement = update(TodoRecord).where(TodoRecord.id == todo_id).values(position=position)
        with self._session() as session:
            result = session.connection().execute(statement)
            session.commit()
            return bool(result.rowcount)

    def set_positions(self, positions: dict[int, int]) -> int:
        updated = 0
        with self._session() as session:
            connection = session.connection()
            for todo_id, position in positions.items():
                result = connection.execute(
                    update(TodoRecord).where(TodoRecord.id == todo_id).values(position=position)
                )
                updated += result.rowcount or 0
            session.commit()
        return updated

    def delete(self, todo_id: int) -> bool:
        with self._session() as session:
            result = session.connection().execute(delete(TodoRecord).where(TodoRecord.id == todo_id))
            session.commit()
            return bool(result.rowcount)

    def clear(self) -> int:
        with self._session() as session:
            result = session.connection().execute(delete(TodoRecord))
            session.commit()
            return result.rowcount or 0
