from typing import Optional

from sqlmodel import Field, SQLModel

from domain.todo.entities.todo import Todo


class TodoRecord(SQLModel, table=True):
    __tablename__ = "todo"
    # AUTOINCREMENT keeps SQLite from reusing the id of a deleted last row.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    description: str
    completed: bool = False
    position: int = Field(default=0, index=True)

    def to_entity(self) -> Todo:
        return Todo(
            id=int(self.id or 0),
            description=self.description,
            completed=self.completed,
            position=self.position,
        )
