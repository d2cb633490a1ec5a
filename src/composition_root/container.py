from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine

from application.todo import store
from application.todo.commands.create_todo import CreateTodoCommand
from application.todo.commands.rebalance_positions import RebalancePositionsCommand
from application.todo.commands.remove_todo import RemoveTodoCommand
from application.todo.commands.reorder_todo import MoveTodoCommand, ReorderTodoCommand
from application.todo.commands.toggle_todo import ToggleTodoCommand
from application.todo.queries.count_todos import CountTodosQuery
from application.todo.queries.list_todos import ListTodosQuery
from domain.todo.repositories.todo_repository import TodoRepository
from infrastructure.config.settings import Settings, load_settings
from infrastructure.data.database import create_db_engine, init_db
from infrastructure.data.repositories.sql_todo_repository import SqlTodoRepository


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    engine: Optional[Engine]
    repository: TodoRepository
    create_todo_command: CreateTodoCommand
    toggle_todo_command: ToggleTodoCommand
    remove_todo_command: RemoveTodoCommand
    reorder_todo_command: ReorderTodoCommand
    move_todo_command: MoveTodoCommand
    rebalance_positions_command: RebalancePositionsCommand
    list_todos_query: ListTodosQuery
    count_todos_query: CountTodosQuery


def create_app_container(
    settings: Optional[Settings] = None,
    repository: Optional[TodoRepository] = None,
) -> AppContainer:
    """Wire the store to a repository and build the use cases.

    Without an explicit ``repository`` a SQL repository is created from
    ``settings.database_url`` and its schema is ensured.
    """
    settings = settings or load_settings()
    engine: Optional[Engine] = None
    if repository is None:
        engine = create_db_engine(settings)
        init_db(engine)
        repository = SqlTodoRepository(engine)

    store.reset_todos()
    store.use_repository(repository)

    return AppContainer(
        settings=settings,
        engine=engine,
        repository=repository,
        create_todo_command=CreateTodoCommand(),
        toggle_todo_command=ToggleTodoCommand(),
        remove_todo_command=RemoveTodoCommand(),
        reorder_todo_command=ReorderTodoCommand(),
        move_todo_command=MoveTodoCommand(),
        rebalance_positions_command=RebalancePositionsCommand(),
        list_todos_query=ListTodosQuery(),
        count_todos_query=CountTodosQuery(),
    )
