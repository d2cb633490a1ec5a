from __future__ import annotations

from nicegui import ui

from application.todo.store import subscribe
from domain.todo.exceptions.todo_exceptions import ValidationError
from presentation.controllers.todo_controller import (
    count_todos,
    create_todo,
    list_todos,
    move_todo,
    rebalance_todos,
    remove_todo,
    toggle_todo,
)
from presentation.ui.styles import (
    C_BTN_GHOST,
    C_BTN_PRIM,
    C_CARD,
    C_CONTAINER,
    C_COUNT,
    C_INPUT,
    C_PAGE_TITLE,
    C_TEXT_SUBTLE,
    C_TODO_ROW,
)
from presentation.ui.viewmodels.todo_viewmodel import count_label, todos_to_viewmodels


def render_home(title: str) -> None:
    with ui.column().classes(C_CONTAINER):
        ui.label(title).classes(C_PAGE_TITLE)

        @ui.refreshable
        def todo_count() -> None:
            label = count_label(count_todos())
            if label:
                ui.label(label).classes(C_COUNT)

        todo_count()

        with ui.card().classes(f"{C_CARD} p-4 w-full"):
            description_input = ui.input("Todo", placeholder="What needs to be done?").classes(C_INPUT)

            @ui.refreshable
            def todo_list() -> None:
                todos = todos_to_viewmodels(list_todos())
                if not todos:
                    ui.label("No todos yet.").classes(C_TEXT_SUBTLE)
                    return
                with ui.column().classes("w-full gap-0"):
                    for todo in todos:
                        with ui.row().classes(C_TODO_ROW):
                            ui.checkbox(
                                value=todo["completed"],
                                on_change=lambda _e, todo_id=todo["id"]: toggle_todo(todo_id),
                            ).props('aria-label="Toggle complete"')
                            ui.label(todo["description"]).classes(todo["text_classes"])
                            up = ui.button(
                                icon="arrow_upward",
                                on_click=lambda todo_id=todo["id"]: move_todo(todo_id, -1),
                            ).props("flat round dense").classes(C_BTN_GHOST)
                            up.set_enabled(todo["can_move_up"])
                            down = ui.button(
                                icon="arrow_downward",
                                on_click=lambda todo_id=todo["id"]: move_todo(todo_id, 1),
                            ).props("flat round dense").classes(C_BTN_GHOST)
                            down.set_enabled(todo["can_move_down"])
                            ui.button(
                                icon="delete",
                                on_click=lambda todo_id=todo["id"]: remove_todo(todo_id),
                            ).props('flat round dense color=negative aria-label="Delete todo"')

            def add_todo() -> None:
                try:
                    create_todo(description_input.value or "")
                except ValidationError:
                    ui.notify("Please enter a description for the todo.", color="orange")
                    return
                description_input.value = ""

            description_input.on("keydown.enter", add_todo)
            with ui.row().classes("w-full gap-2 mt-2 items-center"):
                ui.button("Add", on_click=add_todo).classes(C_BTN_PRIM)
                ui.button("Rebalance order", on_click=rebalance_todos).props("flat").classes(C_BTN_GHOST)

            ui.separator().classes("my-3")
            todo_list()

    def refresh() -> None:
        todo_count.refresh()
        todo_list.refresh()

    ui.context.client.on_disconnect(subscribe(refresh))
