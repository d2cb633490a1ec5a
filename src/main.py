"""Run the todo board NiceGUI app."""

from presentation.ui.app import run


if __name__ in {"__main__", "__mp_main__"}:
    run()
