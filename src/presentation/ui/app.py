"""Run the todo board NiceGUI app."""

from __future__ import annotations

import logging
from typing import Optional

from nicegui import ui

from composition_root import AppContainer, create_app_container
from infrastructure.config.settings import Settings, load_settings
from infrastructure.logging_setup import setup_logging
from presentation.ui.pages.home import render_home
from presentation.ui.styles import C_BG

logger = logging.getLogger(__name__)


def build_app(settings: Optional[Settings] = None) -> AppContainer:
    settings = settings or load_settings()
    setup_logging(settings)
    container = create_app_container(settings)

    @ui.page("/")
    def index() -> None:
        ui.query("body").classes(C_BG)
        render_home(container.settings.title)

    logger.info("app.ready host=%s port=%s", settings.host, settings.port)
    return container


def run() -> None:
    container = build_app()
    ui.run(
        title=container.settings.title,
        host=container.settings.host,
        port=container.settings.port,
        reload=False,
        favicon="✅",
    )
