"""ASGI entry point: ``uvicorn server.app:app``."""

from docsite.utils.logging_config import configure_logging
from server.main import create_app

configure_logging()
app = create_app()
