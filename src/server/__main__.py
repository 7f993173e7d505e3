"""Run the docsite API with uvicorn: ``python -m server``."""

import uvicorn

from docsite.config import load_signup_settings
from docsite.utils.logging_config import configure_logging, get_logger
from server.server_config import SERVER_HOST, SERVER_PORT, SERVER_RELOAD

logger = get_logger(__name__)


def main() -> None:
    configure_logging()
    # Fail here rather than inside a worker when secrets are missing.
    load_signup_settings()

    logger.info("Starting docsite server", extra={"host": SERVER_HOST, "port": SERVER_PORT, "reload": SERVER_RELOAD})
    uvicorn.run(
        "server.app:app",
        host=SERVER_HOST,
        port=SERVER_PORT,
        reload=SERVER_RELOAD,
        log_config=None,  # uvicorn loggers propagate to our root handler
    )


if __name__ == "__main__":
    main()
