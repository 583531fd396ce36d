"""Process entry point: configure logging and run uvicorn."""
import logging

import uvicorn

from time_service.config import load_settings
from time_service.main import create_app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main():
    settings = load_settings()
    configure_logging(settings.log_level)

    app = create_app(settings)
    logger.info(
        "Starting time service on http://%s:%d, serving %s/",
        settings.host,
        settings.port,
        settings.base_path,
    )
    if settings.timezone is None:
        logger.info("currentTime uses server local time")
    else:
        logger.info("currentTime uses timezone %s", settings.timezone)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
