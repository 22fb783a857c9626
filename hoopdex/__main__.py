"""Run the Hoopdex API with uvicorn: ``python -m hoopdex``."""

import logging

import uvicorn

from hoopdex.settings import get_settings

logger = logging.getLogger("hoopdex")


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level_numeric,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Server listening on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "hoopdex.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
