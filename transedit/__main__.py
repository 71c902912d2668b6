import logging

import uvicorn

from transedit.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    logger.info(
        "Serving translations from %s on %s:%s",
        settings.translations_dir,
        settings.app_host,
        settings.app_port,
    )
    uvicorn.run(
        "transedit.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
