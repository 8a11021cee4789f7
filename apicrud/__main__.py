"""Process bootstrap — `python -m apicrud` serves the API with uvicorn.

Startup failures (e.g. port already bound) are logged by uvicorn, which then
exits with status 1 itself.
"""

import logging
import sys

import uvicorn

from apicrud.config import get_settings

logger = logging.getLogger("apicrud")


def main() -> int:
    settings = get_settings()
    uvicorn.run(
        "apicrud.main:app",
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout_seconds,
        log_level=settings.log_level.lower(),
    )
    logger.info("All systems offline")
    return 0


if __name__ == "__main__":
    sys.exit(main())
