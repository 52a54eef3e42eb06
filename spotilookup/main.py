"""Entry: start the API server."""
import logging

import uvicorn

from spotilookup.config import API_HOST, API_PORT, LOG_LEVEL


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")
    logging.getLogger(__name__).info("Starting server on %s:%d", API_HOST, API_PORT)
    uvicorn.run(
        "spotilookup.api.app:app",
        host=API_HOST,
        port=API_PORT,
        log_level=LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
