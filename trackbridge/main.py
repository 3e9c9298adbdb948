"""Entry: start the track hand-off API server."""
import logging
import uvicorn

from trackbridge.config import API_HOST, API_PORT, LOG_LEVEL, RELOAD


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(levelname)s: %(message)s",
    )
    uvicorn.run(
        "trackbridge.api.app:app",
        host=API_HOST,
        port=API_PORT,
        reload=RELOAD,
    )


if __name__ == "__main__":
    main()
