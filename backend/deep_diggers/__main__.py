"""Run the Deep Diggers server: ``python -m deep_diggers``."""

import logging

import uvicorn
from dotenv import load_dotenv


def main() -> None:
    # .env must be loaded before the app (and its store) is imported.
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    from deep_diggers.config import get_settings
    from deep_diggers.main import app

    settings = get_settings()
    logging.getLogger(__name__).info("[server] Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
