"""Entry point for the Clinical Concepts API.

Starts the FastAPI application under uvicorn.  Bind address, database
location and the remaining options come from environment variables
(see ``clinical_concepts_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from clinical_concepts_api.app.core.config import settings
from clinical_concepts_api.app.core.logging_config import setup_logging
from clinical_concepts_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    setup_logging(settings.log_level, settings.log_file or None)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
