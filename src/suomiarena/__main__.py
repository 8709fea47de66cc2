"""Main entry point for the data server."""
import logging

from suomiarena.config import ensure_directories, settings
from suomiarena.logging_config import setup_logging
from suomiarena.monitoring import start_monitoring
from suomiarena.server import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the data server."""
    # Ensure all required directories exist
    ensure_directories()

    setup_logging("Starting SuomiArena data server v0.1.0 ...")

    if settings.monitoring.enabled:
        start_monitoring(settings.monitoring.port)
        logger.info(f"Metrics exported on port {settings.monitoring.port}")

    app = create_app()
    logger.info(f"Running on http://{settings.server.host}:{settings.server.port}")
    logger.info(f"CSV file: {settings.paths.csv_file}")
    try:
        app.run(host=settings.server.host, port=settings.server.port)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")


if __name__ == "__main__":
    main()
