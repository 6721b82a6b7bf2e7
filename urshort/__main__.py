import uvicorn
from loguru import logger

from urshort.log import configure_logging
from urshort.services.mapping import load_environment, load_mapping_config
from urshort.settings import settings


def main() -> None:
    """Entrypoint of the application."""
    configure_logging()

    pairs = load_environment(settings.env_file)
    port = load_mapping_config(pairs, settings).port

    logger.info(f"Listening on http://{settings.host}:{port}")
    uvicorn.run(
        "urshort.web.application:get_app",
        workers=settings.workers_count,
        host=settings.host,
        port=port,
        reload=settings.reload,
        factory=True,
    )


if __name__ == "__main__":
    main()
