"""Run the API with uvicorn: ``python -m option_service``."""
import uvicorn

from option_service.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "option_service.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
