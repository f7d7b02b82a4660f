# src/option_service/api/middleware/cors.py
import logging
from urllib.parse import urlparse

from option_service.config.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_DEV_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


def get_cors_middleware_config(settings: Settings) -> dict:
    """
    Get CORS middleware configuration based on environment settings.

    Args:
        settings: Application settings instance

    Returns:
        Dictionary of CORSMiddleware kwargs

    Raises:
        ValueError: If origin URLs have invalid format
    """
    allowed_origins = list(settings.cors_origins)

    # Local/dev front-ends work without configuration
    if settings.environment in ["local", "dev"] and not allowed_origins:
        allowed_origins = list(DEFAULT_DEV_ORIGINS)
        logger.info(
            f"CORS: No origins configured in {settings.environment} environment, "
            f"using default localhost origins: {allowed_origins}"
        )

    for origin in allowed_origins:
        if origin == "*":
            if settings.is_production:
                logger.warning(
                    "CORS: Wildcard origin '*' detected in PRODUCTION environment! "
                    "Please configure specific origins."
                )
            continue

        parsed = urlparse(origin)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(
                f"Invalid origin URL format: {origin}. "
                "Origins must include scheme and domain (e.g., 'http://localhost:3000')"
            )

    if settings.environment in ["staging", "prod"] and not allowed_origins:
        logger.warning(
            f"CORS: No origins configured in {settings.environment.upper()} environment! "
            "All cross-origin requests will be blocked. "
            "Please set CORS_ORIGINS environment variable."
        )

    return {
        "allow_origins": allowed_origins,
        "allow_credentials": settings.cors_allow_credentials,
        "allow_methods": settings.cors_allow_methods,
        "allow_headers": settings.cors_allow_headers,
        "max_age": settings.cors_max_age,
    }
