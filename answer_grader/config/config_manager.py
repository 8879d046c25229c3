import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from answer_grader.constants import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_DATABASE_URL,
    DEFAULT_DEBUG,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_UPLOAD_MB,
    DEFAULT_OCR_TIMEOUT,
    DEFAULT_PORT,
    DEFAULT_VISION_API_URL,
    ENV_CORS_ORIGINS,
    ENV_DATABASE_URL,
    ENV_DEBUG,
    ENV_HOST,
    ENV_LOG_LEVEL,
    ENV_MAX_UPLOAD_MB,
    ENV_OCR_TIMEOUT,
    ENV_PORT,
    ENV_SECRET_KEY,
    ENV_VISION_API_KEY,
    ENV_VISION_API_URL,
    VALID_LOG_LEVELS,
)
from answer_grader.exceptions import ConfigurationError
from answer_grader.utils.logger import setup_logger

logger = setup_logger(__name__)


def _clean(value: str) -> str:
    """Strip inline ``# comments`` that some .env files carry after values."""
    return value.split("#")[0].strip()


@dataclass
class Config:
    """Configuration settings for the application."""

    # Core settings
    debug: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    secret_key: str = ""
    host: str = DEFAULT_HOST
    port: int = int(DEFAULT_PORT)

    # Persistence
    database_url: str = DEFAULT_DATABASE_URL

    # Transport
    cors_origins: List[str] = field(default_factory=lambda: [DEFAULT_CORS_ORIGINS])
    max_upload_mb: int = int(DEFAULT_MAX_UPLOAD_MB)

    # OCR settings
    vision_api_key: Optional[str] = None
    vision_api_url: str = DEFAULT_VISION_API_URL
    ocr_timeout: float = float(DEFAULT_OCR_TIMEOUT)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a configuration from the current process environment."""
        try:
            return cls(
                debug=os.getenv(ENV_DEBUG, DEFAULT_DEBUG).lower() == "true",
                log_level=_clean(os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)).upper(),
                secret_key=os.getenv(ENV_SECRET_KEY, os.urandom(24).hex()),
                host=os.getenv(ENV_HOST, DEFAULT_HOST),
                port=int(_clean(os.getenv(ENV_PORT, DEFAULT_PORT))),
                database_url=os.getenv(ENV_DATABASE_URL, DEFAULT_DATABASE_URL),
                cors_origins=[
                    origin.strip()
                    for origin in os.getenv(ENV_CORS_ORIGINS, DEFAULT_CORS_ORIGINS).split(",")
                    if origin.strip()
                ],
                max_upload_mb=int(_clean(os.getenv(ENV_MAX_UPLOAD_MB, DEFAULT_MAX_UPLOAD_MB))),
                vision_api_key=os.getenv(ENV_VISION_API_KEY) or None,
                vision_api_url=os.getenv(ENV_VISION_API_URL, DEFAULT_VISION_API_URL),
                ocr_timeout=float(_clean(os.getenv(ENV_OCR_TIMEOUT, DEFAULT_OCR_TIMEOUT))),
            )
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid numeric configuration value: {e}", original_error=e
            ) from e

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If a setting is out of range.
        """
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"Invalid port number: {self.port}", setting="port")
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {self.log_level}", setting="log_level")
        if self.ocr_timeout <= 0:
            raise ConfigurationError("OCR timeout must be positive", setting="ocr_timeout")
        if self.max_upload_mb <= 0:
            raise ConfigurationError("Upload limit must be positive", setting="max_upload_mb")
        if not self.database_url:
            raise ConfigurationError("Database URL is required", setting="database_url")


class ConfigManager:
    """Manages application configuration."""

    _instance = None

    def __new__(cls):
        """Create singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize configuration manager."""
        if self._initialized:
            return

        # Load environment variables from root .env file
        load_dotenv(".env", override=False)

        self.config = Config.from_env()
        self.config.validate()

        if not self.config.vision_api_key:
            logger.warning(
                "Google Vision API key not configured - image uploads will fail"
            )

        self._initialized = True
        logger.debug("Configuration initialized successfully")

    @classmethod
    def reset(cls) -> None:
        """Drop the cached configuration so the next access reloads it."""
        cls._instance = None
