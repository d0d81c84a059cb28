"""Configuration management."""

import os

from shared.errors import ConfigurationError


class Config:
    """Centralized configuration from environment variables."""

    # AWS Configuration
    AWS_REGION = os.environ.get("AWS_REGION", "us-east-1")

    # CDN Configuration
    CDN_DISTRIBUTION_ID = os.environ.get("CDN_DISTRIBUTION_ID")
    CDN_BASE_PATH = os.environ.get("CDN_BASE_PATH", "/")
    CDN_MAX_ATTEMPTS = int(os.environ.get("CDN_MAX_ATTEMPTS", "3"))

    # Media storage layout
    CDN_MEDIA_CONTEXT = os.environ.get("CDN_MEDIA_CONTEXT", "default")

    @classmethod
    def validate(cls) -> bool:
        """Validate required configuration is set."""
        required = ["CDN_DISTRIBUTION_ID"]
        missing = [var for var in required if not getattr(cls, var, None)]

        if missing:
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

        return True
