"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  A ``.env`` file in the working directory is loaded first via
``python-dotenv`` so local development does not require exporting
variables by hand.  Defaults are provided for all fields; in a
production deployment override them via the environment.
"""

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

# Existing environment variables take precedence over values in ``.env``.
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Quote API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv(
        "API_DESCRIPTION",
        "An API database containing a wide variety of quotes and frequently asked questions.",
    )
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Storage backend: ``mongo`` talks to a MongoDB server through pymongo,
    # ``memory`` keeps documents in process and is meant for tests and
    # local experiments.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "mongo").lower()
    mongo_uri: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    mongo_database: str = os.getenv("MONGO_DATABASE", "quote_api")
    # Server selection timeout handed to the driver.  Requests made while
    # the server is unreachable fail after this many milliseconds.
    mongo_timeout_ms: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows any origin, which mirrors the permissive default of the
    # public quote service.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
