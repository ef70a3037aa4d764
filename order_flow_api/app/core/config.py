"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts against a local SQLite file without any setup.  In a
production deployment you should override these via environment
variables (for example ``DATABASE_URL`` pointing at a server
database).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Order Flow API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # SQLAlchemy database URL.  Any dialect SQLAlchemy supports can be
    # used; relative SQLite paths are resolved against the current
    # working directory by SQLAlchemy itself.
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./order_flow.db")

    # Page size used by the order listing when the client omits it.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
