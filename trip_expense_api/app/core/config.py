"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via the
environment in a deployment.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Trip Expense API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the JSON document holding all trip requests and expenses.
    # A relative path is resolved against the project root by the
    # ``store`` module.
    data_file: str = os.getenv("DATA_FILE", "data.json")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "4000"))

    # Value of the Access-Control-Allow-Origin header sent with every
    # response.
    cors_allow_origin: str = os.getenv("CORS_ALLOW_ORIGIN", "*")


# Environment variables must be set before this module is imported.
settings = Settings()
