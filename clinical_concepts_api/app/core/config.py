"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  A
shared ``settings`` instance is created at import time; tests and
embedding code may build their own instance and hand it to
``create_app``.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Clinical Concepts API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  If a relative path is provided,
    # it will be resolved relative to the project root by the ``db``
    # module.
    database_url: str = os.getenv("DATABASE_URL", "clinical_concepts.db")

    # Seconds a connection waits for a locked database before failing.
    # Concurrent writers queue on the lock instead of erroring out.
    db_timeout: float = float(os.getenv("DB_TIMEOUT", "30"))

    # Tabular resource consumed by ``/api/loadCsvData``.  A bare file
    # name is looked up in the package ``resources`` directory.
    csv_resource: str = os.getenv("CSV_RESOURCE", "data.csv")

    load_seed_on_startup: bool = os.getenv("LOAD_SEED_ON_STARTUP", "true").lower() in {"1", "true", "yes"}

    # Comma‑separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
