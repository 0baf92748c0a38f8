"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache

DATA_BACKEND_SQL = "sql"
DATA_BACKEND_MEMORY = "memory"


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "CondoPulse"
    debug: bool = False

    # Database (postgresql+psycopg for psycopg3; sqlite:// accepted for local runs)
    database_url: str = "postgresql+psycopg://localhost:5432/condopulse_dev"
    db_connect_timeout: int = 10  # seconds

    # Data access: "sql" reads the database, "memory" uses the in-process map
    data_backend: str = DATA_BACKEND_SQL
    # JSON seed for the memory backend; empty loads the bundled demo condominium
    memory_seed_path: str = ""

    # Executive dashboard windows (days)
    expiring_window_days: int = 30
    recent_decisions_days: int = 90
    recent_announcements_days: int = 30

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"

        default_user = os.getenv("PGUSER") or os.getenv("USER") or "postgres"
        default_url = (
            f"postgresql+psycopg://{default_user}:"
            f"{os.getenv('PGPASSWORD', '')}@"
            f"{os.getenv('PGHOST', 'localhost')}:"
            f"{os.getenv('PGPORT', '5432')}/"
            f"{os.getenv('PGDATABASE', 'condopulse_dev')}"
        )
        raw_url = os.getenv("DATABASE_URL", default_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        backend = os.getenv("DATA_BACKEND", self.data_backend).strip().lower()
        if backend not in (DATA_BACKEND_SQL, DATA_BACKEND_MEMORY):
            raise ValueError(f"DATA_BACKEND must be 'sql' or 'memory', got {backend!r}")
        self.data_backend = backend
        self.memory_seed_path = os.getenv("MEMORY_SEED_PATH", self.memory_seed_path).strip()

        self.expiring_window_days = int(
            os.getenv("EXPIRING_WINDOW_DAYS", str(self.expiring_window_days))
        )
        self.recent_decisions_days = int(
            os.getenv("RECENT_DECISIONS_DAYS", str(self.recent_decisions_days))
        )
        self.recent_announcements_days = int(
            os.getenv("RECENT_ANNOUNCEMENTS_DAYS", str(self.recent_announcements_days))
        )

    @property
    def uses_memory_backend(self) -> bool:
        return self.data_backend == DATA_BACKEND_MEMORY
