from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """
    Database connection and pool settings.
    Loaded automatically from .env with prefix DB_*
    """

    url: str = "sqlite+aiosqlite:///./storefront.db"

    # Connection pool settings
    pool_size: int = 10
    max_overflow: int = 0
    pool_timeout: int = 30
    pool_recycle: int = 3600  # 1 hour

    # Seconds a SQLite writer waits on the database lock
    sqlite_busy_timeout: float = 30.0

    # Echo SQL (for debugging)
    echo_sql: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DB_",
        "extra": "ignore",
    }

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")
