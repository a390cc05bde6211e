import os
from functools import lru_cache
from pathlib import Path


class Settings:
    def __init__(
        self,
        database_url: str,
        timezone: str,
        log_level: str,
        host: str,
        port: int,
    ) -> None:
        self.database_url = database_url
        self.timezone = timezone
        self.log_level = log_level
        self.host = host
        self.port = port


def _ensure_data_dir() -> Path:
    root = Path(os.getenv("SHOPLEDGER_DATA_DIR", "./data")).resolve()
    root.mkdir(parents=True, exist_ok=True)
    return root


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    database_url = os.getenv("SHOPLEDGER_DATABASE_URL")
    if not database_url:
        default_db = _ensure_data_dir() / "shop_ledger.db"
        database_url = f"sqlite:///{default_db}"
    timezone = os.getenv("SHOPLEDGER_TIMEZONE", "Asia/Kolkata")
    log_level = os.getenv("SHOPLEDGER_LOG_LEVEL", "INFO").upper()
    host = os.getenv("SHOPLEDGER_HOST", "0.0.0.0")
    port = int(os.getenv("SHOPLEDGER_PORT", "8000"))
    return Settings(
        database_url=database_url,
        timezone=timezone,
        log_level=log_level,
        host=host,
        port=port,
    )
