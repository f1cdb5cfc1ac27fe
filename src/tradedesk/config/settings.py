"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Return the default data directory based on platform."""
    return Path.home() / "Documents" / "TradeDesk Data"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "TradeDesk"
    app_version: str = "0.1.0"

    # Remote table storage; both must be non-empty to be used
    supabase_url: Optional[str] = None
    supabase_anon_key: Optional[str] = None

    # Local fallback storage
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # Live pricing
    price_feed_url: str = "https://min-api.cryptocompare.com/data/pricemulti"
    price_feed_timeout_seconds: float = 10.0
    price_refresh_interval_seconds: float = 15.0
    price_refresh_delay_seconds: float = 0.5
    enable_price_scheduler: bool = True

    @property
    def remote_storage_configured(self) -> bool:
        """True when both remote storage settings are present and non-empty."""
        return bool((self.supabase_url or "").strip() and (self.supabase_anon_key or "").strip())

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "tradedesk.db"
        return f"sqlite:///{db_path}"


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
