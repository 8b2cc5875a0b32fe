"""Application configuration via pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MATCHUP_NOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Settings
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000

    # CORS - comma-separated origins (env var: MATCHUP_NOTES_CORS_ORIGINS)
    cors_origins: str = "http://localhost:5173,http://127.0.0.1:5173"

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # Storage - empty means the platform data directory
    data_dir: str = ""

    # Local game client
    lockfile_path: str = ""
    client_process_name: str = "LeagueClientUx.exe"
    client_username: str = "riot"
    request_timeout: float = 10.0
    default_import_count: int = 20

    @computed_field
    @property
    def resolved_lockfile_path(self) -> Path:
        """Lockfile location used on non-Windows hosts."""
        if self.lockfile_path:
            return Path(self.lockfile_path).expanduser()
        return Path.home() / ".config" / "riot-games" / "league-of-legends" / "lockfile"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
