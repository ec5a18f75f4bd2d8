"""Application settings, read from environment variables (prefix TICTACTOE_) or a .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TICTACTOE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8000
    # Used to build the URL of a newly created game
    base_url: str = "http://127.0.0.1:8000"
    log_level: str = "INFO"
    debug: bool = False

    def game_url(self, game_id: str) -> str:
        return f"{self.base_url.rstrip('/')}/games/{game_id}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
