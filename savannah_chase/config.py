from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):  # load SAVANNAH_* key=value pairs from env / .env
    """Runtime settings for the game UI and the assist client."""

    GEMINI_API_KEY: Optional[str] = None  # assist buttons are disabled without it
    ASSIST_MODEL: str = "gemini-2.5-flash"
    AI_MOVE_DELAY_SECONDS: float = 1.5
    AUTO_RESET_SECONDS: float = 3.0
    PLAYER_ONE_NAME: str = "AI Opponent"
    PLAYER_TWO_NAME: str = "Human Player"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SAVANNAH_",
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def assist_enabled(self) -> bool:
        return bool(self.GEMINI_API_KEY)


@lru_cache
def get_settings() -> Settings:
    return Settings()
