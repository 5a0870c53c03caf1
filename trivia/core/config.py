from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    quiz_question_count: int = Field(default=10, alias="QUIZ_QUESTION_COUNT")
    quiz_category: str | None = Field(default=None, alias="QUIZ_CATEGORY")
    quiz_difficulty: str | None = Field(default=None, alias="QUIZ_DIFFICULTY")

    open_trivia_url: str = Field(default="https://opentdb.com/api.php", alias="OPEN_TRIVIA_URL")
    open_trivia_timeout_seconds: float = Field(default=10.0, alias="OPEN_TRIVIA_TIMEOUT_SECONDS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
