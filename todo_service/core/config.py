from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the application."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Todo Service"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    DEBUG: bool = False
    DATABASE_URL: str = "sqlite:///./todos.db"
    SKIP_DB_INIT: bool = False  # set when the schema is managed outside the app
    SEED_DB: bool = False
    SEED_FILE: Path = Path("seed_data.json")  # resolved against the working directory
    LOG_LEVEL: str = "INFO"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")


settings = Settings()
