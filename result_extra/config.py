"""Library configuration loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from RESULT_EXTRA_* environment variables."""

    # Logging Configuration
    log_level: str = "INFO"
    json_logs: bool = False

    model_config = SettingsConfigDict(
        env_prefix="RESULT_EXTRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
