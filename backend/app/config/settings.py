from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # Storage
    USERS_FILE: str = Field("users.json")

    # App
    API_HOST: str = Field("0.0.0.0")
    API_PORT: int = Field(5000)
    LOG_LEVEL: str = Field("INFO")

    # Browser client origins allowed by CORS
    CORS_ORIGINS: list[str] = Field(["http://localhost:3000"])

    # Apply the REST required-field checks to live sendMessage events too
    VALIDATE_LIVE_MESSAGES: bool = Field(True)

    # Metrics
    METRICS_ENABLED: bool = Field(False)
    METRICS_PORT: int = Field(8001)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )


settings = Settings()
