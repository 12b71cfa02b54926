from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal, Optional

class Settings(BaseSettings):
    # Language Settings
    DEFAULT_LANG: str = "en"

    # Transcript Sources
    RELAY_URL: str = "http://127.0.0.1:5000/api/transcript"
    REQUEST_TIMEOUT: Optional[float] = 30.0
    USER_AGENT: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

    # Relay Server
    RELAY_HOST: str = "127.0.0.1"
    RELAY_PORT: int = 5000

    # System Settings
    LOG_LEVEL: str = "INFO"
    MAX_RETRIES: int = 2

    # Presentation
    OUTPUT_DIR: str = "outputs"
    THEME: Literal["light", "dark"] = "dark"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
