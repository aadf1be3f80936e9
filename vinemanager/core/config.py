from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Session store
    SEED_MOCK_DATA: bool = True

    # Simulated latency for the canned integrations
    ASSISTANT_REPLY_DELAY_SECONDS: float = 1.5
    WEATHER_REFRESH_DELAY_SECONDS: float = 1.0

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "http://localhost:5173,http://localhost:8080"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",")]


settings = Settings()
