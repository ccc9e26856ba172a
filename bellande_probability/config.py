from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = (
    "https://bellande-robotics-sensors-research-innovation-center.org"
    "/api/Bellande_Probability"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BELLANDE_")

    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None
    log_level: str = "WARNING"

settings = Settings()
