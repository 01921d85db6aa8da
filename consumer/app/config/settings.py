from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Simulated per-message work; the HTTP response waits for it to finish.
    processing_delay_seconds: float = Field(5.0, ge=0, validation_alias="PROCESSING_DELAY_SECONDS")
