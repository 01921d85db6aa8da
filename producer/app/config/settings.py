"""Settings for the producer."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    dapr_host: str = Field("localhost", validation_alias="DAPR_HOST")
    dapr_http_port: int = Field(3500, validation_alias="DAPR_HTTP_PORT")
    binding_name: str = Field("message-queue", validation_alias="BINDING_NAME")

    broker_backend: str = Field("dapr", validation_alias="BROKER_BACKEND")
    publish_timeout_seconds: float = Field(10.0, validation_alias="PUBLISH_TIMEOUT_SECONDS")

    default_message_text: str = Field("Hello World", validation_alias="DEFAULT_MESSAGE_TEXT")

    readiness_ping_timeout_seconds: float = Field(5.0, validation_alias="READINESS_PING_TIMEOUT_SECONDS")

    @property
    def dapr_base_url(self) -> str:
        return f"http://{self.dapr_host}:{self.dapr_http_port}"
