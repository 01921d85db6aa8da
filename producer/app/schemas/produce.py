from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProducePostRequest(_CamelModel):
    count: int = Field(..., ge=0, strict=True)
    interval_milliseconds: int = Field(..., ge=0, strict=True)
    text: str | None = None


class ProducePostResponse(_CamelModel):
    requested: int
    published: int


class ProduceFailedResponse(_CamelModel):
    requested: int
    attempted: int
    published: int
    error: str | None = None
    broker_status_code: int | None = None
