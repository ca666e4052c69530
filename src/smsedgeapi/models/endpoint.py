from pydantic import BaseModel, ConfigDict, field_validator

from smsedgeapi.models.validation import Constraint


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    description: str = ""
    rules: dict[str, list[Constraint]] = {}

    @field_validator("path")
    @classmethod
    def relative_path(cls, value: str) -> str:
        if value.startswith("/") or "://" in value or not value.endswith("/"):
            raise ValueError(f"Endpoint path must be relative and end with '/': {value}")
        return value
