from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from typing_extensions import Annotated

DEFAULT_BASE_URL = "https://api.smsedge.io/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "smsedgeapi-python",
}


class SMSEdgeConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    base_url: str = DEFAULT_BASE_URL
    timeout: Annotated[float, Field(gt=0)] = DEFAULT_TIMEOUT
    api_key_param: Annotated[str, Field(min_length=1)] = "api_key"

    @field_validator("api_key")
    @classmethod
    def api_key_not_empty(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("api_key must not be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class SMSEdgeAPI:
    def __init__(self, config: SMSEdgeConfig) -> None:
        self.config = config

    @property
    def headers(self) -> dict[str, str]:
        return dict(DEFAULT_HEADERS)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path}"

    def build_params(self, fields: dict[str, Any]) -> dict[str, str | int | float]:
        """Query parameters for one request, API key included.

        ``None`` values are left out and booleans are sent as ``true``/``false``.
        """
        params: dict[str, str | int | float] = {}
        for key, value in fields.items():
            if value is None or key == self.config.api_key_param:
                continue
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            else:
                params[key] = value
        params[self.config.api_key_param] = self.config.api_key.get_secret_value()
        return params
