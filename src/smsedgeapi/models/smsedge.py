from typing import Any, Literal

from pydantic import BaseModel, Field

from smsedgeapi.exceptions import NetworkError, ResponseParseError, ValidationFailed
from smsedgeapi.models.validation import FieldError

PARSE_ERROR_MESSAGE = "Failed To Parse Response As JSON"

Status = Literal[
    "success", "provider_error", "parse_error", "validation_error", "network_error"
]


class ResponseInfo(BaseModel):
    code: int
    description: str


class NormalizedResult(BaseModel):
    success: bool
    data: list[Any] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    response: ResponseInfo

    @classmethod
    def not_json(cls, body: str) -> "NormalizedResult":
        return cls(
            success=False,
            data=[],
            errors=[PARSE_ERROR_MESSAGE],
            response=ResponseInfo(code=500, description=f"Response Not JSON: {body}"),
        )


class SMSEdgeResponse:
    def __init__(
        self,
        status: Status,
        message: str,
        data: Any = None,
        errors: list[FieldError] | None = None,
    ) -> None:
        self.status = status
        self.message = message
        self.data = data
        self.errors = errors or []

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def raise_for_status(self) -> None:
        """Raise the exception matching a local failure status.

        ``provider_error`` is left alone: the provider answered and its
        payload is in ``data``.
        """
        if self.status == "validation_error":
            raise ValidationFailed(self.errors)
        if self.status == "network_error":
            raise NetworkError(self.message)
        if self.status == "parse_error":
            raise ResponseParseError(self.data)

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "message": self.message,
            "data": self.data,
            "errors": [error.model_dump() for error in self.errors],
        }

    def __repr__(self) -> str:
        return f"<SMSEdgeResponse status={self.status} message={self.message}>"
