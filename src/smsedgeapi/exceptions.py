from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from smsedgeapi.models.validation import FieldError


class SMSEdgeError(Exception):
    pass


class RuleDefinitionError(SMSEdgeError, ValueError):
    pass


class UnknownEndpointError(SMSEdgeError, KeyError):
    pass


class NetworkError(SMSEdgeError):
    pass


class ValidationFailed(SMSEdgeError):
    def __init__(self, errors: "list[FieldError]") -> None:
        self.errors = errors
        details = "; ".join(error.message for error in errors)
        super().__init__(f"Validation failed: {details}")


class ResponseParseError(SMSEdgeError):
    def __init__(self, payload: Any) -> None:
        self.payload = payload
        super().__init__("Failed To Parse Response As JSON")
