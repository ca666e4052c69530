from smsedgeapi.models.endpoint import Endpoint
from smsedgeapi.models.smsedge import NormalizedResult, ResponseInfo, SMSEdgeResponse
from smsedgeapi.models.validation import Constraint, FieldError, ValidationResult

__all__ = [
    "Constraint",
    "Endpoint",
    "FieldError",
    "NormalizedResult",
    "ResponseInfo",
    "SMSEdgeResponse",
    "ValidationResult",
]
