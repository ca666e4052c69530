from smsedgeapi.endpoints import ENDPOINTS
from smsedgeapi.exceptions import (
    NetworkError,
    ResponseParseError,
    RuleDefinitionError,
    SMSEdgeError,
    UnknownEndpointError,
    ValidationFailed,
)
from smsedgeapi.models.smsedge import NormalizedResult, SMSEdgeResponse
from smsedgeapi.smsedge import SMSEdge
from smsedgeapi.smsedge_api import DEFAULT_BASE_URL, SMSEdgeConfig
from smsedgeapi.validator import RuleValidator, validate

__all__ = [
    "DEFAULT_BASE_URL",
    "ENDPOINTS",
    "NetworkError",
    "NormalizedResult",
    "ResponseParseError",
    "RuleDefinitionError",
    "RuleValidator",
    "SMSEdge",
    "SMSEdgeConfig",
    "SMSEdgeError",
    "SMSEdgeResponse",
    "UnknownEndpointError",
    "ValidationFailed",
    "validate",
]
