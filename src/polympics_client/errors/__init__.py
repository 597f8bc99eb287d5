"""Error handling and response classification for the Polympics client."""

from polympics_client.errors.exceptions import (
    ClientError,
    EmptyResponseError,
    ErrorKind,
    PolympicsError,
    ResponseFormatError,
    ServerError,
    TransportError,
    ValidationError,
)
from polympics_client.errors.handler import EmptySuccess, Success, classify_response, raise_for_status
from polympics_client.errors.models import ParameterIssue

__all__ = [
    "ClientError",
    "EmptyResponseError",
    "EmptySuccess",
    "ErrorKind",
    "ParameterIssue",
    "PolympicsError",
    "ResponseFormatError",
    "ServerError",
    "Success",
    "TransportError",
    "ValidationError",
    "classify_response",
    "raise_for_status",
]
