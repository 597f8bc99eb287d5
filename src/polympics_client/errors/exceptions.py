"""Exceptions for failed API calls.

Every failure is a ``PolympicsError`` tagged with an ``ErrorKind``, so callers
can either catch a specific subclass or branch on ``error.kind``.
"""

import enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from polympics_client.errors.models import ParameterIssue


class ErrorKind(enum.Enum):
    """The kind of failure an API call ended in."""

    TRANSPORT = "transport"
    SERVER = "server"
    EMPTY_RESPONSE = "empty_response"
    VALIDATION = "validation"
    CLIENT = "client"
    RESPONSE_FORMAT = "response_format"


class PolympicsError(Exception):
    """Base exception for API errors."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(PolympicsError):
    """The request never produced an HTTP response (connection, TLS, timeout)."""

    kind = ErrorKind.TRANSPORT


class ServerError(PolympicsError):
    """5xx server errors."""

    kind = ErrorKind.SERVER

    def __init__(self, status_code: int):
        super().__init__(f"{status_code}: server error", status_code=status_code)


class EmptyResponseError(PolympicsError):
    """The API answered 204 where a response body was required."""

    kind = ErrorKind.EMPTY_RESPONSE

    def __init__(self, status_code: int = 204):
        super().__init__(f"{status_code}: expected a response body, got none", status_code=status_code)


class ValidationError(PolympicsError):
    """422 Unprocessable Entity, with one issue per rejected parameter."""

    kind = ErrorKind.VALIDATION

    def __init__(self, issues: "list[ParameterIssue]", status_code: int = 422):
        lines = [f"{status_code}: {len(issues)} parameter errors:"]
        lines.extend(f"  {issue.describe()}" for issue in issues)
        super().__init__("\n".join(lines), status_code=status_code)
        self.issues = issues


class ClientError(PolympicsError):
    """4xx client errors other than 422."""

    kind = ErrorKind.CLIENT

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}", status_code=status_code)
        self.detail = detail


class ResponseFormatError(PolympicsError):
    """The response body was not in the format the API promises."""

    kind = ErrorKind.RESPONSE_FORMAT
