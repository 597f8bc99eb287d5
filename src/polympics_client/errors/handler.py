"""Classification of HTTP responses into outcomes and errors."""

import json
from dataclasses import dataclass
from typing import Any

import httpx

from polympics_client.errors.exceptions import (
    ClientError,
    ResponseFormatError,
    ServerError,
    ValidationError,
)
from polympics_client.errors.models import ParameterIssue


@dataclass(frozen=True)
class Success:
    """A successful response with a decoded JSON body."""

    body: Any


@dataclass(frozen=True)
class EmptySuccess:
    """A successful response without a meaningful body."""


def _decode(status_code: int, content: bytes) -> Any:
    try:
        return json.loads(content)
    except (ValueError, TypeError) as e:
        raise ResponseFormatError(
            f"{status_code}: response body is not valid JSON: {e}", status_code=status_code
        ) from e


def _detail(status_code: int, data: Any) -> Any:
    if not isinstance(data, dict) or "detail" not in data:
        raise ResponseFormatError(f"{status_code}: error response has no 'detail'", status_code=status_code)
    return data["detail"]


def classify_response(
    status_code: int, content: bytes, *, expect_empty_body: bool = False
) -> Success | EmptySuccess:
    """Map a status code and raw body to an outcome.

    This is a pure function of its arguments.

    Args:
        status_code: HTTP status code
        content: Raw response body
        expect_empty_body: Treat any 2xx as EmptySuccess without decoding

    Returns:
        Success with the decoded body, or EmptySuccess

    Raises:
        ServerError: status >= 500 (body is never parsed)
        ValidationError: status 422
        ClientError: any other 4xx
        ResponseFormatError: the body could not be decoded where required
    """
    if status_code >= 500:
        raise ServerError(status_code)

    if status_code == 204 or (status_code < 300 and expect_empty_body):
        return EmptySuccess()

    data = _decode(status_code, content)

    if status_code < 400:
        return Success(data)

    detail = _detail(status_code, data)

    if status_code == 422:
        if not isinstance(detail, list):
            raise ResponseFormatError(f"{status_code}: 'detail' is not a list of issues", status_code=status_code)
        try:
            issues = [ParameterIssue.from_wire(item) for item in detail]
        except (KeyError, TypeError) as e:
            raise ResponseFormatError(f"{status_code}: malformed parameter issue: {e}", status_code=status_code) from e
        raise ValidationError(issues, status_code=status_code)

    if not isinstance(detail, str):
        detail = json.dumps(detail)
    raise ClientError(status_code, detail)


def raise_for_status(response: httpx.Response, *, expect_empty_body: bool = False) -> Success | EmptySuccess:
    """Classify an httpx response, raising for error outcomes.

    Args:
        response: HTTP response object
        expect_empty_body: Treat any 2xx as EmptySuccess

    Returns:
        The successful outcome

    Raises:
        PolympicsError subclass based on status code
    """
    return classify_response(response.status_code, response.content, expect_empty_body=expect_empty_body)
