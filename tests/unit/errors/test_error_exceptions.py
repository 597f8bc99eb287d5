"""Tests for structured API exceptions."""

import pytest

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
from polympics_client.errors.models import ParameterIssue


@pytest.mark.unit
def test_polympics_error_instantiation():
    """Test PolympicsError stores message and status code."""
    error = ResponseFormatError("Test error", status_code=200)

    assert str(error) == "Test error"
    assert error.status_code == 200


@pytest.mark.unit
def test_exception_family_is_flat():
    """Test every error derives directly from PolympicsError."""
    for exc_class in (TransportError, ServerError, EmptyResponseError, ValidationError, ClientError, ResponseFormatError):
        assert exc_class.__bases__ == (PolympicsError,)

    # 422 is not a ClientError
    assert not issubclass(ValidationError, ClientError)


@pytest.mark.unit
def test_each_error_has_distinct_kind():
    """Test each error class carries its own kind tag."""
    kinds = {
        TransportError: ErrorKind.TRANSPORT,
        ServerError: ErrorKind.SERVER,
        EmptyResponseError: ErrorKind.EMPTY_RESPONSE,
        ValidationError: ErrorKind.VALIDATION,
        ClientError: ErrorKind.CLIENT,
        ResponseFormatError: ErrorKind.RESPONSE_FORMAT,
    }

    for exc_class, kind in kinds.items():
        assert exc_class.kind is kind


@pytest.mark.unit
def test_server_error():
    """Test ServerError stores the status code."""
    error = ServerError(500)

    assert error.status_code == 500
    assert str(error) == "500: server error"


@pytest.mark.unit
def test_client_error():
    """Test ClientError stores code and detail."""
    error = ClientError(404, "Account not found.")

    assert error.status_code == 404
    assert error.detail == "Account not found."
    assert str(error) == "404: Account not found."


@pytest.mark.unit
def test_validation_error_message_lists_issues():
    """Test ValidationError renders one line per issue."""
    issues = [
        ParameterIssue(location=("body", "name"), message="field required", kind="value_error.missing"),
        ParameterIssue(location=("query", "page"), message="not an int", kind="type_error.integer"),
    ]

    error = ValidationError(issues)

    assert error.status_code == 422
    assert error.issues == issues
    assert str(error) == (
        "422: 2 parameter errors:\n"
        "  body -> name: field required (value_error.missing)\n"
        "  query -> page: not an int (type_error.integer)"
    )


@pytest.mark.unit
def test_empty_response_error():
    """Test EmptyResponseError defaults to status 204."""
    error = EmptyResponseError()

    assert error.status_code == 204


@pytest.mark.unit
def test_transport_error_has_no_status():
    """Test TransportError carries no status code."""
    error = TransportError("GET http://x failed")

    assert error.status_code is None
    assert error.kind is ErrorKind.TRANSPORT
