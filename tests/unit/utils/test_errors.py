"""Tests covering the exception hierarchy exposed by :mod:`netspeak_client.utils.errors`."""

from __future__ import annotations

from netspeak_client.utils.errors import (
    CommunicationError,
    EncodingFault,
    InvalidParameterError,
    MalformedUrlError,
    NetspeakError,
)


def test_error_payload_is_serialisable() -> None:
    error = NetspeakError("boom", details={"context": "unit"}, code="custom_error")

    assert error.to_payload() == {
        "error": {"code": "custom_error", "message": "boom"},
        "details": {"context": "unit"},
    }


def test_subclasses_carry_their_default_codes() -> None:
    assert MalformedUrlError("x").code == "malformed_url"
    assert CommunicationError("x").code == "communication_error"
    assert EncodingFault("x").code == "encoding_fault"
    assert InvalidParameterError("x").code == "invalid_parameter"


def test_errors_fit_builtin_hierarchy() -> None:
    """Callers catching ``ValueError``/``OSError`` still see client failures."""
    assert isinstance(MalformedUrlError("x"), ValueError)
    assert isinstance(InvalidParameterError("x"), ValueError)
    assert isinstance(CommunicationError("x"), OSError)
    assert not isinstance(EncodingFault("x"), (ValueError, OSError))


def test_details_default_to_empty_dict() -> None:
    error = CommunicationError("unreachable")

    assert error.details == {}
    assert str(error) == "unreachable"
