"""Unit tests for identity extraction and requestParameters normalization."""

from __future__ import annotations

import json

import pytest

from accountaudit.core.extractor import (
    SENTINEL_IDENTITY,
    MalformedEventError,
    extract_identity,
    normalize_request_parameters,
)
from accountaudit.models.events import BareEvent, classify_event


# ---------------------------------------------------------------------------
# Test: normalize_request_parameters
# ---------------------------------------------------------------------------


class TestNormalizeRequestParameters:
    """Mappings pass through; strings are decoded once; anything else fails."""

    def test_mapping_passes_through(self):
        params = {"userName": "alice"}
        assert normalize_request_parameters(params) is params

    def test_json_string_is_decoded(self):
        assert normalize_request_parameters('{"userName": "bob"}') == {"userName": "bob"}

    def test_json_bytes_are_decoded(self):
        assert normalize_request_parameters(b'{"userName": "carol"}') == {"userName": "carol"}

    def test_invalid_json_raises(self):
        with pytest.raises(MalformedEventError, match="not valid JSON"):
            normalize_request_parameters("{userName: alice")

    def test_invalid_json_chains_decode_error(self):
        with pytest.raises(MalformedEventError) as excinfo:
            normalize_request_parameters("not json")
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_json_array_rejected(self):
        with pytest.raises(MalformedEventError, match="must decode to an object"):
            normalize_request_parameters('["alice"]')

    def test_unsupported_type_rejected(self):
        with pytest.raises(MalformedEventError, match="unsupported type int"):
            normalize_request_parameters(42)

    def test_error_carries_event(self):
        raw = {"detail": {"requestParameters": "{"}}
        with pytest.raises(MalformedEventError) as excinfo:
            normalize_request_parameters("{", raw)
        assert excinfo.value.event is raw


# ---------------------------------------------------------------------------
# Test: extract_identity
# ---------------------------------------------------------------------------


class TestExtractIdentity:
    def test_structured_parameters(self, make_provider_event):
        event = classify_event(make_provider_event("alice"))
        assert extract_identity(event) == "alice"

    def test_serialized_parameters(self, make_provider_event):
        event = classify_event(make_provider_event("bob", serialized=True))
        assert extract_identity(event) == "bob"

    def test_bare_event_uses_sentinel(self):
        assert extract_identity(BareEvent(raw={})) == SENTINEL_IDENTITY
        assert SENTINEL_IDENTITY == "test-user"

    def test_bare_event_logs_diagnostic(self, caplog):
        with caplog.at_level("INFO", logger="accountaudit"):
            extract_identity(BareEvent(raw={"foo": "bar"}))
        assert "No detail field found" in caplog.text

    def test_missing_request_parameters(self):
        event = classify_event({"detail": {"eventName": "CreateUser"}})
        with pytest.raises(MalformedEventError, match="missing requestParameters"):
            extract_identity(event)

    def test_missing_user_name(self):
        event = classify_event({"detail": {"requestParameters": {"path": "/"}}})
        with pytest.raises(MalformedEventError, match="could not extract identity"):
            extract_identity(event)

    def test_empty_user_name(self, make_provider_event):
        event = classify_event(make_provider_event(""))
        with pytest.raises(MalformedEventError, match="could not extract identity"):
            extract_identity(event)

    def test_reason_attribute(self):
        event = classify_event({"detail": {}})
        with pytest.raises(MalformedEventError) as excinfo:
            extract_identity(event)
        assert excinfo.value.reason == "missing requestParameters"
        assert excinfo.value.event == {"detail": {}}

    def test_malformed_error_is_value_error(self):
        assert issubclass(MalformedEventError, ValueError)
