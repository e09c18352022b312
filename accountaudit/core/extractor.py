"""Identity extraction from classified notification events.

Two paths, both exhaustive:

* ``ProviderAuditEvent``: ``detail.requestParameters`` is normalized to a
  mapping and ``userName`` is read from it.  Every failure here is fatal.
* ``BareEvent``: a manual or test invocation; the sentinel identity is used
  and extraction never fails.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from accountaudit.models.events import BareEvent, NotificationEvent, ProviderAuditEvent

logger = logging.getLogger(__name__)

SENTINEL_IDENTITY = "test-user"
IDENTITY_FIELD = "userName"


class MalformedEventError(ValueError):
    """Raised when a provider-audit event carries no usable identity.

    The offending raw event is attached as ``event`` so the caller can put
    it in the diagnostic trail.
    """

    def __init__(self, reason: str, event: Any = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.event = event


def normalize_request_parameters(params: Any, event: Any = None) -> Mapping[str, Any]:
    """Return ``requestParameters`` as a mapping.

    CloudTrail usually delivers a JSON object, but some routes hand over the
    same object serialized as a string.  This is the only place where
    deserialization can fail.
    """
    if isinstance(params, Mapping):
        return params

    if isinstance(params, (bytes, bytearray)):
        try:
            params = params.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedEventError(
                f"requestParameters is not valid UTF-8: {exc}", event
            ) from exc

    if isinstance(params, str):
        try:
            decoded = json.loads(params)
        except json.JSONDecodeError as exc:
            raise MalformedEventError(
                f"requestParameters is not valid JSON: {exc}", event
            ) from exc
        except RecursionError as exc:
            raise MalformedEventError(
                "requestParameters is nested too deeply to decode", event
            ) from exc
        if not isinstance(decoded, Mapping):
            raise MalformedEventError(
                f"requestParameters must decode to an object, got {type(decoded).__name__}",
                event,
            )
        return decoded

    raise MalformedEventError(
        f"requestParameters has unsupported type {type(params).__name__}", event
    )


def extract_identity(event: NotificationEvent) -> str:
    """Derive the subject identity from a classified event.

    Raises
    ------
    MalformedEventError
        If a provider-audit envelope is present but lacks
        ``requestParameters``, the parameters cannot be decoded, or
        ``userName`` is missing or empty.
    """
    if isinstance(event, BareEvent):
        logger.info(
            "No detail field found in event; treating it as a test invocation "
            "with identity %r",
            SENTINEL_IDENTITY,
        )
        return SENTINEL_IDENTITY

    if not isinstance(event, ProviderAuditEvent):
        raise TypeError(f"Unsupported event variant: {type(event).__name__}")

    detail = event.detail
    params = detail.get("requestParameters") if isinstance(detail, Mapping) else None
    if params is None:
        raise MalformedEventError("missing requestParameters", event.raw)

    mapping = normalize_request_parameters(params, event.raw)
    identity = mapping.get(IDENTITY_FIELD)
    if not isinstance(identity, str) or not identity:
        raise MalformedEventError("could not extract identity", event.raw)

    return identity
