"""Inbound notification events — tagged at entry into two exhaustive variants.

The event-routing layer delivers either the provider-audit shape (an
EventBridge envelope wrapping a CloudTrail ``detail`` record) or, for manual
and test invocations, an arbitrary payload with no ``detail`` at all.
``classify_event`` makes that decision once so the rest of the handler never
probes fields on the raw payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class EventKind(str, Enum):
    """The two recognised event shapes."""

    PROVIDER_AUDIT = "provider_audit"
    BARE = "bare"


def _text(container: Any, key: str) -> str:
    if isinstance(container, Mapping):
        value = container.get(key)
        if isinstance(value, str):
            return value
    return ""


class ProviderAuditEvent(BaseModel):
    """An event carrying the provider-audit envelope (``detail`` present).

    Only ``detail`` is load-bearing.  The remaining fields are copied from
    the EventBridge envelope and the CloudTrail record for diagnostics and
    default to ``""`` when absent or not strings.
    """

    model_config = ConfigDict(frozen=True)

    kind: EventKind = EventKind.PROVIDER_AUDIT
    raw: Any
    detail: Any
    event_id: str = ""
    source: str = ""
    detail_type: str = ""
    time: str = ""
    event_name: str = ""  # e.g. "CreateUser"
    event_source: str = ""  # e.g. "iam.amazonaws.com"

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> ProviderAuditEvent:
        detail = raw["detail"]
        return cls(
            raw=raw,
            detail=detail,
            event_id=_text(raw, "id"),
            source=_text(raw, "source"),
            detail_type=_text(raw, "detail-type"),
            time=_text(raw, "time"),
            event_name=_text(detail, "eventName"),
            event_source=_text(detail, "eventSource"),
        )


class BareEvent(BaseModel):
    """A synthetic or test invocation without the provider-audit envelope."""

    model_config = ConfigDict(frozen=True)

    kind: EventKind = EventKind.BARE
    raw: Any = None


NotificationEvent = Union[ProviderAuditEvent, BareEvent]


def classify_event(raw: Any) -> NotificationEvent:
    """Tag *raw* as a provider-audit event or a bare synthetic payload.

    Any mapping that has a ``detail`` key is treated as the provider-audit
    shape, even when ``detail`` itself is null or malformed; validation of
    its contents happens during identity extraction.  Everything else,
    including non-mapping payloads, is bare.
    """
    if isinstance(raw, Mapping) and "detail" in raw:
        return ProviderAuditEvent.from_raw(raw)
    return BareEvent(raw=raw)
