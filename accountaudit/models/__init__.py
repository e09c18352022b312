"""accountaudit data models (Pydantic v2, frozen)."""

from accountaudit.models.audit import ACKNOWLEDGEMENT, AuditRecord, ProcessResult
from accountaudit.models.events import (
    BareEvent,
    EventKind,
    NotificationEvent,
    ProviderAuditEvent,
    classify_event,
)
from accountaudit.models.lookups import (
    FALLBACK_CONTACT,
    FALLBACK_CREDENTIAL,
    Fallback,
    LookupResult,
    Resolved,
)

__all__ = [
    # events
    "EventKind",
    "ProviderAuditEvent",
    "BareEvent",
    "NotificationEvent",
    "classify_event",
    # lookups
    "FALLBACK_CONTACT",
    "FALLBACK_CREDENTIAL",
    "Resolved",
    "Fallback",
    "LookupResult",
    # audit
    "ACKNOWLEDGEMENT",
    "AuditRecord",
    "ProcessResult",
]
