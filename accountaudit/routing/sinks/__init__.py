"""Sink protocol for audit record emission.

All sinks implement the ``AuditSink`` protocol: a ``sink_name`` property
and an ``accept(record)`` method.  The dispatcher calls ``accept`` on every
registered sink for every audit record.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from accountaudit.models.audit import AuditRecord


@runtime_checkable
class AuditSink(Protocol):
    """Protocol that every audit sink must implement.

    Attributes
    ----------
    sink_name : str
        A unique human-readable identifier for this sink instance
        (e.g. ``"log"``, ``"jsonl"``).
    """

    @property
    def sink_name(self) -> str:
        """Return the unique name of this sink."""
        ...

    def accept(self, record: AuditRecord) -> None:
        """Accept and persist an audit record.

        Failures may raise; the dispatcher logs them and continues to the
        next sink.
        """
        ...
