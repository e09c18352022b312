"""Fan-out delivery of audit records.

The audit line is the only durable trace that an account was provisioned,
so a record counts as lost only when no sink takes it.  In that case the
invocation fails with ``SinkDispatchError`` and the event-routing layer
redelivers the event.  A single broken sink is logged and skipped.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from accountaudit.models.audit import AuditRecord

if TYPE_CHECKING:
    from accountaudit.routing.sinks import AuditSink

logger = logging.getLogger(__name__)


class SinkDispatchError(RuntimeError):
    """No sink accepted the audit record; the trail for that account is gone."""

    def __init__(self, identity: str, failures: dict[str, Exception]) -> None:
        detail = ", ".join(f"{name} ({exc})" for name, exc in failures.items())
        super().__init__(f"audit record for {identity} was not delivered: {detail}")
        self.identity = identity
        self.failures = failures


class SinkDispatcher:
    """Hands each ``AuditRecord`` to every registered sink in order."""

    def __init__(self, sinks: list[AuditSink] | None = None) -> None:
        self._sinks: list[AuditSink] = []
        for sink in sinks or []:
            self.register_sink(sink)

    @property
    def registered_sinks(self) -> list[AuditSink]:
        return list(self._sinks)

    def register_sink(self, sink: AuditSink) -> None:
        if sink in self._sinks:
            return
        self._sinks.append(sink)
        logger.debug("Audit sink %s registered", sink.sink_name)

    def dispatch(self, record: AuditRecord) -> list[str]:
        """Deliver *record* and return the names of the sinks that took it.

        Raises ``SinkDispatchError`` when sinks are registered but none of
        them accepted the record.
        """
        if not self._sinks:
            logger.warning(
                "No sinks registered; audit record for %s dropped", record.identity
            )
            return []

        delivered: list[str] = []
        failures: dict[str, Exception] = {}
        for sink in self._sinks:
            try:
                sink.accept(record)
            except Exception as exc:
                logger.exception(
                    "Audit sink %s rejected record for %s", sink.sink_name, record.identity
                )
                failures[sink.sink_name] = exc
            else:
                delivered.append(sink.sink_name)

        if not delivered:
            raise SinkDispatchError(record.identity, failures)
        if failures:
            logger.warning(
                "Audit record for %s delivered to %s only; failed: %s",
                record.identity,
                ", ".join(delivered),
                ", ".join(failures),
            )
        return delivered
