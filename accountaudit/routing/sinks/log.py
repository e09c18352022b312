"""Log sink — writes the audit line to the ``accountaudit.audit`` logger.

Inside Lambda this lands in CloudWatch Logs, which is the audit trail the
deployment relies on.
"""

from __future__ import annotations

import logging

from accountaudit.models.audit import AuditRecord

AUDIT_LOGGER = "accountaudit.audit"


class LogSink:
    """Emits one INFO log line per audit record."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(AUDIT_LOGGER)

    @property
    def sink_name(self) -> str:
        return "log"

    def accept(self, record: AuditRecord) -> None:
        self._logger.info("%s", record.line())
