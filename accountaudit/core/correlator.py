"""EventCorrelator — turns one account-creation event into one audit record.

Lifecycle of ``process(event)``:

    classify -> extract identity -> resolve contact + credential
        -> build AuditRecord -> dispatch to sinks -> ProcessResult

Only the first two steps can fail the invocation.  Lookups degrade to
placeholders, and the record is always emitted once an identity is known.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from accountaudit.core.extractor import extract_identity
from accountaudit.core.resolver import StateResolver
from accountaudit.models.audit import AuditRecord, ProcessResult
from accountaudit.models.events import ProviderAuditEvent, classify_event
from accountaudit.routing.dispatcher import SinkDispatcher
from accountaudit.routing.sinks.log import LogSink

logger = logging.getLogger(__name__)

EXPECTED_EVENT_NAME = "CreateUser"


def dump_event(event: Any) -> str:
    """Serialize a raw event for the diagnostic trail, never raising."""
    try:
        return json.dumps(event, default=str)
    except (TypeError, ValueError, RecursionError):
        pass
    try:
        return repr(event)
    except RecursionError:
        return f"<{type(event).__name__} nested too deeply to render>"


class EventCorrelator:
    """Correlates a new-account event with its provisioning state.

    Parameters
    ----------
    resolver:
        Reads the contact address and shared credential for the run.
    dispatcher:
        Delivers the audit record.  Defaults to a dispatcher with a single
        ``LogSink``.
    """

    def __init__(
        self,
        resolver: StateResolver,
        dispatcher: SinkDispatcher | None = None,
    ) -> None:
        self._resolver = resolver
        self._dispatcher = dispatcher or SinkDispatcher([LogSink()])

    @property
    def resolver(self) -> StateResolver:
        return self._resolver

    @property
    def dispatcher(self) -> SinkDispatcher:
        return self._dispatcher

    def process(self, event: Any) -> ProcessResult:
        """Process one notification event.

        Raises
        ------
        MalformedEventError
            If a provider-audit envelope is present but no identity can be
            derived from it.  The raw event is logged before re-raising.
        SinkDispatchError
            If every audit sink fails.
        """
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Received event: %s", dump_event(event))

        try:
            classified = classify_event(event)
            identity = extract_identity(classified)
        except Exception as exc:
            logger.error("Error processing event: %s", exc)
            logger.error("Event structure: %s", dump_event(event))
            raise

        if isinstance(classified, ProviderAuditEvent) and classified.event_name not in (
            "",
            EXPECTED_EVENT_NAME,
        ):
            logger.warning(
                "Event %s carries eventName %r, expected %r",
                classified.event_id or "<no id>",
                classified.event_name,
                EXPECTED_EVENT_NAME,
            )

        logger.info("Processing for user: %s", identity)

        contact = self._resolver.resolve_contact(identity)
        credential = self._resolver.resolve_credential()

        record = AuditRecord(
            run_id=self._resolver.run_id,
            identity=identity,
            event_kind=classified.kind,
            event_id=getattr(classified, "event_id", ""),
            event_name=getattr(classified, "event_name", ""),
            contact=contact,
            credential=credential,
        )
        if record.degraded:
            logger.info("Audit record for %s uses fallback placeholders", identity)

        self._dispatcher.dispatch(record)
        return ProcessResult(record=record)
