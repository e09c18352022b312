"""Shared test fixtures for accountaudit."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import pytest

from accountaudit.core.correlator import EventCorrelator
from accountaudit.core.resolver import StateResolver
from accountaudit.models.audit import AuditRecord
from accountaudit.routing.dispatcher import SinkDispatcher
from accountaudit.stores.memory import InMemoryParameterStore, InMemorySecretStore


class RecordingSink:
    """A sink that keeps every record it receives."""

    def __init__(self, name: str = "recording") -> None:
        self._name = name
        self.records: list[AuditRecord] = []

    @property
    def sink_name(self) -> str:
        return self._name

    def accept(self, record: AuditRecord) -> None:
        self.records.append(record)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep host environment and .env files out of AuditConfig."""
    monkeypatch.delenv("AWS_STACK_NAME", raising=False)
    for name in (
        "RUN_ID",
        "LOG_LEVEL",
        "REGION_NAME",
        "CONNECT_TIMEOUT",
        "READ_TIMEOUT",
        "AUDIT_LOG_PATH",
    ):
        monkeypatch.delenv(f"ACCOUNTAUDIT_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo level changes made by configure_logging between tests."""
    logger = logging.getLogger("accountaudit")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers


@pytest.fixture
def run_id() -> str:
    """Provide a deterministic provisioning run id."""
    return "demo"


@pytest.fixture
def parameter_store(run_id: str) -> InMemoryParameterStore:
    """Parameter store holding alice's contact address."""
    return InMemoryParameterStore({f"/{run_id}/alice/email": "alice@co.com"})


@pytest.fixture
def secret_store(run_id: str) -> InMemorySecretStore:
    """Secret store holding the run's shared temporary password."""
    return InMemorySecretStore({f"{run_id}-temp-password": "Xy9!aB2c"})


@pytest.fixture
def empty_parameter_store() -> InMemoryParameterStore:
    return InMemoryParameterStore()


@pytest.fixture
def empty_secret_store() -> InMemorySecretStore:
    return InMemorySecretStore()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_correlator(
    run_id: str,
    parameter_store: InMemoryParameterStore,
    secret_store: InMemorySecretStore,
    recording_sink: RecordingSink,
) -> Callable[..., EventCorrelator]:
    """Factory fixture: build an EventCorrelator wired to in-memory stores."""

    def _factory(
        parameters: Any = None,
        secrets: Any = None,
        sinks: list[Any] | None = None,
        run: str | None = None,
    ) -> EventCorrelator:
        resolver = StateResolver(
            run_id=run if run is not None else run_id,
            parameters=parameters if parameters is not None else parameter_store,
            secrets=secrets if secrets is not None else secret_store,
        )
        dispatcher = SinkDispatcher(sinks if sinks is not None else [recording_sink])
        return EventCorrelator(resolver, dispatcher)

    return _factory


@pytest.fixture
def correlator(make_correlator: Callable[..., EventCorrelator]) -> EventCorrelator:
    """Convenience: a correlator with the default stores and recording sink."""
    return make_correlator()


# ---------------------------------------------------------------------------
# Event factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_provider_event() -> Callable[..., dict[str, Any]]:
    """Factory fixture: build an EventBridge CloudTrail CreateUser event."""

    def _factory(
        user_name: Any = "alice",
        serialized: bool = False,
        **overrides: Any,
    ) -> dict[str, Any]:
        params: Any = {"userName": user_name, "path": "/"}
        if serialized:
            params = json.dumps(params)
        event: dict[str, Any] = {
            "version": "0",
            "id": "6a7e8feb-b491-4cf7-a9f1-bf3703467718",
            "detail-type": "AWS API Call via CloudTrail",
            "source": "aws.iam",
            "account": "123456789012",
            "time": "2024-05-01T12:00:00Z",
            "region": "us-east-1",
            "detail": {
                "eventSource": "iam.amazonaws.com",
                "eventName": "CreateUser",
                "requestParameters": params,
            },
        }
        event.update(overrides)
        return event

    return _factory
