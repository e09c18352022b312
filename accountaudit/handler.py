"""AWS Lambda entry point.

Configure the function with ``Handler: accountaudit.handler.lambda_handler``.
The run id comes from ``AWS_STACK_NAME`` (or ``ACCOUNTAUDIT_RUN_ID``).
"""

from __future__ import annotations

import logging
from typing import Any

from accountaudit.config import AuditConfig, configure_logging
from accountaudit.core.correlator import EventCorrelator
from accountaudit.core.resolver import StateResolver
from accountaudit.routing.dispatcher import SinkDispatcher
from accountaudit.routing.sinks.jsonl import JsonLinesSink
from accountaudit.routing.sinks.log import LogSink
from accountaudit.stores import ParameterStore, SecretStore
from accountaudit.stores.aws import SecretsManagerStore, SsmParameterStore

logger = logging.getLogger(__name__)


def build_correlator(
    config: AuditConfig,
    *,
    parameters: ParameterStore | None = None,
    secrets: SecretStore | None = None,
) -> EventCorrelator:
    """Wire an ``EventCorrelator`` from configuration.

    Stores default to the boto3 adapters.  The JSON-lines sink is added
    when ``config.audit_log_path`` is set.
    """
    resolver = StateResolver(
        run_id=config.run_id,
        parameters=parameters if parameters is not None else SsmParameterStore(config=config),
        secrets=secrets if secrets is not None else SecretsManagerStore(config=config),
    )
    dispatcher = SinkDispatcher([LogSink()])
    if config.audit_log_path is not None:
        dispatcher.register_sink(JsonLinesSink(config.audit_log_path))
    return EventCorrelator(resolver, dispatcher)


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Process one EventBridge delivery and return the Lambda response.

    ``MalformedEventError`` propagates so the invocation is marked failed
    and the routing layer applies its retry policy.
    """
    config = AuditConfig()
    configure_logging(config.log_level)
    if not config.run_id:
        logger.warning("No provisioning run id configured; store lookups will miss")

    correlator = build_correlator(config)
    return correlator.process(event).to_lambda_response()
