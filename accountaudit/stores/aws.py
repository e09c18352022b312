"""boto3-backed store adapters for SSM Parameter Store and Secrets Manager.

Clients are created lazily on the first read so that a missing region or
credential chain surfaces as a ``StoreLookupError`` (and therefore a
fallback) instead of failing handler construction.  Each read is a single
attempt: retries are disabled in the botocore ``Config`` because the
event-routing layer owns redelivery.
"""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from accountaudit.config import AuditConfig
from accountaudit.stores import StoreLookupError

logger = logging.getLogger(__name__)


def build_client_config(config: AuditConfig) -> Config:
    """Return the botocore client config: configured timeouts, no retries."""
    return Config(
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )


def _classify(exc: Exception) -> str:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code", "ClientError")
    return type(exc).__name__


class _BotoStore:
    service_name = ""

    def __init__(self, client: Any = None, config: AuditConfig | None = None) -> None:
        self._client = client
        self._config = config or AuditConfig()

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = boto3.client(
                self.service_name,
                region_name=self._config.region_name,
                config=build_client_config(self._config),
            )
            logger.debug(
                "Created %s client (region=%s)",
                self.service_name,
                self._client.meta.region_name,
            )
        return self._client


class SsmParameterStore(_BotoStore):
    """``ParameterStore`` backed by ``ssm:GetParameter``."""

    service_name = "ssm"

    def get_parameter(self, name: str) -> str:
        try:
            response = self.client.get_parameter(Name=name)
            return response["Parameter"]["Value"]
        except (ClientError, BotoCoreError) as exc:
            raise StoreLookupError(name, _classify(exc)) from exc
        except (KeyError, TypeError) as exc:
            raise StoreLookupError(name, f"malformed response: {exc!r}") from exc


class SecretsManagerStore(_BotoStore):
    """``SecretStore`` backed by ``secretsmanager:GetSecretValue``.

    Only string secrets are supported; a binary-only secret is reported as
    a lookup failure.
    """

    service_name = "secretsmanager"

    def get_secret(self, secret_id: str) -> str:
        try:
            response = self.client.get_secret_value(SecretId=secret_id)
        except (ClientError, BotoCoreError) as exc:
            raise StoreLookupError(secret_id, _classify(exc)) from exc

        secret = response.get("SecretString")
        if not isinstance(secret, str):
            raise StoreLookupError(secret_id, "SecretString missing from response")
        return secret
