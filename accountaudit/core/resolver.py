"""Best-effort resolution of provisioning state for one identity.

Key layout
----------
* Contact address: ``/{run_id}/{identity}/email`` (one per identity).
* Temporary credential: ``{run_id}-temp-password`` (one per run, shared by
  every identity the run created).

Each lookup is independent and individually fault-tolerant: a
``StoreLookupError`` becomes a ``Fallback`` carrying the documented
placeholder, and processing continues.
"""

from __future__ import annotations

import logging

from accountaudit.models.lookups import (
    FALLBACK_CONTACT,
    FALLBACK_CREDENTIAL,
    Fallback,
    LookupResult,
    Resolved,
)
from accountaudit.stores import ParameterStore, SecretStore, StoreLookupError

logger = logging.getLogger(__name__)


def parameter_key(run_id: str, identity: str) -> str:
    """Return the parameter-store key for *identity*'s contact address."""
    return f"/{run_id}/{identity}/email"


def secret_key(run_id: str) -> str:
    """Return the secret-store key for the run's shared temporary credential."""
    return f"{run_id}-temp-password"


class StateResolver:
    """Reads contact and credential state for a single provisioning run."""

    def __init__(
        self,
        run_id: str,
        parameters: ParameterStore,
        secrets: SecretStore,
    ) -> None:
        self._run_id = run_id
        self._parameters = parameters
        self._secrets = secrets

    @property
    def run_id(self) -> str:
        return self._run_id

    @property
    def parameters(self) -> ParameterStore:
        return self._parameters

    @property
    def secrets(self) -> SecretStore:
        return self._secrets

    def resolve_contact(self, identity: str) -> LookupResult:
        key = parameter_key(self._run_id, identity)
        logger.info("Looking for parameter: %s", key)
        try:
            return Resolved(key=key, value=self._parameters.get_parameter(key))
        except StoreLookupError as exc:
            logger.warning(
                "Contact lookup failed for %s (%s); using fallback",
                key,
                exc.reason,
            )
            return Fallback(key=key, value=FALLBACK_CONTACT, reason=exc.reason)

    def resolve_credential(self) -> LookupResult:
        key = secret_key(self._run_id)
        logger.info("Looking for secret: %s", key)
        try:
            return Resolved(key=key, value=self._secrets.get_secret(key))
        except StoreLookupError as exc:
            logger.warning(
                "Credential lookup failed for %s (%s); using fallback",
                key,
                exc.reason,
            )
            return Fallback(key=key, value=FALLBACK_CREDENTIAL, reason=exc.reason)
