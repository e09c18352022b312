"""In-memory stores for offline invocations and tests."""

from __future__ import annotations

from collections.abc import Mapping

from accountaudit.stores import StoreLookupError


class InMemoryParameterStore:
    """Dict-backed ``ParameterStore``.

    ``reads`` records every requested name so callers can check which keys
    were queried.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})
        self.reads: list[str] = []

    def get_parameter(self, name: str) -> str:
        self.reads.append(name)
        try:
            return self._values[name]
        except KeyError:
            raise StoreLookupError(name, "ParameterNotFound") from None


class InMemorySecretStore:
    """Dict-backed ``SecretStore``."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values = dict(values or {})
        self.reads: list[str] = []

    def get_secret(self, secret_id: str) -> str:
        self.reads.append(secret_id)
        try:
            return self._values[secret_id]
        except KeyError:
            raise StoreLookupError(secret_id, "ResourceNotFoundException") from None
