"""Store protocols for provisioning state.

The handler reads from two external stores: a key-value parameter store
holding one contact address per identity, and a secret store holding one
temporary credential per provisioning run.  Both are read-only from the
handler's point of view.

Adapters raise ``StoreLookupError`` for every failure they can classify
(not found, access denied, transient fault, malformed response).  The
resolver turns that error into a fallback placeholder.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class StoreLookupError(LookupError):
    """Raised by a store adapter when a key cannot be read."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"{key}: {reason}")
        self.key = key
        self.reason = reason


@runtime_checkable
class ParameterStore(Protocol):
    """Protocol for the key-value parameter store (SSM Parameter Store)."""

    def get_parameter(self, name: str) -> str:
        """Return the string value stored under *name*.

        Raises
        ------
        StoreLookupError
            If the parameter cannot be read.
        """
        ...


@runtime_checkable
class SecretStore(Protocol):
    """Protocol for the secret store (Secrets Manager)."""

    def get_secret(self, secret_id: str) -> str:
        """Return the secret string stored under *secret_id*.

        Raises
        ------
        StoreLookupError
            If the secret cannot be read.
        """
        ...


__all__ = ["ParameterStore", "SecretStore", "StoreLookupError"]
