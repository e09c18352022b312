"""Lookup results for provisioning state — ``Resolved`` or ``Fallback``.

A lookup never raises into the correlator.  It produces exactly one of
these two frozen models, and the audit record keeps whichever it got.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

# Documented placeholders.  Operators tell a degraded audit line apart from
# a real one by comparing against these values.
FALLBACK_CONTACT = "example@example.com"
FALLBACK_CREDENTIAL = "test-password"


class Resolved(BaseModel):
    """A value read successfully from a store."""

    model_config = ConfigDict(frozen=True)

    status: Literal["resolved"] = "resolved"
    key: str
    value: str

    @property
    def is_fallback(self) -> bool:
        return False


class Fallback(BaseModel):
    """A placeholder substituted because the store read failed."""

    model_config = ConfigDict(frozen=True)

    status: Literal["fallback"] = "fallback"
    key: str
    value: str  # the placeholder
    reason: str = ""

    @property
    def is_fallback(self) -> bool:
        return True


LookupResult = Union[Resolved, Fallback]
