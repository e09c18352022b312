"""Audit record and processing result models."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from accountaudit.models.events import EventKind
from accountaudit.models.lookups import LookupResult

ACKNOWLEDGEMENT = "Successfully processed user creation event"


class AuditRecord(BaseModel):
    """The single record correlating a new account with its provisioning state.

    Contact and credential are carried as lookup results so consumers can
    tell a real value from a placeholder without string comparison.  The
    record holds no timestamp or random id: the same event against the same
    stores yields an identical record.
    """

    model_config = ConfigDict(frozen=True)

    run_id: str
    identity: str
    event_kind: EventKind
    event_id: str = ""
    event_name: str = ""
    contact: LookupResult = Field(discriminator="status")
    credential: LookupResult = Field(discriminator="status")

    def line(self) -> str:
        """Render the human-readable audit line."""
        return (
            f"New user created - Username: {self.identity}, "
            f"Email: {self.contact.value}, "
            f"Temporary Password: {self.credential.value}"
        )

    @property
    def degraded(self) -> bool:
        """Whether either lookup fell back to a placeholder."""
        return self.contact.is_fallback or self.credential.is_fallback


class ProcessResult(BaseModel):
    """Structured success status returned to the invoking layer."""

    model_config = ConfigDict(frozen=True)

    status_code: int = 200
    body: str = ACKNOWLEDGEMENT
    record: AuditRecord

    def to_lambda_response(self) -> dict[str, Any]:
        """Return the API-Gateway-style dict the Lambda runtime expects."""
        return {"statusCode": self.status_code, "body": json.dumps(self.body)}
