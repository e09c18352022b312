"""JSON-lines sink — appends audit records to a local file.

Each line holds the dumped record, the rendered ``line`` and a ``digest``.
The digest covers the record only, so a redelivered event resolved against
unchanged stores yields the same digest and can be collapsed downstream.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any

from accountaudit.models.audit import AuditRecord

logger = logging.getLogger(__name__)


def _canonical(obj: Any) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":")).encode("utf-8")


def record_digest(data: dict[str, Any]) -> str:
    """SHA-256 over the sorted, compact JSON form of a dumped record."""
    return hashlib.sha256(_canonical(data)).hexdigest()


class JsonLinesSink:
    """Appends audit records to a JSON-lines file.

    Parameters
    ----------
    path:
        Target file.  Parent directories are created on construction.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def sink_name(self) -> str:
        return "jsonl"

    @property
    def path(self) -> Path:
        return self._path

    def accept(self, record: AuditRecord) -> None:
        data = record.model_dump(mode="json")
        entry = {"digest": record_digest(data), "line": record.line(), "record": data}
        with self._path.open("ab") as fh:
            fh.write(_canonical(entry) + b"\n")

        logger.debug("JsonLinesSink: appended %s to %s", entry["digest"], self._path)
