"""Core event-correlation logic: extraction, resolution, correlation."""

from accountaudit.core.correlator import EventCorrelator
from accountaudit.core.extractor import (
    SENTINEL_IDENTITY,
    MalformedEventError,
    extract_identity,
    normalize_request_parameters,
)
from accountaudit.core.resolver import StateResolver, parameter_key, secret_key

__all__ = [
    "EventCorrelator",
    "MalformedEventError",
    "SENTINEL_IDENTITY",
    "StateResolver",
    "extract_identity",
    "normalize_request_parameters",
    "parameter_key",
    "secret_key",
]
