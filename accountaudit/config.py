"""Runtime configuration — env-driven, Lambda-aware.

Centralized config using pydantic-settings for environment variable support.
Reads from a .env file and ACCOUNTAUDIT_* environment variables.  The
provisioning run id also honours ``AWS_STACK_NAME``, which is the variable
the deployment template injects into the function environment.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER = "accountaudit"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AuditConfig(BaseSettings):
    """Handler configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export ACCOUNTAUDIT_RUN_ID=demo
        export ACCOUNTAUDIT_LOG_LEVEL=DEBUG
        export ACCOUNTAUDIT_AUDIT_LOG_PATH=/tmp/audit.jsonl

    Inside Lambda the run id is normally taken from ``AWS_STACK_NAME``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ACCOUNTAUDIT_",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Provisioning run (one stack instance)
    run_id: str = Field(
        default="",
        validation_alias=AliasChoices("ACCOUNTAUDIT_RUN_ID", "AWS_STACK_NAME"),
    )

    # Runtime
    log_level: LogLevel = "INFO"

    # AWS client settings; reads are never retried internally
    region_name: str | None = None
    connect_timeout: float = 60.0
    read_timeout: float = 60.0

    # Optional JSON-lines audit trail next to the log sink
    audit_log_path: Path | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Set the package logger level, attaching a handler only if none exists.

    The Lambda runtime installs a handler on the root logger, so in that
    environment records simply propagate.  Local runs without any handler
    get a plain stderr ``StreamHandler``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logging.getLogger().handlers and not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    return logger
