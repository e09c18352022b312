"""``accountaudit invoke`` — run one event file through the correlator.

Useful for replaying a captured EventBridge delivery or sending a synthetic
payload.  With ``--offline`` the stores are in-memory and seeded from
``--param`` / ``--secret`` options instead of AWS.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from accountaudit.config import AuditConfig, configure_logging
from accountaudit.core.extractor import MalformedEventError
from accountaudit.handler import build_correlator
from accountaudit.stores.memory import InMemoryParameterStore, InMemorySecretStore

console = Console()


def _parse_pairs(pairs: list[str] | None, option: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint=option)
        values[key] = value
    return values


def invoke_cmd(
    event_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON file holding the event payload.",
    ),
    run_id: str = typer.Option(
        None,
        "--run-id",
        "-r",
        help="Provisioning run id (defaults to AWS_STACK_NAME / ACCOUNTAUDIT_RUN_ID).",
    ),
    offline: bool = typer.Option(
        False,
        "--offline",
        help="Use in-memory stores instead of SSM and Secrets Manager.",
    ),
    param: list[str] = typer.Option(
        None,
        "--param",
        "-p",
        help="Offline parameter as KEY=VALUE (repeatable).",
    ),
    secret: list[str] = typer.Option(
        None,
        "--secret",
        "-s",
        help="Offline secret as KEY=VALUE (repeatable).",
    ),
    audit_log: Path = typer.Option(
        None,
        "--audit-log",
        help="Also append the record to this JSON-lines file.",
    ),
) -> None:
    """Process one event and print the resulting audit line."""
    overrides: dict[str, object] = {}
    if run_id is not None:
        overrides["run_id"] = run_id
    if audit_log is not None:
        overrides["audit_log_path"] = audit_log
    config = AuditConfig(**overrides)
    configure_logging(config.log_level)

    try:
        event = json.loads(event_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        console.print(f"[red]Event file is not valid JSON:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    if offline:
        correlator = build_correlator(
            config,
            parameters=InMemoryParameterStore(_parse_pairs(param, "--param")),
            secrets=InMemorySecretStore(_parse_pairs(secret, "--secret")),
        )
    else:
        correlator = build_correlator(config)

    try:
        result = correlator.process(event)
    except MalformedEventError as exc:
        console.print(f"[red]Malformed event:[/red] {exc.reason}")
        raise typer.Exit(code=1) from exc

    record = result.record
    console.print()
    console.print(
        Panel(
            "\n".join([
                f"[bold]Run ID:[/bold]      {escape(record.run_id) or '(unset)'}",
                f"[bold]Identity:[/bold]    {escape(record.identity)}",
                f"[bold]Event kind:[/bold]  {record.event_kind.value}",
                f"[bold]Contact:[/bold]     {record.contact.status} ({escape(record.contact.key)})",
                f"[bold]Credential:[/bold]  {record.credential.status} ({escape(record.credential.key)})",
                f"[bold]Status:[/bold]      {result.status_code} {result.body}",
            ]),
            title="[bold]accountaudit[/bold]",
            border_style="yellow" if record.degraded else "green",
            padding=(1, 2),
        )
    )

    # Print the audit line plainly for scripting
    console.print(record.line(), markup=False, highlight=False, soft_wrap=True)
