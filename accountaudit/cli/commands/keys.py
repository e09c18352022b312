"""``accountaudit keys`` — show the store keys derived for an identity."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from accountaudit.config import AuditConfig
from accountaudit.core.resolver import parameter_key, secret_key

console = Console()


def keys_cmd(
    identity: str = typer.Argument(..., help="Account name (userName)."),
    run_id: str = typer.Option(
        None,
        "--run-id",
        "-r",
        help="Provisioning run id (defaults to AWS_STACK_NAME / ACCOUNTAUDIT_RUN_ID).",
    ),
) -> None:
    """Print the parameter and secret keys the handler would read."""
    run = run_id if run_id is not None else AuditConfig().run_id

    table = Table(title=f"Store keys for {identity}")
    table.add_column("Store", style="cyan")
    table.add_column("Key", style="green")
    table.add_column("Scope")
    table.add_row("parameter", parameter_key(run, identity), "per identity")
    table.add_row("secret", secret_key(run), "per run")
    console.print(table)
