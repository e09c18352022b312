"""Main Typer application — imports and registers all CLI commands.

Entry point: ``accountaudit`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from accountaudit.cli.commands.invoke import invoke_cmd
from accountaudit.cli.commands.keys import keys_cmd

app = typer.Typer(
    name="accountaudit",
    help="accountaudit: correlate new-account events with provisioning state.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="invoke", help="Process one event file and print the audit line.")(invoke_cmd)
app.command(name="keys", help="Show the store keys derived for an identity.")(keys_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
