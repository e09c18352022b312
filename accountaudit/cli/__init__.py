"""accountaudit CLI — Typer-based command-line interface.

Provides the ``accountaudit`` command for replaying captured events against
the real stores or offline, and for inspecting derived store keys.

All output uses Rich for formatted terminal display.
"""
