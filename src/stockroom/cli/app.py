"""
Root Typer application for the stockroom CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

app = Typer(
    name="stockroom",
    help="stockroom: typed inventory repositories with isolated stock adjustments.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from stockroom import __version__

        typer.echo(f"stockroom {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """stockroom CLI: seed, inspect and adjust in-memory inventories."""


# ── Sub-command registration ─────────────────────────────────────────────

from stockroom.cli.demo import demo  # noqa: E402

app.command("demo", help="Run the warehouse walkthrough.")(demo)
