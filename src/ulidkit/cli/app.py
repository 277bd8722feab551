"""
Root Typer application for the ulidkit CLI.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as pkg_version

import typer
from typer import Typer

from ulidkit.cli.utils import setup_logging

app = Typer(
    name="ulidkit",
    help="ulidkit: generate and validate ULIDs.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        try:
            v = pkg_version("ulidkit")
        except PackageNotFoundError:
            from ulidkit import __version__ as v
        typer.echo(f"ulidkit {v}")
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
    """ulidkit CLI: generate, check and inspect ULIDs."""
    setup_logging()


# ── Command registration ─────────────────────────────────────────────────

from ulidkit.cli.generate import generate  # noqa: E402
from ulidkit.cli.validate import check, inspect_ulid  # noqa: E402

app.command("generate")(generate)
app.command("check")(check)
app.command("inspect")(inspect_ulid)
