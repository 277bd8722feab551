"""
CLI utility helpers -- output formatting and logging setup.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ulidkit.core.logging import configure_logging
from ulidkit.core.settings import get_settings
from ulidkit.core.ulid import Ulid

console = Console()
err_console = Console(stderr=True)


# ── Logging ──────────────────────────────────────────────────────────────


def setup_logging() -> None:
    """Configure structlog from ``UlidSettings`` (``ULIDKIT_*`` env vars)."""
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        service=settings.service_name,
    )


# ── Formatting ───────────────────────────────────────────────────────────


def format_datetime(ulid: Ulid) -> str | None:
    """RFC 3339 with milliseconds and a ``Z`` suffix; None past year 9999."""
    try:
        moment = ulid.datetime
    except OverflowError:
        return None
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def ulid_to_dict(ulid: Ulid) -> dict[str, Any]:
    """Every representation of ``ulid`` as JSON-safe values."""
    high, low = ulid.to_parts()
    return {
        "ulid": str(ulid),
        "timestamp_ms": ulid.timestamp_field,
        "datetime": format_datetime(ulid),
        "random": f"{ulid.random_field:020x}",
        "bytes": ulid.to_bytes().hex(),
        "high": high,
        "low": low,
    }


# ── Output helpers ───────────────────────────────────────────────────────


def print_ulid(ulid: Ulid, *, verbose: bool = False) -> None:
    """Print the canonical string, plus its timestamp when verbose."""
    typer.echo(str(ulid))
    if verbose:
        typer.echo(format_datetime(ulid) or "(timestamp beyond year 9999)")
        typer.echo("")


def print_json(payload: Any) -> None:
    console.print_json(json.dumps(payload))


def print_ulid_table(ulid: Ulid) -> None:
    """Render every representation of ``ulid`` as a two-column table."""
    table = Table(title=str(ulid), show_header=False, pad_edge=False)
    table.add_column("field", style="cyan")
    table.add_column("value", overflow="fold")
    for key, value in ulid_to_dict(ulid).items():
        table.add_row(key, escape(str(value)))
    console.print(table)


def print_rejections(rejected: list[tuple[str, Exception]]) -> None:
    """Report invalid candidates on stderr."""
    err_console.print(f"[bold red]Invalid ULID strings[/bold red] ({len(rejected)}):")
    for candidate, error in rejected:
        err_console.print(f"  {escape(candidate)}: {escape(str(error))}")
