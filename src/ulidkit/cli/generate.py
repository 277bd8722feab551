"""
CLI: ``ulidkit generate`` -- print fresh identifiers.
"""

from __future__ import annotations

import typer

from ulidkit.cli.utils import print_json, print_ulid, ulid_to_dict
from ulidkit.core.generator import UlidGenerator
from ulidkit.core.logging import get_logger
from ulidkit.core.sequence import MonotonicSequence
from ulidkit.core.settings import get_settings

logger = get_logger(__name__)


def generate(
    count: int = typer.Option(1, "--count", "-n", help="How many ULIDs to print."),
    monotonic: bool | None = typer.Option(
        None,
        "--monotonic/--no-monotonic",
        help="Chain the batch monotonically (default from ULIDKIT_MONOTONIC).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also print timestamps."),
    json_out: bool = typer.Option(False, "--json", help="Emit a JSON array."),
) -> None:
    """Generate one or more ULIDs."""
    settings = get_settings()
    if not 1 <= count <= settings.max_batch:
        raise typer.BadParameter(
            f"must be between 1 and {settings.max_batch}", param_hint="--count"
        )
    use_monotonic = settings.monotonic if monotonic is None else monotonic

    generator = UlidGenerator()
    if use_monotonic:
        sequence = MonotonicSequence(generator)
        ulids = [sequence.next() for _ in range(count)]
    else:
        ulids = [generator.generate() for _ in range(count)]
    logger.debug("ulids_generated", count=count, monotonic=use_monotonic)

    if json_out:
        print_json([ulid_to_dict(ulid) for ulid in ulids])
        return
    for ulid in ulids:
        print_ulid(ulid, verbose=verbose)
