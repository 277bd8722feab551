"""
CLI: ``ulidkit check`` and ``ulidkit inspect`` -- validate given identifiers.
"""

from __future__ import annotations

import typer

from ulidkit.cli.utils import (
    print_json,
    print_rejections,
    print_ulid,
    print_ulid_table,
    ulid_to_dict,
)
from ulidkit.core.logging import LogContext, get_logger
from ulidkit.core.result import Err, Ok, partition_results
from ulidkit.core.ulid import Ulid

logger = get_logger(__name__)


def check(
    candidates: list[str] = typer.Argument(..., help="ULID strings to validate."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print valid ULIDs with timestamps."),
) -> None:
    """Check that every argument is a valid ULID; exit 1 if any is not."""
    accepted, rejected = partition_results(
        (candidate, Ulid.parse(candidate)) for candidate in candidates
    )
    with LogContext(command="check"):
        for candidate, error in rejected:
            logger.debug("candidate_rejected", candidate=candidate, **error.to_dict())
    if verbose:
        for ulid in accepted:
            print_ulid(ulid, verbose=True)

    if rejected:
        print_rejections(rejected)
        raise typer.Exit(code=1)


def inspect_ulid(
    candidate: str = typer.Argument(..., help="ULID string to decode."),
    json_out: bool = typer.Option(False, "--json", help="Emit JSON."),
) -> None:
    """Show every representation of a ULID."""
    match Ulid.parse(candidate):
        case Ok(ulid):
            if json_out:
                print_json(ulid_to_dict(ulid))
            else:
                print_ulid_table(ulid)
        case Err(error):
            print_rejections([(candidate, error)])
            raise typer.Exit(code=1)
