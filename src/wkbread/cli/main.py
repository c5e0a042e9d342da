"""wkbread CLI - decode WKB, EWKB and ISO WKB payloads from the shell.

Command-line interface for inspecting geometry payloads copied out of a
database or captured from the wire.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from wkbread import __version__
from wkbread.config import settings
from wkbread.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="wkbread",
    help="wkbread: decode Well-Known Binary geometry payloads",
    add_completion=False,
)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"wkbread {__version__}")


@app.command()
def parse(
    payload: Annotated[
        str | None,
        typer.Argument(help="Hex-encoded WKB/EWKB payload"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="File with one hex payload per line, or a raw binary WKB file",
        ),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output GeoJSON-style results")
    ] = False,
) -> None:
    """Decode one or more WKB payloads and describe the geometries."""
    from wkbread.cli.runners import decode_payloads, load_payloads  # noqa: PLC0415

    _configure_logging(verbose)
    logger = get_logger(__name__)

    try:
        payloads = load_payloads(payload=payload, file=file)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from None

    source = str(file) if file is not None else "argument"
    logger.info("Decoding payloads", source=source, count=len(payloads))

    results = decode_payloads(payloads, source=source)

    if json_output:
        typer.echo(
            json.dumps(
                {"results": [result.to_dict() for result in results]},
                indent=settings.CLI_INDENT,
            )
        )
    else:
        for result in results:
            typer.echo(result.summary(), err=not result.success)

    raise typer.Exit(0 if all(result.success for result in results) else 1)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """wkbread: decode Well-Known Binary geometry payloads."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)
