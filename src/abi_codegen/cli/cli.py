#!/usr/bin/env python3
"""
abi_codegen.cli.cli

Typer-based CLI that turns ABI JSON files into TypeScript ``as const`` modules.

Examples
--------
Convert a single file into ``src/abis``:

    abi-to-ts abis/clob.abi.json --outDir src/abis

Convert every ABI in a directory (quote the glob so the shell leaves it alone):

    abi-to-ts "abis/*.json" --outDir src/abis

Convert the entries listed in a manifest:

    abi-to-ts --manifest abis/manifest.json --outDir src/abis
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from abi_codegen import __version__
from abi_codegen.errors import ConversionError

app = typer.Typer(
    name="abi-to-ts",
    help="Generate TypeScript `as const` modules from ABI JSON files.",
    add_completion=False,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(debug: bool) -> None:
    """Enable DEBUG logging on stderr when ``--debug`` is given."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that stopped the command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"abi-to-ts {__version__}")
        raise typer.Exit()


@app.command(no_args_is_help=True)
def convert_cmd(
    inputs: list[str] | None = typer.Argument(
        None,
        metavar="INPUT...",
        help="ABI JSON file paths or glob patterns (* and ? wildcards).",
        show_default=False,
    ),
    out_dir: Path = typer.Option(
        Path("."),
        "--outDir",
        "--out-dir",
        help="Directory for generated .ts files (created if missing).",
    ),
    manifest: Path | None = typer.Option(
        None,
        "--manifest",
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON manifest of {json, ts, export} entries to convert first.",
    ),
    indent: int = typer.Option(
        2, "--indent", min=1, max=8, help="Indentation width of the JSON literal."
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging and show tracebacks on error."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert ABI JSON files to TypeScript modules.

    Each input produces ``<name>.ts`` exporting ``<NAME>_ABI``, where the
    name is the file stem with any ``.abi``/``-abi``/``_abi`` marker removed.

    Parameters
    ----------
    inputs : list[str] | None
        Literal paths or glob patterns, processed in order.
    out_dir : Path
        Output directory.
    manifest : Path | None
        Optional manifest with explicit output names.
    indent : int, default=2
        JSON indentation width.
    debug : bool, default=False
        Whether to enable debug logging and tracebacks.

    Notes
    -----
    - Exits with status 1 if any file or pattern failed, 0 otherwise.
    - An unreadable or invalid manifest is a usage error (status 2).
    """
    del version
    if not inputs and manifest is None:
        raise typer.BadParameter("Provide at least one INPUT or --manifest.")

    _configure_logging(debug)

    from abi_codegen.api import run

    try:
        code = run(
            list(inputs or []),
            out_dir,
            indent=indent,
            manifest_path=manifest,
            debug=debug,
        )
    except ConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    raise typer.Exit(code=code)


if __name__ == "__main__":
    app()
