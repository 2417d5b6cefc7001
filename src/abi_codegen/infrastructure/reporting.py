"""Console reporting for batch conversion outcomes."""

from __future__ import annotations

import traceback

import typer

from abi_codegen.application.results import (
    BatchSummary,
    ConversionFailure,
    ConversionResult,
)


class ConsoleReporter:
    """Print one line per outcome: successes to stdout, failures to stderr.

    Parameters
    ----------
    debug : bool, default=False
        Whether to print the traceback of each failure's underlying cause.
    """

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug

    def converted(self, result: ConversionResult) -> None:
        """Report a written module."""
        typer.secho(
            f"✓ Converted {result.source_path} -> {result.output_path}",
            fg=typer.colors.GREEN,
        )

    def failed(self, failure: ConversionFailure) -> None:
        """Report a failed input path with its error kind and message."""
        typer.secho(
            f"✗ {failure.source}: {failure.kind}: {failure.message}",
            fg=typer.colors.RED,
            err=True,
        )
        if self.debug:
            error = failure.error
            typer.echo("\nTraceback:", err=True)
            typer.echo(
                "".join(traceback.format_exception(type(error), error, error.__traceback__)),
                err=True,
            )

    def summary(self, summary: BatchSummary) -> None:
        """Print the closing ``Done: N converted, M failed.`` line."""
        typer.echo(f"Done: {summary.converted} converted, {summary.failed} failed.")
