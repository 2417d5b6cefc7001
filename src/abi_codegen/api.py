"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from abi_codegen.application.results import BatchSummary
from abi_codegen.application.use_cases import build_conversion_options
from abi_codegen.application.use_cases import build_request
from abi_codegen.application.use_cases import convert_abi_file
from abi_codegen.application.use_cases import run_batch
from abi_codegen.application.use_cases import run_manifest
from abi_codegen.infrastructure.reporting import ConsoleReporter


def convert(
    input_path: Path | str,
    output_directory: Path | str = ".",
    indent: int = 2,
) -> Path:
    """Convert one ABI JSON file and return the generated module path.

    Raises
    ------
    ConversionError
        On any read, parse, serialize or write failure.
    """
    result = convert_abi_file(
        request=build_request(input_path, output_directory),
        options=build_conversion_options(indent=indent),
    )
    return result.output_path


def run(
    patterns: Sequence[str],
    output_directory: Path | str = ".",
    indent: int = 2,
    manifest_path: Path | None = None,
    debug: bool = False,
) -> int:
    """Convert a batch of paths/patterns, print each outcome and return the exit code.

    Manifest entries, when given, are converted before ``patterns``.

    Raises
    ------
    ManifestError
        If ``manifest_path`` cannot be loaded.
    """
    options = build_conversion_options(indent=indent)
    reporter = ConsoleReporter(debug=debug)

    summary = BatchSummary()
    if manifest_path is not None:
        summary = summary.merge(
            run_manifest(manifest_path, output_directory, options=options, reporter=reporter)
        )
    summary = summary.merge(
        run_batch(patterns, output_directory, options=options, reporter=reporter)
    )
    reporter.summary(summary)
    return summary.exit_code
