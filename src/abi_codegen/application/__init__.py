"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from abi_codegen.application.options import ConversionOptions
from abi_codegen.application.ports import (
    AbiReader,
    BatchReporter,
    SourceRenderer,
    SourceWriter,
)
from abi_codegen.application.results import (
    BatchSummary,
    ConversionFailure,
    ConversionResult,
)
from abi_codegen.naming import DEFAULT_EXTENSION
from abi_codegen.schemas import ConversionRequest
from abi_codegen.types import PatternList


def build_conversion_options(
    *, indent: int = 2, extension: str = DEFAULT_EXTENSION
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from abi_codegen.application.use_cases import build_conversion_options as _impl

    return _impl(indent=indent, extension=extension)


def convert_abi_file(
    *,
    request: ConversionRequest,
    options: ConversionOptions | None = None,
    reader: AbiReader | None = None,
    renderer: SourceRenderer | None = None,
    writer: SourceWriter | None = None,
) -> ConversionResult:
    """Convert one ABI file via lazy use-case import."""
    from abi_codegen.application.use_cases import convert_abi_file as _impl

    return _impl(
        request=request,
        options=options,
        reader=reader,
        renderer=renderer,
        writer=writer,
    )


def run_batch(
    patterns: PatternList,
    output_directory: Path | str,
    *,
    options: ConversionOptions | None = None,
    reporter: BatchReporter | None = None,
) -> BatchSummary:
    """Convert every file matched by ``patterns`` via lazy use-case import."""
    from abi_codegen.application.use_cases import run_batch as _impl

    return _impl(patterns, output_directory, options=options, reporter=reporter)


def run_manifest(
    manifest_path: Path,
    output_directory: Path | str,
    *,
    options: ConversionOptions | None = None,
    reporter: BatchReporter | None = None,
) -> BatchSummary:
    """Convert manifest entries via lazy use-case import."""
    from abi_codegen.application.use_cases import run_manifest as _impl

    return _impl(manifest_path, output_directory, options=options, reporter=reporter)


__all__ = [
    "BatchSummary",
    "ConversionFailure",
    "ConversionOptions",
    "ConversionResult",
    "build_conversion_options",
    "convert_abi_file",
    "run_batch",
    "run_manifest",
]
