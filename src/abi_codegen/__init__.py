"""Top-level API for ABI JSON to TypeScript module generation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from abi_codegen.errors import (
    ConversionError,
    GlobError,
    ManifestError,
    ParseError,
    ReadError,
    SerializeError,
    WriteError,
)
from abi_codegen.naming import (
    clean_base_name,
    derive_export_name,
    derive_output_filename,
)

__version__ = "0.1.0"


def convert(
    input_path: Path | str,
    output_directory: Path | str = ".",
    indent: int = 2,
) -> Path:
    """Convert one ABI JSON file into a TypeScript ``as const`` module.

    Parameters
    ----------
    input_path : Path | str
        ABI JSON file, e.g. ``abis/clob.abi.json``.
    output_directory : Path | str, default="."
        Directory receiving the generated module; created if missing.
    indent : int, default=2
        Indentation width of the embedded JSON literal.

    Returns
    -------
    Path
        Path to the generated ``.ts`` file.
    """
    from .api import convert as _impl

    return _impl(input_path, output_directory, indent=indent)


def run(
    patterns: Sequence[str],
    output_directory: Path | str = ".",
    indent: int = 2,
) -> int:
    """Convert files named or matched by ``patterns`` and return an exit code.

    Each outcome is printed as it happens. Returns ``1`` if any file or
    pattern failed, otherwise ``0``.
    """
    from .api import run as _impl

    return _impl(patterns, output_directory, indent=indent)


__all__ = [
    "ConversionError",
    "GlobError",
    "ManifestError",
    "ParseError",
    "ReadError",
    "SerializeError",
    "WriteError",
    "clean_base_name",
    "convert",
    "derive_export_name",
    "derive_output_filename",
    "run",
]
