"""Pure naming rules for generated ABI modules.

Nothing in this module touches the filesystem: every function maps a
filename (or stem) to a string and can be tested in isolation.
"""

from __future__ import annotations

from pathlib import PurePath

ABI_SUFFIXES: tuple[str, ...] = (".abi", "-abi", "_abi")
EXPORT_SUFFIX = "_ABI"
DEFAULT_EXTENSION = ".ts"


def file_stem(filename: str | PurePath) -> str:
    """Return the filename without its final extension."""
    return PurePath(filename).stem


def clean_base_name(stem: str) -> str:
    """Strip the ABI suffix conventions from a file stem.

    Every occurrence of ``.abi``, ``-abi`` and ``_abi`` is removed, in that
    order, regardless of position.

    Parameters
    ----------
    stem : str
        Filename without its final extension, e.g. ``"clob.abi"``.

    Returns
    -------
    str
        Clean base name, e.g. ``"clob"``.
    """
    name = stem
    for suffix in ABI_SUFFIXES:
        name = name.replace(suffix, "")
    return name


def export_name_for(clean_name: str) -> str:
    """Build the constant identifier for a clean base name.

    ``"my-contract.v2"`` becomes ``"MY_CONTRACT_V2_ABI"``.
    """
    return clean_name.upper().replace("-", "_").replace(".", "_") + EXPORT_SUFFIX


def output_filename_for(clean_name: str, extension: str = DEFAULT_EXTENSION) -> str:
    """Build the generated module filename for a clean base name."""
    return clean_name.replace(".", "-") + extension


def derive_export_name(filename: str | PurePath) -> str:
    """Derive the export identifier from an input filename.

    Parameters
    ----------
    filename : str | PurePath
        Input file name or path, e.g. ``"abis/trading.abi.json"``.

    Returns
    -------
    str
        Identifier such as ``"TRADING_ABI"``.
    """
    return export_name_for(clean_base_name(file_stem(filename)))


def derive_output_filename(
    filename: str | PurePath, extension: str = DEFAULT_EXTENSION
) -> str:
    """Derive the generated module filename from an input filename.

    Parameters
    ----------
    filename : str | PurePath
        Input file name or path, e.g. ``"clob.abi.json"``.
    extension : str, default=".ts"
        Extension appended to the derived name.

    Returns
    -------
    str
        Output filename such as ``"clob.ts"``.
    """
    return output_filename_for(clean_base_name(file_stem(filename)), extension)
