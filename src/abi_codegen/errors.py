"""Exception hierarchy for ABI conversion failures."""

from __future__ import annotations

from pathlib import Path


class ConversionError(Exception):
    """Base error for a single failed conversion step.

    Parameters
    ----------
    source : str | Path
        Input path or glob pattern the failure is attributed to.
    message : str
        Human-readable description including the underlying cause.
    """

    exit_code: int = 1

    def __init__(self, source: str | Path, message: str) -> None:
        super().__init__(message)
        self.source = str(source)
        self.message = message


class ReadError(ConversionError):
    """Input file is missing or unreadable."""


class ParseError(ConversionError):
    """Input file is not valid JSON."""


class SerializeError(ConversionError):
    """Parsed document could not be pretty-printed."""


class WriteError(ConversionError):
    """Output directory or file could not be written."""


class GlobError(ConversionError):
    """Glob pattern is syntactically invalid."""


class ManifestError(ConversionError):
    """Manifest file is unreadable or does not validate."""

    exit_code = 2
