"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from abi_codegen.application.results import ConversionFailure, ConversionResult
from abi_codegen.types import JsonValue


class AbiReader(Protocol):
    """Load and parse an ABI document."""

    def read(self, input_path: Path) -> JsonValue:
        """Return the parsed JSON value; raise ReadError or ParseError."""


class SourceRenderer(Protocol):
    """Render an ABI document as module source text."""

    def render(self, export_name: str, document: JsonValue, indent: int) -> str:
        """Return complete source text; raise ValueError or TypeError."""


class SourceWriter(Protocol):
    """Persist generated source text."""

    def write(self, output_path: Path, text: str) -> Path:
        """Create parent directories, write the file and return its path."""


class BatchReporter(Protocol):
    """Receive per-file outcomes as a batch progresses."""

    def converted(self, result: ConversionResult) -> None:
        """Report a successful conversion."""

    def failed(self, failure: ConversionFailure) -> None:
        """Report a failed conversion or pattern."""
