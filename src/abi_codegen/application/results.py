"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from abi_codegen.errors import ConversionError


@dataclass(frozen=True)
class ConversionResult:
    """Successful conversion of one ABI file."""

    source_path: Path
    output_path: Path
    export_name: str


@dataclass(frozen=True)
class ConversionFailure:
    """Failed conversion of one input path or glob pattern."""

    source: str
    error: ConversionError

    @property
    def kind(self) -> str:
        """Error class name, e.g. ``"ReadError"``."""
        return type(self.error).__name__

    @property
    def message(self) -> str:
        """Human-readable failure description."""
        return self.error.message


type ConversionOutcome = ConversionResult | ConversionFailure


@dataclass(frozen=True)
class BatchSummary:
    """Aggregated outcome of a batch run, in processing order."""

    outcomes: tuple[ConversionOutcome, ...] = field(default_factory=tuple)

    @property
    def converted(self) -> int:
        return sum(1 for item in self.outcomes if isinstance(item, ConversionResult))

    @property
    def failed(self) -> int:
        return sum(1 for item in self.outcomes if isinstance(item, ConversionFailure))

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 when nothing failed, otherwise 1."""
        return 1 if self.failed else 0

    def merge(self, other: BatchSummary) -> BatchSummary:
        """Return a summary with ``other``'s outcomes appended."""
        return BatchSummary(outcomes=self.outcomes + other.outcomes)
