"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from abi_codegen.naming import DEFAULT_EXTENSION


@dataclass(frozen=True)
class ConversionOptions:
    """Rendering options applied to every converted file."""

    indent: int = 2
    extension: str = DEFAULT_EXTENSION
