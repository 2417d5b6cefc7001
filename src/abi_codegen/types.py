"""Shared type aliases for ABI documents."""

from __future__ import annotations

from collections.abc import Sequence

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]

type PatternList = Sequence[str]
