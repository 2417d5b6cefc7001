"""Source renderers for generated ABI modules."""

from __future__ import annotations

import json

from abi_codegen.types import JsonValue


def format_json(document: JsonValue, indent: int = 2) -> str:
    """Pretty-print a JSON value with stable indentation and key order."""
    return json.dumps(document, indent=indent, ensure_ascii=False, allow_nan=False)


class TypeScriptConstRenderer:
    """Render ``export const NAME = <json> as const;`` modules."""

    def render(self, export_name: str, document: JsonValue, indent: int = 2) -> str:
        """Return TypeScript source terminated by a single newline."""
        return f"export const {export_name} = {format_json(document, indent)} as const;\n"
