"""Filesystem adapters for reading ABI documents and writing modules."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from abi_codegen.errors import ParseError, ReadError, WriteError
from abi_codegen.types import JsonValue

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> JsonValue:
    raise ValueError(f"non-standard JSON constant '{name}'")


def _check_encodable(value: JsonValue) -> None:
    """Raise ``UnicodeEncodeError`` if any key or string holds a lone surrogate."""
    if isinstance(value, str):
        value.encode("utf-8")
    elif isinstance(value, dict):
        for key, item in value.items():
            key.encode("utf-8")
            _check_encodable(item)
    elif isinstance(value, list):
        for item in value:
            _check_encodable(item)


def parse_json_text(text: str, source: str | Path) -> JsonValue:
    """Parse strict JSON text.

    Parameters
    ----------
    text : str
        Raw document text.
    source : str | Path
        Path used in error messages.

    Raises
    ------
    ParseError
        If the text is not valid JSON. ``NaN`` and ``Infinity`` are rejected,
        as are ``\\uXXXX`` escapes decoding to unpaired surrogates.
    """
    try:
        document = json.loads(text, parse_constant=_reject_constant)
        _check_encodable(document)
    except ValueError as exc:
        raise ParseError(source, f"Invalid JSON in {source}: {exc}") from exc
    return document


class JsonFileReader:
    """Read an ABI JSON file from disk."""

    def read(self, input_path: Path) -> JsonValue:
        """Read and parse ``input_path``.

        Raises
        ------
        ReadError
            If the file is missing, unreadable or not UTF-8.
        ParseError
            If the content is not valid JSON.
        """
        try:
            text = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(
                input_path, f"Failed to read file {input_path}: {exc}"
            ) from exc
        logger.debug("read %d characters from %s", len(text), input_path)
        return parse_json_text(text, input_path)


class FileSourceWriter:
    """Write generated source text, creating parent directories."""

    def write(self, output_path: Path, text: str) -> Path:
        """Write ``text`` to ``output_path`` as UTF-8 bytes, newlines untranslated.

        The text is encoded before the target is opened, so an encoding
        failure leaves any existing file untouched. Existing files are
        otherwise truncated.

        Raises
        ------
        WriteError
            If the text is not encodable, the parent directory cannot be
            created or the write fails.
        """
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise WriteError(
                output_path, f"Failed to write file {output_path}: {exc}"
            ) from exc
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(
                output_path,
                f"Failed to create directory {output_path.parent}: {exc}",
            ) from exc
        try:
            output_path.write_bytes(data)
        except OSError as exc:
            raise WriteError(
                output_path, f"Failed to write file {output_path}: {exc}"
            ) from exc
        logger.debug("wrote %d bytes to %s", len(data), output_path)
        return output_path
