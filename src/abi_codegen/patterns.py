"""Input pattern resolution for batch conversion."""

from __future__ import annotations

import glob
import logging
import os
import re
from pathlib import Path

from abi_codegen.errors import GlobError

logger = logging.getLogger(__name__)

WILDCARD_CHARS = frozenset("*?")
_SEPARATORS = re.compile(r"[\\/]" if os.sep == "\\" else r"/")


def has_wildcard(pattern: str) -> bool:
    """Return ``True`` when the pattern must go through glob expansion."""
    return any(ch in WILDCARD_CHARS for ch in pattern)


def _find_class_end(pattern: str, start: int) -> int:
    """Return the index of the ``]`` closing the class opened at ``start``, or -1."""
    idx = start + 1
    if idx < len(pattern) and pattern[idx] == "!":
        idx += 1
    # A leading "]" is a literal member of the class.
    if idx < len(pattern) and pattern[idx] == "]":
        idx += 1
    return pattern.find("]", idx)


def validate_pattern(pattern: str) -> None:
    """Reject glob patterns with invalid syntax.

    Parameters
    ----------
    pattern : str
        Glob pattern using ``*``, ``?``, ``**`` and ``[...]``.

    Raises
    ------
    GlobError
        If ``**`` shares a path component with other characters, or a
        character class is never closed.
    """
    for component in _SEPARATORS.split(pattern):
        if "**" in component and component != "**":
            raise GlobError(
                pattern,
                f"Invalid glob pattern '{pattern}': "
                "recursive wildcards must form an entire path component",
            )

    idx = 0
    while idx < len(pattern):
        if pattern[idx] == "[":
            end = _find_class_end(pattern, idx)
            if end < 0:
                raise GlobError(
                    pattern,
                    f"Invalid glob pattern '{pattern}': unterminated character class",
                )
            idx = end
        idx += 1


def expand_pattern(pattern: str) -> list[Path]:
    """Expand a wildcard pattern into matching paths.

    Wildcards also match names starting with a dot. Matches are sorted so
    the result is stable for a fixed filesystem state.

    Raises
    ------
    GlobError
        If the pattern is invalid or the filesystem rejects it.
    """
    validate_pattern(pattern)
    try:
        matches = sorted(glob.glob(pattern, recursive=True, include_hidden=True))
    except (OSError, ValueError) as exc:
        raise GlobError(pattern, f"Invalid glob pattern '{pattern}': {exc}") from exc
    logger.debug("pattern %r matched %d path(s)", pattern, len(matches))
    return [Path(match) for match in matches]


def resolve_pattern(pattern: str) -> list[Path]:
    """Resolve one CLI input into concrete paths.

    Literal paths are returned as-is; their existence is checked when read.
    """
    if has_wildcard(pattern):
        return expand_pattern(pattern)
    return [Path(pattern)]
