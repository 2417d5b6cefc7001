#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/abi_codegen"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # Naming rules stay pure: no filesystem, glob or console access.
    _assert_no_imports(
        PACKAGE / "naming.py",
        [
            "import os",
            "import glob",
            "import typer",
            "from typer",
            "import json",
            ".read_text(",
            ".write_text(",
            "open(",
        ],
    )

    app_dir = PACKAGE / "application"
    for path in app_dir.glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "abi_codegen.cli",
                "abi_codegen.infrastructure",
            ],
        )

    for path in (PACKAGE / "adapters").glob("*.py"):
        _assert_no_imports(path, ["import typer", "from typer", "abi_codegen.application"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
