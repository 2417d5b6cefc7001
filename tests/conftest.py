"""Shared pytest configuration, marker assignment and ABI fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_ABI: list[dict[str, object]] = [
    {
        "type": "function",
        "name": "placeOrder",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "market", "type": "address"},
            {"name": "size", "type": "uint256"},
        ],
        "outputs": [{"name": "orderId", "type": "bytes32"}],
    },
    {
        "type": "event",
        "name": "OrderPlaced",
        "anonymous": False,
        "inputs": [{"name": "orderId", "type": "bytes32", "indexed": True}],
    },
]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def sample_abi() -> list[dict[str, object]]:
    """Return a small but realistic ABI document."""
    return json.loads(json.dumps(SAMPLE_ABI))


@pytest.fixture
def write_abi(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing ABI JSON (or raw text) under ``tmp_path``."""

    def _write(name: str, document: object = None, *, raw: str | None = None) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            payload = SAMPLE_ABI if document is None else document
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


def _split_generated(text: str) -> tuple[str, str]:
    prefix = "export const "
    suffix = " as const;\n"
    assert text.startswith(prefix)
    assert text.endswith(suffix)
    name, literal = text[len(prefix) : -len(suffix)].split(" = ", 1)
    return name, literal


@pytest.fixture
def split_generated() -> Callable[[str], tuple[str, str]]:
    """Return a helper splitting module text into ``(export_name, json_literal)``."""
    return _split_generated
