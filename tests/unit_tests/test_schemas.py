"""Unit tests for pydantic request and manifest schemas."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from abi_codegen.schemas import AbiManifest, ConversionRequest, ManifestEntry


def test_conversion_request_defaults_to_current_directory() -> None:
    """Output directory defaults to the working directory."""
    request = ConversionRequest(input_path=Path("clob.json"))
    assert request.output_directory == Path(".")
    assert request.export_name is None
    assert request.output_filename is None


@pytest.mark.parametrize("name", ["CLOB_ABI", "_private", "$abi", "Abi2"])
def test_conversion_request_accepts_identifiers(name: str) -> None:
    """Valid JavaScript identifiers are accepted as export names."""
    request = ConversionRequest(input_path=Path("a.json"), export_name=name)
    assert request.export_name == name


@pytest.mark.parametrize("name", ["2FAST", "my-abi", "a.b", ""])
def test_conversion_request_rejects_bad_identifiers(name: str) -> None:
    """Export names must be usable as a TypeScript binding."""
    with pytest.raises(ValidationError, match="valid JavaScript identifier"):
        ConversionRequest(input_path=Path("a.json"), export_name=name)


def test_conversion_request_rejects_absolute_output_filename(tmp_path: Path) -> None:
    """Explicit output names stay inside the output directory."""
    with pytest.raises(ValidationError, match="relative"):
        ConversionRequest(
            input_path=Path("a.json"), output_filename=str(tmp_path / "a.ts")
        )


def test_conversion_request_forbids_unknown_fields() -> None:
    """Typos in request fields are rejected."""
    with pytest.raises(ValidationError):
        ConversionRequest(input_path=Path("a.json"), outdir=".")  # type: ignore[call-arg]


def test_manifest_entry_uses_short_field_names() -> None:
    """Entries are written with json/ts/export keys."""
    entry = ManifestEntry.model_validate(
        {"json": "clob.json", "ts": "clob.ts", "export": "CLOB_ABI"}
    )
    assert entry.source == Path("clob.json")
    assert entry.output == "clob.ts"
    assert entry.export == "CLOB_ABI"


def test_manifest_accepts_bare_list_and_files_key() -> None:
    """Both a top-level list and a {files: [...]} object are accepted."""
    bare = AbiManifest.model_validate([{"json": "a.json"}, {"json": "b.json"}])
    wrapped = AbiManifest.model_validate({"files": [{"json": "a.json"}]})

    assert [entry.source for entry in bare.files] == [Path("a.json"), Path("b.json")]
    assert wrapped.files[0].output is None
    assert wrapped.files[0].export is None


def test_manifest_requires_json_key() -> None:
    """Entries without a source path are invalid."""
    with pytest.raises(ValidationError):
        AbiManifest.model_validate([{"ts": "a.ts"}])
