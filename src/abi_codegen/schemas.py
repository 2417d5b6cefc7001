"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

import re
from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _check_identifier(value: str | None) -> str | None:
    if value is None:
        return None
    if not _IDENTIFIER.match(value):
        raise ValueError(f"'{value}' is not a valid JavaScript identifier.")
    return value


def _check_relative_filename(value: str | None) -> str | None:
    if value is None:
        return None
    if not value.strip():
        raise ValueError("output filename cannot be empty.")
    if PurePath(value).is_absolute():
        raise ValueError("output filename must be relative to the output directory.")
    return value


class ConversionRequest(BaseModel):
    """Validated input for a single ABI file conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path
    output_directory: Path = Path(".")
    export_name: str | None = None
    output_filename: str | None = None

    @field_validator("export_name")
    @classmethod
    def _validate_export_name(cls, value: str | None) -> str | None:
        return _check_identifier(value)

    @field_validator("output_filename")
    @classmethod
    def _validate_output_filename(cls, value: str | None) -> str | None:
        return _check_relative_filename(value)


class ManifestEntry(BaseModel):
    """One explicit ``{json, ts, export}`` conversion entry."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source: Path = Field(alias="json")
    output: str | None = Field(default=None, alias="ts")
    export: str | None = None

    @field_validator("export")
    @classmethod
    def _validate_export(cls, value: str | None) -> str | None:
        return _check_identifier(value)

    @field_validator("output")
    @classmethod
    def _validate_output(cls, value: str | None) -> str | None:
        return _check_relative_filename(value)


class AbiManifest(BaseModel):
    """Validated manifest listing ABI files to convert."""

    model_config = ConfigDict(extra="forbid")

    files: list[ManifestEntry] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_list(cls, value: object) -> object:
        if isinstance(value, list):
            return {"files": value}
        return value
