"""Application use-cases orchestrating ABI conversion workflows."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from abi_codegen.adapters.filesystem import FileSourceWriter, JsonFileReader
from abi_codegen.adapters.renderers import TypeScriptConstRenderer
from abi_codegen.application.options import ConversionOptions
from abi_codegen.application.ports import (
    AbiReader,
    BatchReporter,
    SourceRenderer,
    SourceWriter,
)
from abi_codegen.application.results import (
    BatchSummary,
    ConversionFailure,
    ConversionOutcome,
    ConversionResult,
)
from abi_codegen.errors import ConversionError, ManifestError, SerializeError
from abi_codegen.naming import (
    DEFAULT_EXTENSION,
    clean_base_name,
    export_name_for,
    file_stem,
    output_filename_for,
)
from abi_codegen.patterns import resolve_pattern
from abi_codegen.schemas import AbiManifest, ConversionRequest
from abi_codegen.types import PatternList

logger = logging.getLogger(__name__)


def build_conversion_options(
    *,
    indent: int = 2,
    extension: str = DEFAULT_EXTENSION,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    if indent < 0:
        raise ValueError("indent must be >= 0")
    return ConversionOptions(indent=indent, extension=extension)


def build_request(
    input_path: Path | str,
    output_directory: Path | str,
    *,
    export_name: str | None = None,
    output_filename: str | None = None,
) -> ConversionRequest:
    """Validate conversion parameters into a request object.

    Raises
    ------
    ConversionError
        If an explicit export name or output filename is invalid.
    """
    try:
        return ConversionRequest(
            input_path=Path(input_path),
            output_directory=Path(output_directory),
            export_name=export_name,
            output_filename=output_filename,
        )
    except ValidationError as exc:
        raise ConversionError(
            input_path, f"Invalid conversion parameters for {input_path}: {exc}"
        ) from exc


def plan_output(
    request: ConversionRequest, options: ConversionOptions
) -> tuple[str, Path]:
    """Return ``(export_name, output_path)`` for a request without any I/O."""
    clean_name = clean_base_name(file_stem(request.input_path))
    export_name = request.export_name or export_name_for(clean_name)
    filename = request.output_filename or output_filename_for(
        clean_name, options.extension
    )
    return export_name, request.output_directory / filename


def convert_abi_file(
    *,
    request: ConversionRequest,
    options: ConversionOptions | None = None,
    reader: AbiReader | None = None,
    renderer: SourceRenderer | None = None,
    writer: SourceWriter | None = None,
) -> ConversionResult:
    """Use-case: convert one ABI JSON file into a TypeScript module.

    The output side of the filesystem is only touched after reading,
    parsing and rendering have all succeeded.

    Raises
    ------
    ConversionError
        ``ReadError``, ``ParseError``, ``SerializeError`` or ``WriteError``.
    """
    options = options or ConversionOptions()
    reader = reader or JsonFileReader()
    renderer = renderer or TypeScriptConstRenderer()
    writer = writer or FileSourceWriter()

    document = reader.read(request.input_path)
    export_name, output_path = plan_output(request, options)
    try:
        text = renderer.render(export_name, document, options.indent)
    except (TypeError, ValueError) as exc:
        raise SerializeError(
            request.input_path, f"Failed to format JSON: {exc}"
        ) from exc

    written = writer.write(output_path, text)
    logger.debug("converted %s -> %s (%s)", request.input_path, written, export_name)
    return ConversionResult(
        source_path=request.input_path,
        output_path=written,
        export_name=export_name,
    )


class _OutcomeCollector:
    """Accumulate outcomes in order and forward them to a reporter."""

    def __init__(self, reporter: BatchReporter | None) -> None:
        self.reporter = reporter
        self.outcomes: list[ConversionOutcome] = []

    def success(self, result: ConversionResult) -> None:
        self.outcomes.append(result)
        if self.reporter is not None:
            self.reporter.converted(result)

    def failure(self, source: str, error: ConversionError) -> None:
        logger.info("conversion failed for %s: %s", source, error.message)
        failure = ConversionFailure(source=source, error=error)
        self.outcomes.append(failure)
        if self.reporter is not None:
            self.reporter.failed(failure)

    def summary(self) -> BatchSummary:
        return BatchSummary(outcomes=tuple(self.outcomes))


def _convert_into(
    collector: _OutcomeCollector,
    source: str,
    *,
    request_factory: Callable[[], ConversionRequest],
    options: ConversionOptions,
    reader: AbiReader | None,
    renderer: SourceRenderer | None,
    writer: SourceWriter | None,
) -> None:
    try:
        request = request_factory()
        result = convert_abi_file(
            request=request,
            options=options,
            reader=reader,
            renderer=renderer,
            writer=writer,
        )
    except ConversionError as exc:
        collector.failure(source, exc)
    else:
        collector.success(result)


def run_batch(
    patterns: PatternList,
    output_directory: Path | str,
    *,
    options: ConversionOptions | None = None,
    reporter: BatchReporter | None = None,
    reader: AbiReader | None = None,
    renderer: SourceRenderer | None = None,
    writer: SourceWriter | None = None,
) -> BatchSummary:
    """Use-case: convert every file named or matched by ``patterns``.

    Patterns are processed in the order given. A failing pattern or file is
    recorded and reported, and the batch moves on to the next one.

    Parameters
    ----------
    patterns : Sequence[str]
        Literal file paths or glob patterns containing ``*`` or ``?``.
    output_directory : Path | str
        Directory receiving generated modules.
    options : ConversionOptions | None, default=None
        Rendering options.
    reporter : BatchReporter | None, default=None
        Receives each outcome as soon as it is known.

    Returns
    -------
    BatchSummary
        Ordered outcomes with success/failure counts.
    """
    options = options or ConversionOptions()
    collector = _OutcomeCollector(reporter)

    for pattern in patterns:
        try:
            paths = resolve_pattern(pattern)
        except ConversionError as exc:
            collector.failure(pattern, exc)
            continue

        for path in paths:
            _convert_into(
                collector,
                str(path),
                request_factory=lambda path=path: build_request(path, output_directory),
                options=options,
                reader=reader,
                renderer=renderer,
                writer=writer,
            )

    return collector.summary()


def load_manifest(manifest_path: Path) -> AbiManifest:
    """Read and validate a manifest file.

    Raises
    ------
    ManifestError
        If the manifest cannot be read, is not JSON, or fails validation.
    """
    try:
        raw = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(
            manifest_path, f"Failed to read manifest {manifest_path}: {exc}"
        ) from exc
    except ValueError as exc:
        raise ManifestError(
            manifest_path, f"Invalid JSON in manifest {manifest_path}: {exc}"
        ) from exc

    try:
        return AbiManifest.model_validate(raw)
    except ValidationError as exc:
        raise ManifestError(
            manifest_path, f"Invalid manifest {manifest_path}: {exc}"
        ) from exc


def run_manifest(
    manifest_path: Path,
    output_directory: Path | str,
    *,
    options: ConversionOptions | None = None,
    reporter: BatchReporter | None = None,
    reader: AbiReader | None = None,
    renderer: SourceRenderer | None = None,
    writer: SourceWriter | None = None,
) -> BatchSummary:
    """Use-case: convert the explicit entries listed in a manifest file.

    Entry ``json`` paths are relative to the manifest's directory; ``ts``
    paths are relative to ``output_directory``.

    Raises
    ------
    ManifestError
        If the manifest itself is invalid. Per-entry failures are recorded
        in the summary instead.
    """
    options = options or ConversionOptions()
    manifest = load_manifest(manifest_path)
    base_dir = manifest_path.parent
    collector = _OutcomeCollector(reporter)
    logger.debug("manifest %s lists %d file(s)", manifest_path, len(manifest.files))

    for entry in manifest.files:
        input_path = base_dir / entry.source
        _convert_into(
            collector,
            str(input_path),
            request_factory=lambda entry=entry, input_path=input_path: build_request(
                input_path,
                output_directory,
                export_name=entry.export,
                output_filename=entry.output,
            ),
            options=options,
            reader=reader,
            renderer=renderer,
            writer=writer,
        )

    return collector.summary()
