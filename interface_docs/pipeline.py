"""Pipeline orchestration from TypeScript source to rendered documentation."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TextIO

from .diagnostics import DiagnosticCollector, DiagnosticSink, fan_out, logging_sink
from .extract import extract_declarations
from .linking import DEFAULT_INLINE_TYPES, resolve_links
from .logging import get_logger
from .models import InterfaceDocsError
from .parsing import TypeScriptSourceParser
from .render import TABLES_FORMAT, normalize_format, render_markdown
from .syntax import SourceStatement

STDOUT = "-"


class UsageError(InterfaceDocsError):
    """Raised when a documentation job is configured incorrectly."""


def document_statements(
    statements: Iterable[SourceStatement],
    output_format: str = TABLES_FORMAT,
    diagnostics: DiagnosticSink | None = None,
    *,
    inline_types: Sequence[str] = DEFAULT_INLINE_TYPES,
) -> str:
    """Extract, link and render already parsed statements."""
    declarations = extract_declarations(statements, diagnostics)
    linked = resolve_links(declarations, diagnostics, inline_types=inline_types)
    return render_markdown(linked, output_format)


def generate_documentation(
    source: str,
    output_format: str = TABLES_FORMAT,
    diagnostics: DiagnosticSink | None = None,
    *,
    inline_types: Sequence[str] = DEFAULT_INLINE_TYPES,
    parser: TypeScriptSourceParser | None = None,
) -> str:
    """Render markdown documentation for the exported declarations in ``source``."""
    statements = (parser or TypeScriptSourceParser()).parse(source)
    return document_statements(
        statements, output_format, diagnostics, inline_types=inline_types
    )


@dataclass
class DocumentationJob:
    """One input file to document and where to put the result."""

    input_path: Path
    output: Optional[str] = None
    output_format: str = TABLES_FORMAT
    force: bool = False
    inline_types: Sequence[str] = DEFAULT_INLINE_TYPES


@dataclass
class JobOutcome:
    """Result of a documentation job; ``output_path`` is ``None`` for stdout."""

    output_path: Optional[Path]
    markdown: str
    diagnostics: List[str] = field(default_factory=list)


class DocumentationPipeline:
    """Validates a job, runs parse/extract/link/render and writes the output."""

    def __init__(self, parser: TypeScriptSourceParser | None = None) -> None:
        self.parser = parser or TypeScriptSourceParser()
        self.logger = get_logger("pipeline")

    def run(self, job: DocumentationJob, *, stdout: TextIO | None = None) -> JobOutcome:
        output_format = self._check_format(job.output_format)
        input_path = self._check_input(job.input_path)
        output_path = self.resolve_output(input_path, job.output)
        if output_path is not None and output_path.exists() and not job.force:
            raise UsageError("Output file already exists. Use -f to overwrite")

        collector = DiagnosticCollector()
        sink = fan_out(collector, logging_sink(get_logger("diagnostics")))

        self.logger.info("Reading file %s", input_path)
        source = input_path.read_text(encoding="utf-8")

        self.logger.info("Parsing file")
        statements = self.parser.parse(source)

        self.logger.info("Extracting documentation")
        declarations = extract_declarations(statements, sink)

        self.logger.info("Resolving links")
        linked = resolve_links(declarations, sink, inline_types=job.inline_types)

        self.logger.info("Generating markdown")
        markdown = render_markdown(linked, output_format)

        self.logger.info("Writing documentation")
        if output_path is None:
            (stdout or sys.stdout).write(markdown)
        else:
            output_path.write_text(markdown, encoding="utf-8")
            self.logger.info("Wrote documentation to %s", output_path)

        self.logger.debug("Emitted %d diagnostics", len(collector))
        return JobOutcome(output_path=output_path, markdown=markdown, diagnostics=list(collector))

    @staticmethod
    def resolve_output(input_path: Path, output: Optional[str]) -> Optional[Path]:
        """Return the output path, or ``None`` when writing to stdout."""
        if output == STDOUT:
            return None
        if not output:
            return input_path.with_suffix(".md")
        if not output.endswith(".md"):
            raise UsageError("Output file must be a .md file or stdout (-)")
        return Path(output)

    @staticmethod
    def _check_format(output_format: str) -> str:
        try:
            return normalize_format(output_format)
        except ValueError as exc:
            raise UsageError(str(exc)) from exc

    @staticmethod
    def _check_input(input_path: Path) -> Path:
        if input_path.suffix != ".ts":
            raise UsageError("Input file must be a .ts file")
        if not input_path.is_file():
            raise UsageError(f"Input file not found: {input_path}")
        return input_path


__all__ = [
    "DocumentationJob",
    "DocumentationPipeline",
    "JobOutcome",
    "STDOUT",
    "UsageError",
    "document_statements",
    "generate_documentation",
]
