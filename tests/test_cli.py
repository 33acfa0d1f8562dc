"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from interface_docs import cli as cli_module
from interface_docs.cli import _build_job, _build_parser, main
from interface_docs.config import InterfaceDocsConfig
from interface_docs.parsing import TREE_SITTER_AVAILABLE
from interface_docs.pipeline import DocumentationPipeline
from interface_docs.syntax import PropertyMember
from tests._fixtures.builders import SourceBuilder, interface


def test_cli_parses_original_options() -> None:
    args = _build_parser().parse_args(
        ["-i", "types.ts", "-o", "-", "--format", "json", "-f", "--verbose"]
    )
    assert args.input == "types.ts"
    assert args.output == "-"
    assert args.format == "json"
    assert args.force is True
    assert args.verbose is True


def test_cli_requires_input() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args([])


def test_cli_rejects_unknown_format() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["-i", "types.ts", "--format", "yaml"])


def test_flags_override_config(tmp_path: Path) -> None:
    config = InterfaceDocsConfig(root=tmp_path, format="json", force=True, inline_types=["null"])

    args = _build_parser().parse_args(["-i", "types.ts", "--format", "tables"])
    job = _build_job(args, config)

    assert job.output_format == "tables"
    assert job.force is True
    assert job.inline_types == ("string", "number", "boolean", "any", "null")


def test_defaults_without_config(tmp_path: Path) -> None:
    args = _build_parser().parse_args(["-i", "types.ts"])
    job = _build_job(args, InterfaceDocsConfig(root=tmp_path))

    assert job.output_format == "tables"
    assert job.force is False
    assert job.output is None


def test_main_exits_on_usage_error(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    path = source_builder.write("types.js", "export type A = string;\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["-i", str(path)])

    assert excinfo.value.code == 1
    assert "Input file must be a .ts file" in capsys.readouterr().err


@pytest.mark.skipif(not TREE_SITTER_AVAILABLE, reason="tree-sitter-typescript not installed")
def test_main_uses_config_next_to_input(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    path = source_builder.write(
        "types.ts",
        """
        export interface Box {
          size?: number;
        }
        """,
    )
    source_builder.write(".interface-docs.yml", "format: json\n")

    main(["-i", str(path), "-o", "-"])

    out = capsys.readouterr().out
    assert out == "\n## Box\n<pre>\n{\n  <strong>size</strong>?: number,\n}\n</pre>\n"


class _StaticParser:
    def parse(self, source: str):  # type: ignore[no-untyped-def]
        return (interface("Box", PropertyMember(name="size", type=None)),)


def test_verbose_run_reports_output_path_once(
    source_builder: SourceBuilder,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = source_builder.write("types.ts", "")
    monkeypatch.setattr(
        cli_module, "DocumentationPipeline", lambda: DocumentationPipeline(parser=_StaticParser())
    )

    main(["-i", str(path), "-v"])

    captured = capsys.readouterr()
    assert path.with_suffix(".md").exists()
    assert captured.out == ""
    assert captured.err.count("Wrote documentation to") == 1


def test_unwritable_log_file_exits_cleanly(
    source_builder: SourceBuilder, capsys: pytest.CaptureFixture[str]
) -> None:
    path = source_builder.write("types.ts", "")
    source_builder.write(".interface-docs.yml", "log_file: missing/dir/run.log\n")

    with pytest.raises(SystemExit) as excinfo:
        main(["-i", str(path)])

    assert excinfo.value.code == 1
    assert "interface-docs failed" in capsys.readouterr().err
