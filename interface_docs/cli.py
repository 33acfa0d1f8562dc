"""CLI entrypoint for interface-docs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, InterfaceDocsConfig, load_config
from .linking import DEFAULT_INLINE_TYPES
from .logging import configure_logging
from .parsing import ParserUnavailableError
from .pipeline import DocumentationJob, DocumentationPipeline, UsageError
from .render import OUTPUT_FORMATS, TABLES_FORMAT


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="interface-docs",
        usage="interface-docs [options] -i <input> [-o <output>]",
        description=(
            "Generate markdown documentation from TypeScript interfaces and types. "
            "NOTE: Only exported interfaces/types are documented."
        ),
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help=(
            "The input file to read interfaces and types from. Will ignore any code "
            "that is not exported or is not an interface or type."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        help=(
            "The output file to write markdown to. Defaults to the input file with "
            "a .md extension. Use - to write to stdout."
        ),
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help=f"The format to output the documentation in (default: {TABLES_FORMAT}).",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        default=None,
        help="Overwrite the output file if it already exists.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Print debug information.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to a .interface-docs.yml file (defaults to the input file's directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write debug logs to this file.",
    )
    return parser


def _build_job(args: argparse.Namespace, config: InterfaceDocsConfig) -> DocumentationJob:
    inline_types = tuple(DEFAULT_INLINE_TYPES) + tuple(
        name for name in config.inline_types if name not in DEFAULT_INLINE_TYPES
    )
    return DocumentationJob(
        input_path=Path(args.input),
        output=args.output,
        output_format=args.format or config.format or TABLES_FORMAT,
        force=bool(args.force if args.force is not None else config.force),
        inline_types=inline_types,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for interface-docs."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    config_path = args.config or Path(args.input).expanduser().resolve().parent
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    job = _build_job(args, config)
    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file or config.log_file)
        DocumentationPipeline().run(job)
    except UsageError as exc:
        parser.exit(1, f"{exc}\nUse --help for usage.\n")
    except (ParserUnavailableError, OSError) as exc:
        parser.exit(1, f"interface-docs failed: {exc}\n")


if __name__ == "__main__":
    main(sys.argv[1:])
