#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for gdocs2html.

Converts a saved Google Docs API response (JSON) into an HTML fragment.

Examples
--------
Convert to stdout:
    $ gdocs2html document.json

Write to a file with table classes:
    $ gdocs2html document.json --out document.html --table-class doc-table

Read from a pipe:
    $ curl -s "$DOCS_URL" | gdocs2html - --lenient

Show highlighted output in a terminal:
    $ gdocs2html document.json --rich
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, Sequence, Union

from rich.console import Console
from rich.syntax import Syntax

from gdocs2html import __version__
from gdocs2html.api import to_html
from gdocs2html.exceptions import (
    Gdocs2HtmlError,
    InputError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from gdocs2html.logging_utils import configure_logging
from gdocs2html.options.gdocs import GdocsParserOptions
from gdocs2html.options.html import HtmlRendererOptions
from gdocs2html.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
EXIT_INPUT_ERROR = 10


def _option_help(options_class: type, name: str) -> str:
    """Return the help text declared on an options dataclass field."""
    for option_field in fields(options_class):
        if option_field.name == name:
            return option_field.metadata.get("help", "")
    raise KeyError(name)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gdocs2html",
        description="Convert a Google Docs API document (JSON) to an HTML fragment.",
    )
    parser.add_argument("input", help="Path to a documents.get JSON response, or '-' for stdin")
    parser.add_argument("--out", "-o", help="Write HTML to this file instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    render_group = parser.add_argument_group("HTML options")
    defaults = HtmlRendererOptions()
    render_group.add_argument(
        "--indent-ratio",
        type=float,
        default=defaults.text_indent_ratio,
        help=_option_help(HtmlRendererOptions, "text_indent_ratio"),
    )
    render_group.add_argument(
        "--base-font-size", default=defaults.base_font_size, help=_option_help(HtmlRendererOptions, "base_font_size")
    )
    render_group.add_argument(
        "--base-font-weight",
        default=defaults.base_font_weight,
        help=_option_help(HtmlRendererOptions, "base_font_weight"),
    )
    render_group.add_argument(
        "--table-wrapper-class",
        default=defaults.table_wrapper_class,
        help=_option_help(HtmlRendererOptions, "table_wrapper_class"),
    )
    render_group.add_argument(
        "--table-class", default=defaults.table_class, help=_option_help(HtmlRendererOptions, "table_class")
    )
    render_group.add_argument(
        "--no-escape", action="store_true", help="Do not escape HTML special characters in text content"
    )

    parse_group = parser.add_argument_group("Parsing options")
    parse_group.add_argument(
        "--lenient",
        action="store_true",
        help=f"Opposite of strict mode. Strict: {_option_help(GdocsParserOptions, 'strict')}",
    )

    log_group = parser.add_argument_group("Logging")
    log_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log records to this file")
    log_group.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    log_group.add_argument("--rich", action="store_true", help="Use rich formatting for logs and terminal output")
    return parser


def _exit_code_for(error: Gdocs2HtmlError) -> int:
    if isinstance(error, InputError):
        return EXIT_INPUT_ERROR
    if isinstance(error, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(error, RenderingError):
        return EXIT_RENDERING_ERROR
    if isinstance(error, ValidationError):
        return EXIT_VALIDATION_ERROR
    return EXIT_ERROR


def _build_options(args: argparse.Namespace) -> tuple[GdocsParserOptions, HtmlRendererOptions]:
    renderer_options = HtmlRendererOptions(
        text_indent_ratio=args.indent_ratio,
        base_font_size=args.base_font_size,
        base_font_weight=args.base_font_weight,
        table_wrapper_class=args.table_wrapper_class,
        table_class=args.table_class,
        escape_html=not args.no_escape,
    )
    return GdocsParserOptions(strict=not args.lenient), renderer_options


def _write_stdout(html: str, use_rich: bool) -> None:
    stream = sys.stdout
    if use_rich and stream.isatty():
        Console(file=stream).print(Syntax(html, "html", word_wrap=True))
        return
    stream.write(html)
    stream.write("\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line.

    Parameters
    ----------
    argv : sequence of str, optional
        Arguments without the program name; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace, use_rich=args.rich)

    try:
        parser_options, renderer_options = _build_options(args)
    except ValueError as e:
        logger.error("Invalid option: %s", e)
        return EXIT_VALIDATION_ERROR

    source: Union[Path, IO[Any]]
    if args.input == "-":
        source = sys.stdin.buffer
    else:
        source = Path(args.input)
        if not source.is_file():
            logger.error("Input file not found: %s", args.input)
            return EXIT_FILE_ERROR

    try:
        html = to_html(source, parser_options=parser_options, renderer_options=renderer_options)
    except Gdocs2HtmlError as e:
        logger.error("Conversion failed: %s", e.message)
        return _exit_code_for(e)

    if args.out:
        try:
            BaseRenderer.write_text_output(html, args.out)
        except OSError as e:
            logger.error("Cannot write %s: %s", args.out, e)
            return EXIT_FILE_ERROR
        logger.info("Wrote %s", args.out)
    else:
        _write_stdout(html, args.rich)
    return EXIT_SUCCESS
