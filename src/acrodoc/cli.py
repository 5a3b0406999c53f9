#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/cli.py
"""Command line interface for acrodoc.

Two commands are provided:

``acrodoc list [CONFIG]``
    Print the list of acronyms defined in a configuration file, sorted with
    the configured (or given) criterion. With ``--document``, the references
    of a markdown file are resolved first so that usage-based sorting and
    ``--only-used`` reflect that document.

``acrodoc expand INPUT [-c CONFIG] [-o OUTPUT]``
    Replace the ``\\acr{KEY}`` references of a markdown file with their
    rendered text, written as pandoc markdown.

When no configuration file is given, ``.acrodoc.{yaml,yml,toml,json}`` or a
``pyproject.toml`` with a ``[tool.acrodoc]`` section is searched for in the
current directory and its parents.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from acrodoc import __version__
from acrodoc.acronym import Acronym
from acrodoc.config import find_config_in_parents, load_acronyms
from acrodoc.exceptions import AcrodocError
from acrodoc.logging_utils import configure_logging
from acrodoc.options import AcronymsOptions
from acrodoc.registry import AcronymRegistry
from acrodoc.sorting import SortCriterion, sort_acronyms
from acrodoc.styles import AcronymStyle
from acrodoc.transforms.acronyms import AcronymTransformer, expand_references
from acrodoc.utils.text import key_to_id

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    group.add_argument("--log-file", help="Also write log messages to this file")
    group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with the ``list`` and ``expand`` commands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="acrodoc",
        description="Render acronym references and list acronyms of a document.",
    )
    parser.add_argument("--version", action="version", version=f"acrodoc {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    list_parser = subparsers.add_parser("list", help="Print the sorted list of acronyms")
    list_parser.add_argument("config", nargs="?", help="Configuration file (discovered if omitted)")
    list_parser.add_argument(
        "--sorting",
        choices=[criterion.value for criterion in SortCriterion],
        help="Sorting criterion (default: from the configuration)",
    )
    list_parser.add_argument(
        "--include-unused",
        dest="include_unused",
        action="store_true",
        default=None,
        help="List acronyms that are never referenced",
    )
    list_parser.add_argument(
        "--only-used",
        dest="include_unused",
        action="store_false",
        help="List only acronyms referenced in the document",
    )
    list_parser.add_argument("--document", help="Markdown file whose references are resolved before listing")
    list_parser.add_argument("--rich", action="store_true", help="Use rich terminal output with formatting")
    _add_logging_arguments(list_parser)

    expand_parser = subparsers.add_parser("expand", help="Expand acronym references in a markdown file")
    expand_parser.add_argument("input", help="Markdown file with \\acr{KEY} references ('-' for stdin)")
    expand_parser.add_argument("-c", "--config", help="Configuration file (discovered if omitted)")
    expand_parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    expand_parser.add_argument(
        "--style",
        choices=[style.value for style in AcronymStyle],
        help="Default rendering style (default: from the configuration)",
    )
    expand_parser.add_argument(
        "--no-links",
        dest="insert_links",
        action="store_false",
        default=None,
        help="Do not link references to the list of acronyms",
    )
    _add_logging_arguments(expand_parser)

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from the command line flags; ``--trace`` wins."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _resolve_config_path(config: Optional[str]) -> Path:
    if config:
        return Path(config)
    discovered = find_config_in_parents()
    if discovered is None:
        raise AcrodocError("No configuration file given and none found in the current directory or its parents")
    logger.info(f"Using configuration file {discovered}")
    return discovered


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _print_plain_listing(acronyms: list[Acronym], options: AcronymsOptions) -> None:
    for acronym in acronyms:
        anchor = key_to_id(acronym.key, id_prefix=options.id_prefix)
        print(f"{acronym.key}\t{acronym.shortname_text}\t{acronym.longname_text}\t#{anchor}")


def _print_rich_listing(acronyms: list[Acronym], options: AcronymsOptions) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Acronyms ({len(acronyms)}, sorted by {options.sorting})")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Short name", style="yellow")
    table.add_column("Long name", style="green")
    table.add_column("Anchor", style="dim")
    table.add_column("Used", style="magenta")

    for acronym in acronyms:
        used = str(acronym.usage_order + 1) if acronym.usage_order is not None else "-"
        table.add_row(
            acronym.key,
            acronym.shortname_text,
            acronym.longname_text,
            key_to_id(acronym.key, id_prefix=options.id_prefix),
            used,
        )

    Console().print(table)


def handle_list_command(parsed_args: argparse.Namespace) -> int:
    """Print the sorted list of acronyms.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed arguments of the ``list`` command

    Returns
    -------
    int
        Exit code

    """
    options, registry = load_acronyms(_resolve_config_path(parsed_args.config))

    overrides = {}
    if parsed_args.sorting is not None:
        overrides["sorting"] = parsed_args.sorting
    if parsed_args.include_unused is not None:
        overrides["include_unused"] = parsed_args.include_unused
    if overrides:
        options = options.create_updated(**overrides)

    if parsed_args.document:
        expand_references(_read_input(parsed_args.document), AcronymTransformer(registry, options))

    acronyms = sort_acronyms(registry.all_entries(), options.sorting, options.include_unused)
    if parsed_args.rich:
        _print_rich_listing(acronyms, options)
    else:
        _print_plain_listing(acronyms, options)
    return EXIT_SUCCESS


def handle_expand_command(parsed_args: argparse.Namespace) -> int:
    """Expand the references of a markdown file.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed arguments of the ``expand`` command

    Returns
    -------
    int
        Exit code

    """
    options, registry = load_acronyms(_resolve_config_path(parsed_args.config))

    overrides = {}
    if parsed_args.style is not None:
        overrides["style"] = parsed_args.style
    if parsed_args.insert_links is not None:
        overrides["insert_links"] = parsed_args.insert_links
    if overrides:
        options = options.create_updated(**overrides)

    expanded = expand_references(_read_input(parsed_args.input), AcronymTransformer(registry, options))

    if parsed_args.output:
        Path(parsed_args.output).write_text(expanded, encoding="utf-8")
        logger.info(f"Wrote {parsed_args.output}")
    else:
        sys.stdout.write(expanded)
    _log_unused(registry)
    return EXIT_SUCCESS


def _log_unused(registry: AcronymRegistry) -> None:
    unused = [acronym.key for acronym in registry if not acronym.is_used]
    if unused:
        logger.debug(f"Acronyms defined but never referenced: {', '.join(unused)}")


def main(args: list[str] | None = None) -> int:
    """Execute the command line interface.

    Parameters
    ----------
    args : list of str, optional
        Arguments (default: ``sys.argv[1:]``)

    Returns
    -------
    int
        Exit code: 0 on success, 1 on acrodoc or I/O errors, 2 on invalid
        arguments

    """
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        # argparse exits on --help, --version and usage errors
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    _setup_logging_level(parsed_args)

    try:
        if parsed_args.command == "list":
            return handle_list_command(parsed_args)
        return handle_expand_command(parsed_args)
    except AcrodocError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        logger.debug("File error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
