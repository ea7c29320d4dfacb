"""
Command-line interface for typesplice.

Loads a type model, renders its top-level definitions and splices them into
an existing source file below the marker line.
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GeneratorError,
    RegistryError,
    TemplateError,
    get_language_info,
    list_supported_languages,
)
from .codegen.core.config import ConfigError, load_config
from .codegen.core.schema import SchemaError, TypeDefinition, load_model
from .codegen.registry import get_generator
from .logging_config import get_logger, setup_logging
from .splice import SpliceError, edit_file
from .utils import ModelLoaderError, load_json

logger = get_logger(__name__)

console = Console()

EXPECTED_ERRORS = (
    ModelLoaderError,
    SchemaError,
    ConfigError,
    RegistryError,
    TemplateError,
    GeneratorError,
    SpliceError,
)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typesplice",
        description="Generate declarations from a type model and splice them "
        "into an existing source file below its marker line.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  typesplice model.json --folder src/com/example --class Options
  typesplice --url https://example.com/model.json --folder out --class View --run view
  typesplice model.json --folder out --class Options --check
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("model", nargs="?", help="Type model JSON file")
    input_group.add_argument("--url", help="URL to fetch the type model from")

    parser.add_argument("--folder", "-f", help="Folder containing the target file")
    parser.add_argument(
        "--class",
        "-c",
        dest="class_name",
        metavar="NAME",
        help="Target base file name, without extension",
    )
    parser.add_argument(
        "--run",
        metavar="ID",
        help="Only use definitions of this run (default: all runs, in model order)",
    )
    parser.add_argument(
        "--language", "-l", default="java", help="Target language (default: java)"
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--marker", help="Override the marker line text")
    parser.add_argument(
        "--no-comments", action="store_true", help="Don't emit doc comments"
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the file is out of date; don't write",
    )
    mode_group.add_argument(
        "--dry-run", action="store_true", help="Print the merged file; don't write"
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", metavar="FILE", help="Also log to this file")
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _list_languages() -> int:
    table = Table(title="Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")

    for language in list_supported_languages():
        info = get_language_info(language)
        table.add_row(info["name"], info["file_extension"], info["class"])

    console.print(table)
    return 0


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.marker:
        overrides["marker"] = args.marker
    if args.no_comments:
        overrides["add_comments"] = False
    return overrides


def select_definitions(
    model: dict[str, list[TypeDefinition]], run: str | None
) -> list[TypeDefinition]:
    """Return the definitions of one run, or of every run in model order."""
    if run is not None:
        if run not in model:
            raise SchemaError(
                f"Run '{run}' not found in model (available: {', '.join(model)})"
            )
        return list(model[run])

    definitions: list[TypeDefinition] = []
    for run_definitions in model.values():
        definitions.extend(run_definitions)
    return definitions


def run(args: argparse.Namespace) -> int:
    if not (args.model or args.url):
        console.print("[red]✗[/red] Input source required (model file or --url)")
        return 1
    if not args.folder or not args.class_name:
        console.print("[red]✗[/red] --folder and --class are required")
        return 1

    config = load_config(args.language, _build_overrides(args), args.config)
    generator = get_generator(args.language, config)

    source, data = load_json(file_path=args.model, url=args.url)
    model = load_model(data, config.scalar_override_flag)
    definitions = select_definitions(model, args.run)
    logger.info("Using %d definitions from %s", len(definitions), source)

    result = edit_file(
        definitions,
        args.class_name,
        args.folder,
        generator,
        check=args.check or args.dry_run,
    )

    if args.dry_run:
        console.print(Syntax(result.content, generator.language_name, line_numbers=True))
        return 0

    if args.check:
        if result.changed:
            console.print(f"[yellow]✗ Out of date:[/yellow] {result.path}", soft_wrap=True)
            return 1
        console.print(f"[green]✓ Up to date:[/green] {result.path}", soft_wrap=True)
        return 0

    console.print(f"Edited {result.path}", markup=False, soft_wrap=True)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the ``typesplice`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        if args.list_languages:
            return _list_languages()
        return run(args)
    except EXPECTED_ERRORS as e:
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]✗ Unexpected error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1
