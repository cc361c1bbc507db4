"""
Command-line interface for DTO generation.

Subcommands:
    languages   list target languages and the options each honours
    extract     show the objects extracted from a collection
    generate    print or write generated code
    zip         write a ZIP archive of generated code
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    GenerationError,
    ObjectDefinition,
    ObjectRole,
    RegistryError,
    create_generator,
    generate_code,
    generate_zip,
    get_language_info,
    get_registry,
    list_supported_languages,
    load_options,
    order_by_dependency,
)
from .codegen.core.extractor import ExtractionContext, extract_objects
from .logging_config import configure_logging, get_logger
from .models import EndpointCollection
from .postman import PostmanError
from .utils import JSONLoaderError, load_collection

logger = get_logger(__name__)

# Initialize rich console
console = Console()

# CLI flag -> GeneratorOptions field
BOOLEAN_FLAGS = {
    "lombok": "use_lombok",
    "json_serializable": "use_json_serializable",
    "system_text_json": "use_system_text_json",
    "validation": "generate_validation",
    "builders": "generate_builders",
    "factory_methods": "generate_factory_methods",
    "equals_hash": "generate_equals_and_hash",
    "to_string": "generate_to_string",
    "comments": "generate_comments",
}


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mockapi-dtogen",
        description="Generate DTOs from mocked API collections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mockapi-dtogen languages
  mockapi-dtogen extract collection.json
  mockapi-dtogen generate collection.json -l typescript --object UserResponse
  mockapi-dtogen zip postman_collection.json -l java -o dtos.zip --lombok
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Log level (default: MOCKAPI_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    languages = subparsers.add_parser("languages", help="List supported languages")
    languages.set_defaults(func=_handle_languages)

    extract = subparsers.add_parser("extract", help="Show extracted objects")
    _add_input_args(extract)
    extract.set_defaults(func=_handle_extract)

    generate = subparsers.add_parser("generate", help="Generate code for objects")
    _add_input_args(generate)
    _add_generation_args(generate)
    generate.add_argument(
        "--object",
        metavar="NAME",
        action="append",
        help="Object name or id to generate (repeatable; default: all)",
    )
    generate.add_argument(
        "--output", "-o", metavar="DIR", help="Write one file per object into DIR"
    )
    generate.add_argument(
        "--verbose", action="store_true", help="Show generation metadata"
    )
    generate.set_defaults(func=_handle_generate)

    archive = subparsers.add_parser("zip", help="Write a ZIP archive of generated code")
    _add_input_args(archive)
    _add_generation_args(archive)
    archive.add_argument(
        "--select",
        metavar="ID",
        nargs="+",
        help="Object ids or names to include (default: all)",
    )
    archive.add_argument(
        "--output", "-o", metavar="FILE", required=True, help="Archive path"
    )
    archive.set_defaults(func=_handle_zip)

    return parser


def _add_input_args(parser: argparse.ArgumentParser):
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="Collection JSON file")
    input_group.add_argument("--url", help="URL to fetch the collection from")

    parser.add_argument(
        "--env", metavar="FILE", help="Postman environment for {{variable}} values"
    )
    parser.add_argument(
        "--roles",
        default="response,request",
        help="Bodies to extract from: response, request or both (default: both)",
    )


def _add_generation_args(parser: argparse.ArgumentParser):
    parser.add_argument("--language", "-l", required=True, help="Target language")
    parser.add_argument("--config", metavar="FILE", help="JSON options file")

    naming = parser.add_argument_group("naming")
    naming.add_argument(
        "--naming",
        choices=["PascalCase", "camelCase", "snake_case"],
        help="Type name convention",
    )
    naming.add_argument("--prefix", help="Prefix for type names")
    naming.add_argument("--suffix", help="Suffix for type names")
    naming.add_argument("--package-name", "--package", help="Package/namespace name")

    features = parser.add_argument_group("features")
    features.add_argument(
        "--no-annotations", action="store_true", help="Omit serialization annotations"
    )
    features.add_argument(
        "--no-null-checks", action="store_true", help="Do not mark nullability"
    )
    for flag in BOOLEAN_FLAGS:
        features.add_argument(
            f"--{flag.replace('_', '-')}",
            action="store_true",
            dest=flag,
            help=f"Enable {flag.replace('_', ' ')}",
        )
    features.add_argument(
        "--style",
        choices=["pydantic", "dataclass", "typeddict"],
        help="Python model style",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except (JSONLoaderError, PostmanError, FileNotFoundError) as e:
        console.print(f"[red]✗ Failed to load input:[/red] {e}")
        return 1
    except RegistryError as e:
        console.print(f"[red]✗[/red] {e}")
        return 1
    except GenerationError as e:
        console.print(f"[red]✗ Code generation failed:[/red] {e}")
        return 1


def _handle_languages(args: argparse.Namespace) -> int:
    """List supported languages with details."""
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")
    table.add_column("Options")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        options = ", ".join(flag for flag, on in info["options"].items() if on)
        table.add_row(
            f"🔧 {info['name']}", info["extension"], info["class"], aliases, options
        )

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] mockapi-dtogen generate [dim]collection.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _handle_extract(args: argparse.Namespace) -> int:
    """Show the objects extracted from the input collection."""
    collection = _load(args)
    objects, errors = _extract(collection, args.roles)

    if not objects:
        console.print("[yellow]⚠️ No objects found in endpoint bodies[/yellow]")
    else:
        names = {obj.id: obj.name for obj in objects}
        table = Table(
            title=f"📦 Objects in {collection.name}",
            box=box.ROUNDED,
            title_style="bold cyan",
        )
        table.add_column("Id", style="dim")
        table.add_column("Name", style="bold green")
        table.add_column("Role", style="cyan")
        table.add_column("Endpoint")
        table.add_column("Fields", justify="right")
        table.add_column("Depends On", style="blue")

        for obj in objects:
            table.add_row(
                obj.id,
                obj.name,
                obj.role.value,
                f"{obj.source.method} {obj.source.path}",
                str(len(obj.schema.properties)),
                ", ".join(names.get(dep, dep) for dep in obj.dependencies),
            )
        console.print(table)

    _print_parse_errors(errors)
    return 0


def _handle_generate(args: argparse.Namespace) -> int:
    """Generate code and print it or write it to a directory."""
    collection = _load(args)
    objects, errors = _extract(collection, args.roles)
    _print_parse_errors(errors)

    selected = _select(objects, args.object)
    generator = create_generator(args.language, _build_options(args))
    output_dir = Path(args.output) if args.output else None
    if output_dir:
        output_dir.mkdir(parents=True, exist_ok=True)

    warnings: List[str] = []
    for obj in order_by_dependency(selected):
        result = generate_code(generator, obj.schema, obj.name)
        if not result.success:
            raise CLIError(result.error_message)
        for warning in result.warnings:
            if warning not in warnings:
                warnings.append(warning)

        filename = f"{obj.name}{generator.file_extension}"
        if output_dir:
            path = output_dir / filename
            path.write_text(result.code, encoding="utf-8")
            console.print(f"[green]✓[/green] {obj.name} saved to [cyan]{path}[/cyan]")
        else:
            console.print(Panel(f"📄 {filename}", border_style="green"))
            console.print(Syntax(result.code, generator.language_name, theme="monokai"))

        if args.verbose:
            _print_metadata(result.metadata)

    if warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
    return 0


def _handle_zip(args: argparse.Namespace) -> int:
    """Write an archive with one file per selected object."""
    collection = _load(args)
    objects, errors = _extract(collection, args.roles)
    _print_parse_errors(errors)

    selected = _select(objects, args.select)
    archive = asyncio.run(
        generate_zip(
            objects, [obj.id for obj in selected], args.language, _build_options(args)
        )
    )

    output_path = Path(args.output)
    try:
        output_path.write_bytes(archive)
    except OSError as e:
        raise CLIError(f"Failed to write {output_path}: {e}") from e

    console.print(
        f"[green]✓[/green] {len(selected)} objects archived to [cyan]{output_path}[/cyan]"
    )
    return 0


def _load(args: argparse.Namespace) -> EndpointCollection:
    source, collection = load_collection(
        file_path=args.file, url=args.url, environment_file=args.env
    )
    console.print(f"📄 Loaded: {source} ({len(collection.endpoints)} endpoints)")
    return collection


def _extract(collection: EndpointCollection, roles: str):
    try:
        wanted = [ObjectRole(r.strip().lower()) for r in roles.split(",") if r.strip()]
    except ValueError as e:
        raise CLIError(
            f"Invalid --roles value '{roles}': use request and/or response"
        ) from e

    context = ExtractionContext()
    objects = extract_objects(collection.endpoints, wanted, context)
    return objects, context.errors


def _select(
    objects: List[ObjectDefinition], wanted: Optional[List[str]]
) -> List[ObjectDefinition]:
    """Objects matching any of the given ids or names, or all objects."""
    if not wanted:
        return list(objects)

    keys = set(wanted)
    selected = [obj for obj in objects if obj.id in keys or obj.name in keys]
    if not selected:
        raise CLIError(f"No objects match: {', '.join(wanted)}")
    return selected


def _build_options(args: argparse.Namespace) -> Any:
    """Build generator options from the config file and CLI flags."""
    overrides: Dict[str, Any] = {}

    if args.naming:
        overrides["naming_convention"] = args.naming
    if args.prefix is not None:
        overrides["prefix"] = args.prefix
    if args.suffix is not None:
        overrides["suffix"] = args.suffix
    if args.package_name:
        overrides["package_name"] = args.package_name
    if args.no_annotations:
        overrides["use_annotations"] = False
    if args.no_null_checks:
        overrides["generate_null_checks"] = False
    for flag, option in BOOLEAN_FLAGS.items():
        if getattr(args, flag):
            overrides[option] = True
    if args.style:
        overrides["custom"] = {"style": args.style}

    if args.config:
        try:
            return load_options(
                get_registry().resolve(args.language),
                custom_config=overrides,
                config_file=args.config,
            )
        except ConfigError as e:
            raise CLIError(f"Configuration error: {e}") from e

    return overrides


def _print_parse_errors(errors: List[Exception]):
    if errors:
        console.print(f"\n[yellow]⚠️  {len(errors)} bodies skipped:[/yellow]")
        for error in errors:
            console.print(f"  [yellow]•[/yellow] {error}")


def _print_metadata(metadata: Dict[str, Any]):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print(metadata_table)


if __name__ == "__main__":
    sys.exit(main())
