"""
Command-line interface for GraphQL to TypeScript conversion.

Reads a schema, converts it, writes the result and optionally keeps watching
the schema file for changes.
"""

from __future__ import annotations

import argparse
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    CodeGenerator,
    ConfigError,
    ProjectConfig,
    RegistryError,
    generate_code,
    get_generator,
    get_language_info,
    list_supported_languages,
    load_config,
)
from .codegen.core.config import ConfigManager
from .logging_config import configure_logging, get_logger
from .utils import SchemaLoaderError, is_url, load_schema, write_output
from .watcher import SchemaWatcher

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="graphql-to-ts",
        description="Convert GraphQL schemas to TypeScript interfaces",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graphql-to-ts schema.graphql -o src/types.ts
  graphql-to-ts schema.graphql --prefix I --enums-as-const
  graphql-to-ts schema.graphql --custom-scalars '{"Money": "number"}'
  graphql-to-ts https://example.com/schema.graphql --stdout
        """.strip(),
    )

    parser.add_argument("input", nargs="?", help="Input GraphQL schema file path or URL")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output", "-o", metavar="PATH", help="Output TypeScript file path (default: types/generated.ts)"
    )
    output_group.add_argument(
        "--stdout", action="store_true", help="Print generated code instead of writing a file"
    )
    output_group.add_argument(
        "--watch", "-w", action="store_true", default=None, help="Watch for file changes"
    )

    gen_group = parser.add_argument_group("generation options")
    gen_group.add_argument(
        "--no-comments",
        dest="include_comments",
        action="store_false",
        default=None,
        help="Exclude comments from generated types",
    )
    gen_group.add_argument("--prefix", metavar="PREFIX", help="Add prefix to generated type names")
    gen_group.add_argument("--suffix", metavar="SUFFIX", help="Add suffix to generated type names")
    gen_group.add_argument(
        "--enums-as-const",
        action="store_true",
        default=None,
        help="Generate enums as const assertions",
    )
    gen_group.add_argument(
        "--custom-scalars",
        metavar="JSON",
        help="Custom scalar type mappings (JSON format)",
    )
    gen_group.add_argument("--config", metavar="FILE", help="JSON configuration file")
    gen_group.add_argument(
        "--language", "-l", default="typescript", help="Target language (default: typescript)"
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages", action="store_true", help="List supported languages and exit"
    )
    info_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show generation metadata and debug logs"
    )

    return parser


def build_config(args: argparse.Namespace) -> ProjectConfig:
    """
    Merge config file values with command-line overrides.

    Raises:
        ConfigError: If the config file or custom scalar mapping is invalid
    """
    overrides: dict[str, Any] = {}

    if args.input:
        overrides["input"] = args.input
    if args.output:
        overrides["output"] = args.output
    if args.watch is not None:
        overrides["watch"] = args.watch
    if args.include_comments is not None:
        overrides["include_comments"] = args.include_comments
    if args.prefix is not None:
        overrides["type_prefix"] = args.prefix
    if args.suffix is not None:
        overrides["type_suffix"] = args.suffix
    if args.enums_as_const is not None:
        overrides["enums_as_const"] = args.enums_as_const
    if args.custom_scalars is not None:
        overrides["custom_scalar_types"] = args.custom_scalars

    return load_config(custom_config=overrides, config_file=args.config)


class CLIHandler:
    """Handle command-line operations for schema conversion."""

    def __init__(self, out: Console | None = None) -> None:
        self.console = out or console

    def run(self, args: argparse.Namespace) -> int:
        """Run the CLI based on parsed arguments.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        if args.list_languages:
            return self._list_languages()

        try:
            config = build_config(args)
            self._report_warnings(ConfigManager().validate_config(config))

            if not config.input:
                self.console.print("❌ [red]Error: Input file path is required.[/red]")
                self.console.print("[yellow]Usage: graphql-to-ts <input-file> \\[options][/yellow]")
                return 1

            if config.watch and is_url(config.input):
                raise CLIError("Watch mode requires a local input file")

            generator = get_generator(args.language, config.options)

            status = self.generate_once(config, generator, args)
            if status != 0 or not config.watch:
                return status

            return self._watch(config, generator, args)

        except (ConfigError, RegistryError, CLIError) as e:
            self.console.print(f"❌ [red]Error:[/red] {e}")
            logger.debug("CLI run failed: %s", e)
            return 1

    def generate_once(
        self, config: ProjectConfig, generator: CodeGenerator, args: argparse.Namespace
    ) -> int:
        """Load, convert and persist the schema once."""
        try:
            schema_text = load_schema(config.input)
        except SchemaLoaderError as e:
            self.console.print(f"❌ [red]Error:[/red] {e}")
            return 1

        result = generate_code(generator, schema_text)
        if not result.success:
            self.console.print(f"❌ [red]Error:[/red] {result.error_message}")
            return 1

        if args.stdout:
            self._print_code(result.code, generator.language_name)
        else:
            try:
                output_path = write_output(config.output, result.code)
            except SchemaLoaderError as e:
                self.console.print(f"❌ [red]Error:[/red] {e}")
                return 1
            self.console.print("✅ [green]Successfully generated TypeScript types![/green]")
            self.console.print(f"📄 Output: [cyan]{output_path}[/cyan]")
            self.console.print(f"[dim]📊 Generated {result.metadata['line_count']} lines[/dim]")

        if args.verbose:
            self._print_metadata(result.metadata)
        self._report_warnings(result.warnings)
        return 0

    def _print_code(self, code: str, language: str) -> None:
        # Redirected output must stay byte-for-byte usable as a .ts file
        if self.console.is_terminal:
            self.console.print(Syntax(code, language, theme="monokai", word_wrap=True))
        else:
            self.console.print(code, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def _watch(
        self, config: ProjectConfig, generator: CodeGenerator, args: argparse.Namespace
    ) -> int:
        def regenerate() -> None:
            self.console.print("📝 [yellow]Schema changed, regenerating types...[/yellow]")
            self.generate_once(config, generator, args)

        self.console.print(f"👀 [blue]Watching {config.input} for changes...[/blue]")
        SchemaWatcher(config.input, regenerate).run()
        return 0

    def _list_languages(self) -> int:
        table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
        table.add_column("Language", style="bold green", no_wrap=True)
        table.add_column("Extension", style="cyan")
        table.add_column("Generator Class", style="dim")
        table.add_column("Aliases", style="blue")

        for language in list_supported_languages():
            info = get_language_info(language)
            aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
            table.add_row(f"🔧 {language}", info["file_extension"], info["class"], aliases)

        self.console.print(table)
        return 0

    def _print_metadata(self, metadata: dict[str, Any]) -> None:
        table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Property", style="bold")
        table.add_column("Value", style="green")

        for key, value in metadata.items():
            table.add_row(key.replace("_", " ").title(), str(value))

        self.console.print(table)

    def _report_warnings(self, warnings: list[str]) -> None:
        if not warnings:
            return
        self.console.print(
            Panel(
                "\n".join(f"• {warning}" for warning in warnings),
                title="⚠️  Warnings",
                border_style="yellow",
            )
        )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``graphql-to-ts`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)
    return CLIHandler().run(args)
