"""
Command-Line Interface for Mess

Provides commands for:
- validate: Load a schema definition and show its fields and keys
- preview: Generate a few sample rows from a schema
- config: Manage configurations
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mess.config import ConfigLoader, ConfigValidator, get_default_config
from mess.errors import SchemaError, UnsupportedFieldTypeError
from mess.generator import FieldGenerator
from mess.schema import load_schema
from mess.utils import SeedManager, setup_logging

console = Console()


class CLI:
    """Main CLI class"""

    def __init__(self):
        self.parser = self._create_parser()
        self.config_loader = ConfigLoader()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser"""
        parser = argparse.ArgumentParser(
            description="Mess synthetic table data CLI",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Validate a schema definition
  python cli.py validate users.json

  # Preview generated rows
  python cli.py preview users.json --rows 5 --seed 42

  # Write a default configuration
  python cli.py config create mess.yaml
            """
        )

        parser.add_argument(
            '--verbose', '-v',
            action='store_true',
            help='Enable verbose output'
        )

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        # Validate command
        validate_parser = subparsers.add_parser('validate', help='Validate a schema definition')
        validate_parser.add_argument('schema', help='Schema definition file (JSON or YAML)')

        # Preview command
        preview_parser = subparsers.add_parser('preview', help='Preview generated rows')
        preview_parser.add_argument('schema', help='Schema definition file (JSON or YAML)')
        preview_parser.add_argument('--rows', '-n', type=int, default=5, help='Number of rows to show')
        preview_parser.add_argument('--seed', '-s', type=int, help='Random seed for reproducibility')
        preview_parser.add_argument('--config', '-c', help='Configuration file (YAML)')

        # Config command
        config_parser = subparsers.add_parser('config', help='Manage configurations')
        config_subparsers = config_parser.add_subparsers(dest='config_command')

        show_parser = config_subparsers.add_parser('show', help='Show a configuration')
        show_parser.add_argument('file', nargs='?', help='Configuration file (default settings if omitted)')

        create_parser = config_subparsers.add_parser('create', help='Create default configuration')
        create_parser.add_argument('output', help='Output configuration file')

        return parser

    def run(self, args=None) -> int:
        """Run CLI"""
        args = self.parser.parse_args(args)

        log_level = logging.DEBUG if args.verbose else logging.WARNING
        setup_logging(level=log_level)

        if args.command == 'validate':
            return self.cmd_validate(args)
        if args.command == 'preview':
            return self.cmd_preview(args)
        if args.command == 'config':
            return self.cmd_config(args)

        self.parser.print_help()
        return 0

    def cmd_validate(self, args) -> int:
        """Load and validate a schema"""
        console.print(Panel.fit(
            "✅ [bold]Schema Validation[/bold]",
            border_style="green"
        ))

        try:
            schema = load_schema(args.schema)
        except SchemaError as e:
            return self._fail(e, args)

        table = Table(title=f"Table: {escape(schema.table) or '(unnamed)'}", show_header=True)
        table.add_column("Field", style="cyan")
        table.add_column("Definition", style="yellow")
        table.add_column("Primary Key", style="green")

        for name in schema.keys():
            table.add_row(
                escape(name),
                escape(schema.field(name).describe()),
                "✓" if schema.is_primary_key(name) else ""
            )

        console.print(table)
        console.print(f"Primary keys: {', '.join(schema.primary_keys)}")
        for group in schema.unique_keys:
            console.print(f"Unique key: {', '.join(group)}")

        console.print("\n[bold green]✓ Schema is valid[/bold green]")
        return 0

    def cmd_preview(self, args) -> int:
        """Generate sample rows"""
        console.print(Panel.fit(
            "🎲 [bold]Row Preview[/bold]",
            border_style="blue"
        ))

        try:
            if args.config:
                config = self.config_loader.load_from_file(args.config)
            else:
                config = get_default_config()

            if args.seed is not None:
                config.generation.seed = args.seed

            is_valid, errors = ConfigValidator.validate(config)
            if not is_valid:
                raise ValueError("; ".join(errors))

            if not args.verbose:
                setup_logging(level=config.logging.level, log_file=config.logging.log_file)

            schema = load_schema(args.schema)

            generator = FieldGenerator(
                source=SeedManager.from_config(config).source(),
                config=config
            )

            table = Table(title=f"Preview: {escape(schema.table) or '(unnamed)'}", show_header=True)
            for name in schema.keys():
                table.add_column(escape(name), style="bold cyan" if schema.is_primary_key(name) else None)

            for _ in range(args.rows):
                row = [generator.generate(schema.field(name)) for name in schema.keys()]
                table.add_row(*(self._render(value) for value in row))

        except (SchemaError, UnsupportedFieldTypeError, ValueError, OSError) as e:
            return self._fail(e, args)

        console.print(table)
        console.print(f"Seed: {config.generation.seed if config.generation.seed is not None else 'Random'}")
        return 0

    def cmd_config(self, args) -> int:
        """Manage configurations"""
        try:
            if args.config_command == 'show':
                if args.file:
                    config = self.config_loader.load_from_file(args.file)
                else:
                    config = get_default_config()
                console.print_json(data=config.to_dict())

            elif args.config_command == 'create':
                self.config_loader.save_config(get_default_config(), args.output)
                console.print(f"✓ Created configuration file: {args.output}")
                console.print("  Edit this file to customize settings")

            else:
                console.print("Use 'config show [file]' or 'config create <file>'")

        except (ValueError, OSError) as e:
            return self._fail(e, args)

        return 0

    @staticmethod
    def _render(value) -> str:
        if value is None:
            return "[dim]NULL[/dim]"
        if isinstance(value, (dict, list)):
            return escape(json.dumps(value))
        return escape(str(value))

    @staticmethod
    def _fail(error: Exception, args) -> int:
        console.print(f"[bold red]✗ Error:[/bold red] {escape(str(error))}")
        if args.verbose:
            console.print_exception()
        return 1


def main():
    """CLI entry point"""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
