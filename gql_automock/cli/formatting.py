"""
Formatting utilities for the gql-automock CLI.

Status messages go to stderr through a rich console; generated data is
written to stdout as plain JSON or YAML so it can be piped.
"""

import json
from typing import Any, Optional

import yaml
from rich.console import Console
from rich.table import Table

from ..schema.models import SchemaCatalog


class Formatter:
    """Formatting utilities for CLI output."""

    def __init__(
        self,
        verbose: bool = False,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ) -> None:
        self.verbose = verbose
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def print_success(self, message: str) -> None:
        """Print a success message with green checkmark."""
        self.err_console.print(f"✓ {message}", style="bold green")

    def print_error(self, message: str) -> None:
        """Print an error message with red X."""
        self.err_console.print(f"✗ {message}", style="bold red")

    def print_info(self, message: str) -> None:
        """Print an info message, only in verbose mode."""
        if self.verbose:
            self.err_console.print(f"ℹ {message}", style="bold blue")

    def print_catalog(self, catalog: SchemaCatalog, title: Optional[str] = None) -> None:
        """Print object types and their fields as a table."""
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Type", style="cyan", no_wrap=True)
        table.add_column("Field", style="white")
        table.add_column("Signature", style="green")

        for type_def in catalog:
            for index, field_def in enumerate(type_def.fields):
                table.add_row(type_def.name if index == 0 else "", field_def.name, field_def.type)

        self.console.print(table)


def render_data(data: Any, output_format: str = "json") -> str:
    """
    Serialize generated data.

    Args:
        data: Generated object or list of objects
        output_format: ``json`` or ``yaml``

    Returns:
        Serialized text
    """
    if output_format == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def create_formatter(verbose: bool = False) -> Formatter:
    """Create a formatter instance."""
    return Formatter(verbose=verbose)
