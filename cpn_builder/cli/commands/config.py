from dataclasses import fields
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ...config import ConfigLoader

console = Console()


@click.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a cpn_builder.toml config file (default: ./cpn_builder.toml)",
)
def config_command(config_file: Path | None) -> None:
    """Show the effective configuration (defaults, environment, TOML)."""
    runtime_config = ConfigLoader.load(config_file=config_file)
    table = Table(title="Effective Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for field in fields(runtime_config):
        table.add_row(field.name, str(getattr(runtime_config, field.name)))
    console.print(table)
