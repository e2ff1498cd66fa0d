"""Example command - Build the demo CPN model and write it to a file.

This module serves as a thin adapter between the Click CLI framework and the
application layer's BuildExampleUseCase.
"""

from pathlib import Path

import click
from rich.console import Console

from ...application.models import BuildExampleRequest
from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer
from ..presenters.summary import SummaryPresenter

console = Console()


@click.command()
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a cpn_builder.toml config file (default: ./cpn_builder.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def example_command(output: Path, config_file: Path | None, verbose: int) -> None:
    """Build the demo model and write it as a CPN Tools file.

    The model has a top page with two sub-processes: one refined by a Skip
    page, the other by a sequential Composition of two Skip pages.

    Examples:

    \b
        cpn-builder example build/example.cpn
        cpn-builder example build/example.cpn --config cpn_builder.toml -v
    """
    runtime_config = ConfigLoader.load(config_file=config_file)
    request = BuildExampleRequest(
        output_path=output, config=runtime_config, verbose=verbose
    )

    container = DependencyContainer(
        verbose=verbose, console=console, config=runtime_config
    )
    use_case = container.create_build_example_use_case()
    response = use_case.execute(request)

    SummaryPresenter(console).present(response)
    container.create_logger().log_final_stats()

    if not response.success:
        raise click.ClickException(response.error or "Model generation failed")
