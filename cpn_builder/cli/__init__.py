import click

from .commands.config import config_command
from .commands.example import example_command


@click.group()
def app() -> None:
    pass


app.add_command(example_command, name="example")
app.add_command(config_command, name="config")
__all__ = ["app"]
