import click
from ..builders import DEFAULT_BUILDERS
from ..decorators import handle_exceptions
from .build import make_app_builder


@click.command()
@click.argument("source", type=click.Path(file_okay=False))
@click.option("--start-cmd", "-s", default=None, help="Start command; allows detection to find no builder.")
@handle_exceptions
def detect(source, start_cmd):
    """Show which builder would be used for SOURCE, or "none"."""
    app_builder = make_app_builder(source, None, None, start_cmd, None)
    selection = app_builder.detect(DEFAULT_BUILDERS)
    if selection.builder is None:
        click.echo("none")
    else:
        click.echo(selection.builder.name())
