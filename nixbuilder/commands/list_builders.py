import click
from ..builders import DEFAULT_BUILDERS
from ..cli_logger import logger

@click.command(name="list-builders")
def list_builders():
    """List the available builders in detection order."""
    logger.info("Builders, in detection order:")
    for position, builder in enumerate(DEFAULT_BUILDERS, start=1):
        click.echo(f"  {position}. {builder.name()}")
