import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of nixbuilder."""
    try:
        ver = importlib.metadata.version("nixbuilder")
        logger.info(f"nixbuilder version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of nixbuilder. Is it installed correctly?")
