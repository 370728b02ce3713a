import click
from .. import config as config_module
from ..builder import AppBuilder
from ..builders import DEFAULT_BUILDERS
from ..cli_logger import logger
from ..decorators import handle_exceptions


def build_options(func):
    """Options shared by the commands that run detection on an app source."""
    decorators = [
        click.argument("source", type=click.Path(file_okay=False)),
        click.option("--name", "-n", default=None, help="Image name. Defaults to the workspace id."),
        click.option("--build-cmd", "-b", default=None, help="Build command, overrides the detected one."),
        click.option("--start-cmd", "-s", default=None, help="Start command, overrides the detected one."),
        click.option("--pkgs", "-p", default=None, help="Comma separated list of extra Nix packages."),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def make_app_builder(source, name, build_cmd, start_cmd, pkgs):
    """Create an AppBuilder from CLI options merged over the app's nixbuilder.toml."""
    conf = config_module.load_config(path=source)
    options = config_module.resolve_build_options(
        conf,
        name=name,
        build_cmd=build_cmd,
        start_cmd=start_cmd,
        pkgs=config_module.parse_pkgs(pkgs),
    )
    return AppBuilder(source=source, **options)


@click.command()
@build_options
@handle_exceptions
def build(source, name, build_cmd, start_cmd, pkgs):
    """Detect, stage and build a container image for SOURCE."""
    app_builder = make_app_builder(source, name, build_cmd, start_cmd, pkgs)
    result = app_builder.run(DEFAULT_BUILDERS)
    logger.success(f"Image {result.name} built from {result.workspace}")
