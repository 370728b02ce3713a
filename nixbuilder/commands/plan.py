import click
from ..builder import NIX_FILE, DOCKERFILE
from ..builders import DEFAULT_BUILDERS
from ..decorators import handle_exceptions
from .build import build_options, make_app_builder


@click.command()
@build_options
@handle_exceptions
def plan(source, name, build_cmd, start_cmd, pkgs):
    """Print the generated environment.nix and Dockerfile without building."""
    app_builder = make_app_builder(source, name, build_cmd, start_cmd, pkgs)
    selection = app_builder.detect(DEFAULT_BUILDERS)
    build_plan = app_builder.plan(selection)

    click.echo(f"\n--- {NIX_FILE} ---")
    click.echo(build_plan.nix_expression, nl=False)
    click.echo(f"\n--- {DOCKERFILE} ---")
    click.echo(build_plan.dockerfile, nl=False)
