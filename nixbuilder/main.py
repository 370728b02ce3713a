import click
from .commands import *


@click.group()
@click.option("--path", default=".", help="Directory holding nixbuilder.toml for commands that are not given a SOURCE.")
@click.pass_context
def cli(ctx, path):
    """nixbuilder: build container images from app sources with Nix."""
    ctx.obj = {"path": path}

cli.add_command(build)
cli.add_command(plan)
cli.add_command(detect)
cli.add_command(list_builders)
cli.add_command(clean)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
