import click
import shutil
import os
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command()
@click.option("--staging-dir", default=None, help="Staging directory to clean. Defaults to the configured one.")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
@handle_exceptions
def clean(ctx, staging_dir, yes):
    """Remove build workspaces left behind by previous builds."""
    if staging_dir is None:
        conf = config_module.load_config(path=ctx.obj["path"])
        staging_dir = config_module.resolve_build_options(conf)["staging_root"]

    if not os.path.isdir(staging_dir):
        logger.info(f"Nothing to clean, {staging_dir} does not exist.")
        return

    workspaces = sorted(os.listdir(staging_dir))
    if not workspaces:
        logger.info("Project is already clean.")
        return

    if not yes:
        click.confirm(f"Remove {len(workspaces)} workspace(s) from {staging_dir}?", abort=True)

    items_removed = 0
    for item in workspaces:
        path = os.path.join(staging_dir, item)
        logger.info(f"Removing {path}...")
        try:
            if os.path.isdir(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
            items_removed += 1
        except OSError as e:
            logger.error(f"Error removing {path}: {e}")
            logger.info("Please check file permissions and ensure the directory is not in use.")

    logger.success(f"Cleaning complete. Removed {items_removed} items.")
