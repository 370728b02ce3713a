import os
import uuid
from collections import namedtuple

from .app_source import AppSource
from .cli_logger import logger
from .detection import detect_builder
from .errors import CommandError, WorkspaceError
from .generator import gen_dockerfile, gen_nix
from .utils import run_shell_command

STAGING_ROOT = "tmp"
# Used when STAGING_ROOT would land inside the app source, e.g. `nixbuilder build .`
FALLBACK_STAGING_ROOT = os.path.join(os.path.expanduser("~"), ".nixbuilder", "tmp")
NIX_FILE = "environment.nix"
DOCKERFILE = "Dockerfile"

BuildPlan = namedtuple("BuildPlan", ["nix_expression", "dockerfile"])
BuildResult = namedtuple("BuildResult", ["name", "workspace", "run_command"])


class AppBuilder:
    """Detects, stages and builds a single application image.

    Typical use::

        app_builder = AppBuilder(None, "./my-app", None, None, [])
        selection = app_builder.detect(DEFAULT_BUILDERS)
        app_builder.build(selection)

    Workspaces are left under ``staging_root`` after the build, whether it
    succeeded or not.
    """

    def __init__(self, name, source, custom_build_cmd=None, custom_start_cmd=None, pkgs=None,
                 staging_root=STAGING_ROOT):
        self.name = name
        self.app = AppSource.from_path(source)
        self.custom_build_cmd = custom_build_cmd
        self.custom_start_cmd = custom_start_cmd
        self.pkgs = list(pkgs or [])
        self.staging_root = staging_root

    def detect(self, builders):
        logger.phase("Detecting")
        return detect_builder(self.app, builders, self.custom_start_cmd)

    def plan(self, selection):
        nix_expression = gen_nix(selection, self.app, self.pkgs)
        logger.step_info("Generated Nix expression")

        dockerfile = gen_dockerfile(selection, self.app, self.custom_build_cmd, self.custom_start_cmd)
        logger.step_info("Generated Dockerfile")

        return BuildPlan(nix_expression, dockerfile)

    def build(self, selection):
        logger.phase("Building")

        plan = self.plan(selection)

        build_id = str(uuid.uuid4())
        workspace = os.path.join(self._resolve_staging_root(), build_id)

        self._stage(workspace, plan)

        name = self.name or build_id
        self._docker_build(workspace, name)

        logger.step_info("Built!")
        run_command = f"docker run {name}"
        logger.info(f"Run:\n  {run_command}")

        return BuildResult(name, workspace, run_command)

    def run(self, builders):
        """Detect with ``builders`` and build the app."""
        selection = self.detect(builders)
        return self.build(selection)

    def _resolve_staging_root(self):
        """Return an absolute staging root that does not lie inside the app source."""
        staging_root = os.path.abspath(self.staging_root)
        if not _is_within(staging_root, self.app.source):
            return staging_root

        fallback = os.path.abspath(FALLBACK_STAGING_ROOT)
        if _is_within(fallback, self.app.source):
            raise WorkspaceError("Staging directory is inside the app source", operation="create workspace",
                                 workspace_path=staging_root)
        logger.warning(f"{staging_root} is inside the app source, staging in {fallback} instead")
        return fallback

    def _stage(self, workspace, plan):
        try:
            os.makedirs(workspace)
        except OSError as e:
            raise WorkspaceError(f"Creating workspace directory: {e}", operation="create workspace",
                                 workspace_path=workspace) from e

        logger.step_info("Copying source to tmp dir")
        command = ["cp", "-R", os.path.join(self.app.source, "."), workspace]
        _, stderr, returncode = run_shell_command(command)
        if returncode != 0:
            raise CommandError(f"Copying app source to tmp dir: {stderr.strip()}", command=command,
                               returncode=returncode, stderr=stderr)

        logger.step_info(f"Writing {NIX_FILE}")
        self._write(workspace, NIX_FILE, plan.nix_expression)

        logger.step_info(f"Writing {DOCKERFILE}")
        self._write(workspace, DOCKERFILE, plan.dockerfile)

    def _write(self, workspace, filename, contents):
        path = os.path.join(workspace, filename)
        try:
            with open(path, "w") as f:
                f.write(contents)
        except OSError as e:
            raise WorkspaceError(f"Writing {filename}: {e}", operation=f"write {filename}",
                                 workspace_path=workspace) from e

    def _docker_build(self, workspace, name):
        logger.step_info("Building image")
        command = ["docker", "build", workspace, "-t", name]
        output, process = run_shell_command(command, stream_output=True)
        for line in output:
            logger.output(line)

        if process.returncode == -1:
            raise CommandError("Building image: docker failed to start", command=command,
                               returncode=process.returncode)
        if process.returncode != 0:
            raise CommandError("Building image: docker build failed", command=command,
                               returncode=process.returncode)


def _is_within(path, directory):
    path = os.path.realpath(path)
    directory = os.path.realpath(directory)
    return path == directory or path.startswith(directory.rstrip(os.sep) + os.sep)
