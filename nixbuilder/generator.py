"""Renders environment.nix and the Dockerfile for a detected app.

Both functions are deterministic: the same selection and inputs always give
byte-identical text.
"""

from .detection import call_builder

NIX_PACKAGE_PREFIX = "pkgs."

NIX_TEMPLATE = "with import <nixpkgs> {{ }}; [ {pkgs} ]\n"

DOCKERFILE_TEMPLATE = """\
FROM nixos/nix

RUN nix-channel --update

COPY . /app
WORKDIR /app

# Load Nix environment
RUN nix-env -if environment.nix

# Install
RUN {install_cmd}

# Build
RUN {build_cmd}

# Start
CMD {start_cmd}
"""


def gen_nix(selection, app, pkgs):
    """Render the Nix expression listing every package the build needs.

    Builder inputs come first, then the user's packages, each in their given
    order. Duplicates are kept.
    """
    names = []
    if selection.builder is not None:
        names.extend(call_builder(selection.builder, "build_inputs", app))
    names.extend(pkgs)

    refs = " ".join(f"{NIX_PACKAGE_PREFIX}{name}" for name in names)
    return NIX_TEMPLATE.format(pkgs=refs)


def _suggested(selection, operation, app):
    if selection.builder is None:
        return ""
    return call_builder(selection.builder, operation, app) or ""


def gen_dockerfile(selection, app, custom_build_cmd=None, custom_start_cmd=None):
    """Render the Dockerfile.

    User build/start commands take precedence over the builder's suggestions.
    The install command always comes from the builder. A missing command
    leaves its clause empty rather than dropping it.
    """
    install_cmd = _suggested(selection, "install_cmd", app)

    build_cmd = _suggested(selection, "suggested_build_cmd", app)
    if custom_build_cmd is not None:
        build_cmd = custom_build_cmd

    start_cmd = _suggested(selection, "suggested_start_cmd", app)
    if custom_start_cmd is not None:
        start_cmd = custom_start_cmd

    return DOCKERFILE_TEMPLATE.format(
        install_cmd=install_cmd,
        build_cmd=build_cmd,
        start_cmd=start_cmd,
    )
