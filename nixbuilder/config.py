import toml
import os
from .cli_logger import logger

CONFIG_FILE = "nixbuilder.toml"

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    if os.path.exists(config_path):
        logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def parse_pkgs(value):
    """Split a comma separated package list, e.g. ``"git, curl"``."""
    if not value:
        return []
    return [pkg.strip() for pkg in value.split(",") if pkg.strip()]

def resolve_build_options(conf, name=None, build_cmd=None, start_cmd=None, pkgs=None, staging_dir=None):
    """Merge command-line options over the [app] and [build] tables of ``conf``.

    Command-line packages are appended after the ones from the file.
    """
    app_conf = conf.get("app", {})
    build_conf = conf.get("build", {})

    file_pkgs = app_conf.get("pkgs", [])
    if isinstance(file_pkgs, str):
        file_pkgs = parse_pkgs(file_pkgs)

    return {
        "name": name or app_conf.get("name"),
        "custom_build_cmd": build_cmd if build_cmd is not None else app_conf.get("build_cmd"),
        "custom_start_cmd": start_cmd if start_cmd is not None else app_conf.get("start_cmd"),
        "pkgs": list(file_pkgs) + list(pkgs or []),
        "staging_root": staging_dir or build_conf.get("staging_dir", "tmp"),
    }
