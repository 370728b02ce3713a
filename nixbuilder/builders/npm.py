import json

from ..errors import BuilderError
from .base import Builder


def read_package_json(app):
    """Parse the app's package.json, returning {} if there is none."""
    if not app.includes_file("package.json"):
        return {}
    try:
        return json.loads(app.read_file("package.json"))
    except json.JSONDecodeError as e:
        raise BuilderError(f"Invalid package.json: {e}", operation="read package.json") from e


def has_script(app, script):
    scripts = read_package_json(app).get("scripts") or {}
    return script in scripts


class NpmBuilder(Builder):
    def name(self):
        return "npm"

    def detect(self, app):
        return app.includes_file("package.json")

    def build_inputs(self, app):
        return ["nodejs"]

    def install_cmd(self, app):
        return "npm install"

    def suggested_build_cmd(self, app):
        if has_script(app, "build"):
            return "npm run build"
        return None

    def suggested_start_cmd(self, app):
        if has_script(app, "start"):
            return "npm run start"
        if app.includes_file("index.js"):
            return "node index.js"
        return None
