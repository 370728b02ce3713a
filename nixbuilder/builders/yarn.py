from .npm import NpmBuilder, has_script


class YarnBuilder(NpmBuilder):
    """Node apps that pin dependencies with a yarn.lock."""

    def name(self):
        return "yarn"

    def detect(self, app):
        return app.includes_file("package.json") and app.includes_file("yarn.lock")

    def build_inputs(self, app):
        return ["nodejs", "yarn"]

    def install_cmd(self, app):
        return "yarn install --frozen-lockfile"

    def suggested_build_cmd(self, app):
        if has_script(app, "build"):
            return "yarn build"
        return None

    def suggested_start_cmd(self, app):
        if has_script(app, "start"):
            return "yarn start"
        if app.includes_file("index.js"):
            return "node index.js"
        return None
