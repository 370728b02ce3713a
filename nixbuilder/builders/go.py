from .base import Builder


class GoBuilder(Builder):
    def name(self):
        return "go"

    def detect(self, app):
        return app.includes_file("go.mod") or app.includes_file("main.go")

    def build_inputs(self, app):
        return ["go"]

    def install_cmd(self, app):
        # Module-less apps have nothing to download.
        if app.includes_file("go.mod"):
            return "go get"
        return None

    def suggested_build_cmd(self, app):
        return "go build -o out"

    def suggested_start_cmd(self, app):
        return "./out"
