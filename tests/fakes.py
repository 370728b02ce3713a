from nixbuilder.builders import Builder


class FakeBuilder(Builder):
    """Builder whose answers are fixed at construction, for tests."""

    def __init__(self, name="fake", matches=True, inputs=None, install=None, build=None, start=None,
                 fail_on=None):
        self._name = name
        self.matches = matches
        self.inputs = list(inputs or [])
        self.install = install
        self.build = build
        self.start = start
        self.fail_on = fail_on
        self.detect_calls = 0

    def _maybe_fail(self, operation):
        if self.fail_on == operation:
            raise IOError(f"{operation} exploded")

    def name(self):
        return self._name

    def detect(self, app):
        self.detect_calls += 1
        self._maybe_fail("detect")
        return self.matches

    def build_inputs(self, app):
        self._maybe_fail("build_inputs")
        return self.inputs

    def install_cmd(self, app):
        self._maybe_fail("install_cmd")
        return self.install

    def suggested_build_cmd(self, app):
        self._maybe_fail("suggested_build_cmd")
        return self.build

    def suggested_start_cmd(self, app):
        self._maybe_fail("suggested_start_cmd")
        return self.start
