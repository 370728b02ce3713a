from abc import ABC, abstractmethod


class Builder(ABC):
    """Recognizes one kind of application and describes how to build it.

    Builders only inspect the :class:`~nixbuilder.app_source.AppSource` they
    are given. Any method may raise; the pipeline aborts on the first error.
    """

    @abstractmethod
    def name(self):
        """Identifier used in log output."""

    @abstractmethod
    def detect(self, app):
        """Return True if this builder recognizes ``app``."""

    @abstractmethod
    def build_inputs(self, app):
        """Return the Nix package names the build environment needs."""

    @abstractmethod
    def install_cmd(self, app):
        """Return the dependency install command, or None."""

    @abstractmethod
    def suggested_build_cmd(self, app):
        """Return the build command, or None."""

    @abstractmethod
    def suggested_start_cmd(self, app):
        """Return the command that starts the app, or None."""

    def __repr__(self):
        return f"<{type(self).__name__} {self.name()}>"
