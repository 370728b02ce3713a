"""Exception types raised by the nixbuilder pipeline."""


class NixBuilderError(Exception):
    """Base exception for all nixbuilder errors."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
            return f"{self.message} ({extra})"
        return self.message


class SourceError(NixBuilderError):
    """The application source directory could not be read."""

    def __init__(self, message, source=None, details=None):
        details = details or {}
        if source is not None:
            details["source"] = str(source)
        super().__init__(message, details)


class NoBuilderMatchedError(NixBuilderError):
    """No builder recognized the app and no start command was given."""


class BuilderError(NixBuilderError):
    """A builder failed while detecting or describing the app."""

    def __init__(self, message, builder=None, operation=None, details=None):
        details = details or {}
        if builder:
            details["builder"] = builder
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.builder = builder
        self.operation = operation


class WorkspaceError(NixBuilderError):
    """Staging the build workspace failed."""

    def __init__(self, message, operation=None, workspace_path=None, details=None):
        details = details or {}
        if operation:
            details["operation"] = operation
        if workspace_path:
            details["workspace_path"] = str(workspace_path)
        super().__init__(message, details)
        self.operation = operation


class CommandError(NixBuilderError):
    """An external command failed to start or exited non-zero."""

    def __init__(self, message, command=None, returncode=None, stderr=None, details=None):
        details = details or {}
        if command:
            details["command"] = " ".join(command)
        if returncode is not None:
            details["exit_code"] = returncode
        super().__init__(message, details)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
