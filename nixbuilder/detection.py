from .cli_logger import logger
from .errors import BuilderError, NoBuilderMatchedError


class Selection:
    """Outcome of detection: the chosen builder, or None.

    None is only produced when the user supplied a start command, in which
    case the build relies on the user's commands and packages alone.
    """

    __slots__ = ("builder",)

    def __init__(self, builder=None):
        self.builder = builder

    @property
    def matched(self):
        return self.builder is not None

    def __repr__(self):
        if self.builder is None:
            return "Selection(None)"
        return f"Selection({self.builder.name()})"


def call_builder(builder, operation, app):
    """Call ``builder.<operation>(app)``, tagging failures with the builder and operation."""
    try:
        return getattr(builder, operation)(app)
    except BuilderError as e:
        if e.builder is None:
            e.builder = builder.name()
            e.details["builder"] = e.builder
        if e.operation is None:
            e.operation = operation
            e.details["operation"] = operation
        raise
    except Exception as e:
        raise BuilderError(f"Builder failed: {e}", builder=builder.name(), operation=operation) from e


def detect_builder(app, builders, custom_start_cmd=None):
    """Return a Selection for the first builder in ``builders`` that detects ``app``.

    Builders after the first match are never consulted.

    Raises:
        NoBuilderMatchedError: nothing matched and no start command was given.
        BuilderError: a builder's ``detect`` raised.
    """
    for builder in builders:
        if call_builder(builder, "detect", app):
            logger.step_info(f"Matched builder {builder.name()}")
            return Selection(builder)

    # Without a builder the start command is the only thing left to run.
    if custom_start_cmd is None:
        raise NoBuilderMatchedError("Failed to match a builder", {"source": str(app.source)})

    logger.step_info("No builders matched")
    return Selection(None)
