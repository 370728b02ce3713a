from .base import Builder
from .go import GoBuilder
from .npm import NpmBuilder
from .yarn import YarnBuilder

__all__ = [
    "Builder",
    "GoBuilder",
    "NpmBuilder",
    "YarnBuilder",
    "DEFAULT_BUILDERS",
]

# Priority order: the first builder that detects the app is used.
DEFAULT_BUILDERS = [
    YarnBuilder(),  # before npm, both match package.json
    NpmBuilder(),
    GoBuilder(),
]
