import os

from .errors import SourceError


class AppSource:
    """A point-in-time listing of an application's top-level directory entries.

    The listing is captured once in :meth:`from_path` and never refreshed, so
    detection and generation see the same view even if the directory changes
    while a build is running.
    """

    def __init__(self, source, paths):
        self.source = source
        self.paths = tuple(paths)

    @classmethod
    def from_path(cls, source):
        """List ``source`` and return a snapshot of its entries.

        Raises:
            SourceError: if the directory is missing, not a directory or unreadable.
        """
        try:
            names = os.listdir(source)
        except OSError as e:
            raise SourceError(f"Failed to read app source directory: {e.strerror or e}", source=source) from e
        return cls(source, [os.path.join(source, name) for name in names])

    def includes_file(self, name):
        for path in self.paths:
            if os.path.basename(path) == name:
                return True
        return False

    def read_file(self, name):
        """Return the text of a top-level file in the app source."""
        with open(os.path.join(self.source, name), "r", encoding="utf-8") as f:
            return f.read()

    def __repr__(self):
        return f"AppSource(source={self.source!r}, entries={len(self.paths)})"
