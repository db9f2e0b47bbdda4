"""
Path Resolver

Holds the explicit search path set with the `path` builtin and finds
executables on it. The process environment's PATH is never consulted.
"""

import os

import structlog

from djsh.errors import CommandNotFound

logger = structlog.get_logger(__name__)


class PathResolver:
    """Ordered list of search directories, unset until first assigned."""

    def __init__(self, raw=None):
        self._dirs = None
        if raw is not None:
            self.set(raw)

    @property
    def directories(self):
        return list(self._dirs) if self._dirs is not None else None

    def set(self, raw):
        """Replace the whole search path with the colon-separated directories."""
        self._dirs = raw.split(":")
        logger.debug("path set", directories=self._dirs)

    def get(self):
        """Colon-joined search path, or None when it was never set."""
        if self._dirs is None:
            return None
        return ":".join(self._dirs)

    @staticmethod
    def candidate(directory, name):
        if directory.endswith("/"):
            return directory + name
        return directory + "/" + name

    def resolve(self, name):
        """
        Return the first executable `dir/name` in list order.
        Raises CommandNotFound when the path is unset or nothing matches.
        """
        if self._dirs is None:
            raise CommandNotFound(name)
        for directory in self._dirs:
            full = self.candidate(directory, name)
            if os.access(full, os.X_OK):
                logger.debug("resolved", command=name, path=full)
                return full
        raise CommandNotFound(name)
