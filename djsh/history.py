import sys
from collections import deque

import structlog

from djsh.config import MAX_HISTORY

try:
    import readline
except ImportError:
    readline = None

logger = structlog.get_logger(__name__)


class HistoryStore:
    """Bounded FIFO log of raw input lines, oldest first."""

    def __init__(self, capacity=MAX_HISTORY):
        self.capacity = capacity
        self._entries = deque(maxlen=capacity)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def record(self, line):
        """Append a line, evicting the oldest entry once full."""
        # Empty input is kept as a single space
        self._entries.append(line if line else " ")

    def last(self, n=None):
        """Return the most recent n entries (all when n is None), oldest first."""
        if n is None:
            return list(self._entries)
        if n <= 0:
            return []
        return list(self._entries)[-n:]


def init_readline(capacity=MAX_HISTORY):
    """Enable line editing when reading from a real terminal."""
    if readline is None or not sys.stdin.isatty():
        logger.debug("readline disabled", tty=sys.stdin.isatty())
        return
    try:
        readline.parse_and_bind("set editing-mode emacs")
        readline.parse_and_bind("\\e[A: previous-history")
        readline.parse_and_bind("\\e[B: next-history")
        readline.set_history_length(capacity)
    except Exception as e:
        print(f"Warning: Could not configure readline: {e}", file=sys.stderr)
