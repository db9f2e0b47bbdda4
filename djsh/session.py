from dataclasses import dataclass, field

from djsh.config import MAX_ARGS, MAX_HISTORY
from djsh.executor import LaunchStrategy
from djsh.history import HistoryStore
from djsh.path_resolver import PathResolver


@dataclass
class Session:
    """All mutable interpreter state, owned by one REPL loop."""
    strategy: LaunchStrategy = LaunchStrategy.EXECL
    max_args: int = MAX_ARGS
    history: HistoryStore = field(default_factory=lambda: HistoryStore(MAX_HISTORY))
    path: PathResolver = field(default_factory=PathResolver)
    running: bool = True
    exit_code: int = 0

    def stop(self, code=0):
        self.running = False
        self.exit_code = code
