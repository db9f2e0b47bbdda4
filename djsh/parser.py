import re
from dataclasses import dataclass, field
from typing import List, Optional

from djsh.config import MAX_ARGS, REDIRECT_TOKEN
from djsh.errors import ParseError

# Only these separate tokens; other whitespace is part of a token
SEPARATORS = re.compile(r"[ \t\r\n]+")


@dataclass
class ParsedCommand:
    """One tokenized input line."""
    name: str
    args: List[str] = field(default_factory=list)
    # Arguments dropped because they did not fit under the cap
    overflow: int = 0
    redirect: Optional[str] = None
    redirect_error: bool = False

    @property
    def argc(self):
        """Number of arguments the user typed, including dropped ones."""
        return len(self.args) + self.overflow


def strip_line(line):
    """Remove the line terminator and one trailing carriage return."""
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def parse_command(line, max_args=MAX_ARGS):
    """
    Split a line into command name, capped arguments and redirect target.
    Raises ParseError when there is no command name.
    """
    tokens = [tok for tok in SEPARATORS.split(line) if tok]
    if not tokens or tokens[0] == REDIRECT_TOKEN:
        raise ParseError(f"no command in {line!r}")

    cmd = ParsedCommand(name=tokens[0])
    i = 1
    while i < len(tokens):
        tok = tokens[i]
        if tok == REDIRECT_TOKEN:
            if i + 1 < len(tokens):
                cmd.redirect = tokens[i + 1]
            else:
                cmd.redirect_error = True
            # Anything after the target is ignored
            break
        if len(cmd.args) < max_args:
            cmd.args.append(tok)
        else:
            cmd.overflow += 1
        i += 1

    return cmd
