PROMPT = "djsh> "

# Positional arguments kept per command, not counting the command name
MAX_ARGS = 4

MAX_HISTORY = 50

REDIRECT_TOKEN = ">"
REDIRECT_MODE = 0o666

ERROR_MESSAGE = "An error has occurred (from DJ)\n"

DEFAULT_BANNER = "**By default, execlp() will be used**"
EXECL_BANNER = "**Based on your choice, execlp() will be used**"
EXECV_BANNER = "**Based on your choice, execvp() will be used**"
