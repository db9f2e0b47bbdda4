"""Command-line entry point for djsh."""

import click
import structlog

from djsh import __version__
from djsh.config import DEFAULT_BANNER, EXECL_BANNER, EXECV_BANNER
from djsh.errors import report_error
from djsh.executor import LaunchStrategy
from djsh.log import configure_logging
from djsh.session import Session
from djsh.shell import Shell

logger = structlog.get_logger(__name__)

BANNERS = {
    LaunchStrategy.EXECL: EXECL_BANNER,
    LaunchStrategy.EXECV: EXECV_BANNER,
}


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(version=__version__, prog_name="djsh")
@click.option("--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.argument("flags", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, verbose, log_json, flags):
    """djsh - a limited interactive shell.

    FLAGS may start with -execlp (default) or -execvp to choose how external
    commands are launched. Only the first one is looked at.
    """
    configure_logging(verbose=verbose, log_json=log_json)

    strategy = LaunchStrategy.from_flag(flags[0]) if flags else None
    if strategy is not None:
        click.echo(BANNERS[strategy])
    else:
        if flags:
            logger.debug("unrecognized startup flag", flag=flags[0])
            report_error()
        strategy = LaunchStrategy.EXECL
        click.echo(DEFAULT_BANNER)

    code = Shell(Session(strategy=strategy)).run()
    ctx.exit(code)


def main():
    cli(prog_name="djsh")
