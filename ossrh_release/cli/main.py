# ossrh_release/cli/main.py
"""Main CLI entry point for ossrh-release"""

import os
import sys
import logging
from typing import Optional

import click
from rich.logging import RichHandler
from rich.panel import Panel
from rich.markup import escape

from ..__version__ import __version__
from ..api.exceptions import ConfigurationError
from ..constants import APP_NAME, LOG_FORMAT, TASKS, TASK_PROMOTE, ENV_LOG_LEVEL
from ..services import ConfigService, ReleaseService
from ..utils.output import console
from .output import print_usage, format_result

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    override = os.environ.get(ENV_LOG_LEVEL)
    if override:
        level = logging.getLevelName(override.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )


@click.command(name=APP_NAME)
@click.option('-task', '--task', 'task', default=None, metavar='[gpg|upload|promote]',
              help='Task to run: gpg, upload or promote')
@click.option('--config', 'config_path', default=None,
              type=click.Path(dir_okay=False),
              help='Project file (default: ./.ossrh-release.yaml)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, task: Optional[str], config_path: Optional[str],
        verbose: bool, debug: bool, quiet: bool):
    """Publish Maven artifacts to Maven Central through Nexus OSSRH

    \b
    gpg      Sign artifacts with GPG.
    upload   Upload artifacts to a nexus staging repo and close it.
    promote  Promote a repo to get it picked up by Maven Central.

    Credentials and per-run values come from the environment:
    NEXUS_OSSRHUSER, NEXUS_OSSRHPASS, NEXUS_STAGINGPROFILEID,
    NEXUS_STAGINGREPOID, GPGPASS, artifactFolder, releaseVersion.
    """
    if task not in TASKS:
        print_usage("Task not specified." if not task else f"Unknown task: {task}")
        ctx.exit(1)

    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    try:
        config_service = ConfigService(config_path=config_path)
        config = config_service.load()
        if task == TASK_PROMOTE:
            config = config_service.recover_repository_id(config)
        logger.debug(f"Configuration: {config.to_dict()}")
    except ConfigurationError as e:
        console.print(Panel(
            f"[red]{escape(str(e))}[/red]",
            title="[bold red]Configuration Error[/bold red]",
            border_style="red"
        ))
        ctx.exit(1)

    service = ReleaseService(config, project_root=config_service.project_root)
    console.quiet = quiet
    try:
        result = service.run(task)
    finally:
        console.quiet = False
    logger.debug(f"Result: {result.to_dict()}")

    if not (quiet and result.is_success):
        format_result(result)

    if not result.is_success and debug and result.error is not None:
        console.print("\n[bold]Debug Information:[/bold]")
        console.print(escape(repr(result.error)))

    ctx.exit(result.exit_code)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        exit_code = cli.main(prog_name=APP_NAME, standalone_mode=False)

    except (KeyboardInterrupt, click.exceptions.Abort):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except Exception as e:
        console.print(f"[red]Unexpected error: {escape(str(e))}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)

    sys.exit(exit_code or 0)


if __name__ == "__main__":
    main()
