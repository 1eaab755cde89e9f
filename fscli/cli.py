"""Main CLI entry point for fscli"""

import logging
import os
import sys

import click

from .config import Config
from .context import Session
from .shell import Shell
from .version import get_version_string


def execute_script_file(shell, script_path):
    """Execute a script file line by line, returning the last exit code"""
    try:
        with open(script_path, 'r') as f:
            lines = f.readlines()
    except FileNotFoundError:
        shell.console.print(f"fscli: {script_path}: No such file or directory", markup=False)
        return 127
    except OSError as e:
        shell.console.print(f"fscli: {script_path}: {e}", markup=False)
        return 1

    exit_code = 0
    for line in lines:
        line = line.strip()

        # Skip empty lines and comments
        if not line or line.startswith('#'):
            continue
        if line.lower() == 'exit':
            break

        exit_code = shell.execute(line)

    return exit_code


def resolve_log_level(name: str) -> int:
    """Numeric level for a level name, WARNING for anything unknown"""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: str):
    logging.basicConfig(
        level=resolve_log_level(level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=get_version_string(), prog_name="fscli")
@click.option("-c", "command_string", default=None, help="Execute a single command line and exit")
@click.option(
    "--cwd",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Starting working directory (default: current directory)",
)
@click.option(
    "--history-file",
    default=None,
    help="REPL history file (can also set via FSCLI_HISTFILE environment variable)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (can also set via FSCLI_LOG_LEVEL environment variable)",
)
@click.argument("script", required=False)
def main(command_string, cwd, history_file, log_level, script):
    """fscli - minimal shell for basic file system work

    \b
    Examples:
      fscli                         start the interactive shell
      fscli -c "mkdir out | ls"     run one line
      fscli setup.fsh               run a script file
    """
    config = Config.from_args(start_dir=cwd, history_file=history_file, log_level=log_level)
    configure_logging(config.log_level)

    shell = Shell(session=Session(cwd=config.start_dir), history_file=config.history_file)

    if command_string is not None:
        sys.exit(shell.execute(command_string))

    if script is not None:
        sys.exit(execute_script_file(shell, os.path.expanduser(script)))

    shell.repl()


if __name__ == "__main__":
    main()
