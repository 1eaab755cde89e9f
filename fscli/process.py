"""Process class for a single command invocation"""

import logging
from typing import Callable, List, Optional

from rich.markup import escape

from .context import Session
from .parser import Redirection

logger = logging.getLogger(__name__)


def printable(text: str) -> str:
    """Replace undecodable file name bytes so text can go to any console"""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


class Process:
    """Represents a single command of a pipeline bound to its session"""

    def __init__(
        self,
        command: str,
        args: List[str],
        session: Session,
        executor: Callable,
        redirection: Optional[Redirection] = None
    ):
        """
        Initialize a process

        Args:
            command: Command name
            args: Command arguments, redirection already removed
            session: Session holding the working directory and console
            executor: Callable that executes the command
            redirection: Where content output goes instead of the console
        """
        self.command = command
        self.args = args
        self.session = session
        self.redirection = redirection
        self.executor = executor
        self.exit_code = 0

    @property
    def filesystem(self):
        return self.session.filesystem

    @property
    def console(self):
        return self.session.console

    def resolve_path(self, path: str) -> str:
        return self.session.resolve_path(path)

    def execute(self) -> int:
        """
        Execute the process

        Any exception escaping the executor is reported as an error line.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            self.exit_code = self.executor(self)
        except Exception as e:
            logger.debug(f"{self.command} failed", exc_info=True)
            self.exit_code = self.error(str(e))

        return self.exit_code

    def report(self, message: str) -> None:
        """Print a status message to the console"""
        self.console.print(printable(message), markup=False)

    def error(self, detail: str, code: int = 1) -> int:
        """Print 'Error: <detail>' and return the exit code to use"""
        self.console.print(f"[red]Error: {escape(printable(detail))}[/red]")
        return code

    def write_output(self, content: str) -> int:
        """
        Send content to the redirection target, or to the console

        No newline is added. Files receive the content unchanged; on the
        console, bytes of undecodable file names show as replacement characters.
        """
        if self.redirection is None:
            out = self.console.file
            out.write(printable(content))
            out.flush()
            return 0

        path = self.resolve_path(self.redirection.target)
        logger.debug(f"Redirecting {self.command} output to {path} (append={self.redirection.append})")
        try:
            with self.filesystem.open_for_write(path, append=self.redirection.append) as f:
                f.write(content)
        except OSError as e:
            return self.error(f"Error writing to file: {e}")
        return 0

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        return f"Process({self.command} {args_str})"
