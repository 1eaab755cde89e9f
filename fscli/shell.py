"""Shell implementation with REPL and command execution"""

import logging
import os
import tempfile
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.history import FileHistory, InMemoryHistory
from rich.markup import escape

from . import builtins  # noqa: F401  (registers the builtin commands)
from .command_decorators import BUILTINS, get_builtin
from .context import Session
from .parser import CommandParser, ParseError
from .pipeline import Pipeline
from .process import Process

logger = logging.getLogger(__name__)

PROMPT = "> "
EXIT_MESSAGE = "Exiting the command line interpreter."


class ShellCompleter(Completer):
    """Completes command names, then entries of the working directory"""

    def __init__(self, shell):
        self.shell = shell

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        segment = text.split('|')[-1].lstrip()
        words = segment.split(' ')

        if len(words) == 1:
            word = words[0]
            for name in sorted(BUILTINS):
                if name.startswith(word):
                    yield Completion(name, start_position=-len(word))
            return

        current_word = words[-1]
        dir_part, _, file_part = current_word.rpartition('/')
        if dir_part or current_word.startswith('/'):
            dir_part += '/'
        list_path = self.shell.session.resolve_path(dir_part)

        try:
            names = self.shell.session.filesystem.list_entries(list_path)
        except OSError:
            return

        for name in sorted(names):
            if not name.startswith(file_part):
                continue
            is_dir = os.path.isdir(os.path.join(list_path, name))
            display_name = name + "/" if is_dir else name
            yield Completion(
                dir_part + display_name,
                start_position=-len(current_word),
                display=display_name,
            )


class Shell:
    """Line-oriented shell over the local file system"""

    def __init__(self, session: Optional[Session] = None, history_file: Optional[str] = None):
        self.session = session or Session()
        self.history_file = history_file
        self.running = True

    @property
    def console(self):
        return self.session.console

    def execute(self, command_line: str) -> int:
        """
        Execute one input line

        Every pipe-separated segment runs on its own, in order. Failures are
        printed and never raised.

        Returns:
            Exit code of the last segment
        """
        pipeline = Pipeline.from_line(command_line)
        logger.debug(f"Executing {pipeline!r}")
        return pipeline.execute(self.run_segment)

    def run_segment(self, segment: str) -> int:
        """Parse, validate and dispatch a single segment"""
        try:
            parsed = CommandParser.parse_segment(segment)
        except ParseError as e:
            return self._print_error(str(e), code=2)

        spec = get_builtin(parsed.name)
        if spec is None:
            return self._print_error(f"Unknown command: {parsed.name}", code=127)

        if not spec.accepts(parsed.args):
            return self._print_error(f"Usage: {spec.usage}", code=2)

        logger.debug(f"Dispatching {parsed!r}")
        process = Process(
            command=parsed.name,
            args=parsed.args,
            session=self.session,
            redirection=parsed.redirection,
            executor=spec,
        )
        return process.execute()

    def _print_error(self, detail: str, code: int = 1) -> int:
        self.console.print(f"[red]Error: {escape(detail)}[/red]")
        return code

    def run_loop(self, read_line: Callable[[str], str]) -> None:
        """
        Read and execute lines until 'exit' or end of input

        Args:
            read_line: Callable taking the prompt and returning the next line;
                raises EOFError at end of input
        """
        self.running = True
        while self.running:
            try:
                line = read_line(PROMPT).strip()
            except KeyboardInterrupt:
                self.console.print()
                continue
            except EOFError:
                self.console.print()
                break

            if line.lower() == 'exit':
                self.console.print(EXIT_MESSAGE, markup=False)
                break

            try:
                self.execute(line)
            except KeyboardInterrupt:
                self.console.print()

        self.running = False

    def _create_history(self):
        """FileHistory at the configured path, or a temp file if it is unusable"""
        if not self.history_file:
            return InMemoryHistory()

        history_path = os.path.expanduser(self.history_file)
        try:
            os.makedirs(os.path.dirname(history_path) or '.', exist_ok=True)
            with open(history_path, "a"):
                pass
            return FileHistory(history_path)
        except OSError:
            temp_history = tempfile.NamedTemporaryFile(
                mode="w", delete=False, suffix="_fscli_history"
            )
            temp_history.close()
            self.console.print(
                f"[yellow]Warning: Cannot use {escape(history_path)}, using temporary history file[/yellow]"
            )
            return FileHistory(temp_history.name)

    def repl(self):
        """Start the interactive REPL"""
        session = PromptSession(
            history=self._create_history(),
            auto_suggest=AutoSuggestFromHistory(),
            completer=ShellCompleter(self),
            complete_while_typing=True,
        )
        self.run_loop(session.prompt)
