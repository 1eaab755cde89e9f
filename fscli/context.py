"""Per-shell session state"""

import os
from typing import Optional

from rich.console import Console

from .filesystem import LocalFileSystem


def create_console(file=None) -> Console:
    """Console used for all shell output; never wraps or rewrites text"""
    return Console(file=file, highlight=False, soft_wrap=True, emoji=False)


class Session:
    """Working directory, file system and console shared by the builtins of one shell

    The working directory is only changed through change_directory(); every
    relative path is resolved against it at the time a command runs.
    """

    def __init__(
        self,
        cwd: Optional[str] = None,
        filesystem: Optional[LocalFileSystem] = None,
        console: Optional[Console] = None,
    ):
        self.cwd = os.path.abspath(cwd or os.getcwd())
        self.filesystem = filesystem or LocalFileSystem()
        self.console = console or create_console()

    def resolve_path(self, path: str) -> str:
        """
        Resolve a relative or absolute path to an absolute path

        Args:
            path: Path to resolve (can be relative or absolute)

        Returns:
            Absolute, normalized path
        """
        if not path:
            return self.cwd
        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(self.cwd, path))

    def change_directory(self, path: str) -> None:
        self.cwd = path

    def __repr__(self):
        return f"Session(cwd={self.cwd})"
