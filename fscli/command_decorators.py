"""Registration of builtin commands"""

from typing import Callable, Dict, Optional


class CommandMetadata:
    """Dispatch information attached to a registered command"""

    def __init__(self, name: str, func: Callable, min_args: int = 0, usage: Optional[str] = None):
        self.name = name
        self.func = func
        self.min_args = min_args
        self.usage = usage or name

    def accepts(self, args) -> bool:
        """Whether enough arguments were given to run the command"""
        return len(args) >= self.min_args

    def __call__(self, process) -> int:
        return self.func(process)

    def __repr__(self):
        return f"CommandMetadata({self.name}, min_args={self.min_args})"


# Registry of all builtin commands by name
BUILTINS: Dict[str, CommandMetadata] = {}


def command(name: Optional[str] = None, min_args: int = 0, usage: Optional[str] = None):
    """
    Register a function as a builtin command

    The function receives a Process and returns an exit code. The command name
    defaults to the function name without its 'cmd_' prefix.

    Example:
        @command(min_args=1, usage="mkdir <directory>")
        def cmd_mkdir(process):
            ...
    """
    def decorator(func):
        cmd_name = name or func.__name__.replace('cmd_', '', 1)

        BUILTINS[cmd_name] = CommandMetadata(cmd_name, func, min_args=min_args, usage=usage)
        return func
    return decorator


def get_builtin(name: str) -> Optional[CommandMetadata]:
    """Look up a registered command, None if the name is unknown"""
    return BUILTINS.get(name)
