"""Shell command parser for pipeline syntax"""

from typing import List, Optional, Tuple


class ParseError(ValueError):
    """Raised when a segment cannot be turned into a command"""


class Redirection:
    """Represents a redirection operation"""

    def __init__(self, operator: str, target: str):
        self.operator = operator  # '>' or '>>'
        self.target = target      # filename, resolved at execution time

    @property
    def append(self) -> bool:
        return self.operator == '>>'

    def __eq__(self, other):
        if not isinstance(other, Redirection):
            return NotImplemented
        return self.operator == other.operator and self.target == other.target

    def __repr__(self):
        return f"Redirection({self.operator} {self.target})"


class ParsedCommand:
    """A single command invocation ready for dispatch"""

    def __init__(self, name: str, args: List[str], redirection: Optional[Redirection] = None):
        self.name = name
        self.args = args
        self.redirection = redirection

    def __eq__(self, other):
        if not isinstance(other, ParsedCommand):
            return NotImplemented
        return (self.name, self.args, self.redirection) == \
               (other.name, other.args, other.redirection)

    def __repr__(self):
        args_str = ' '.join(self.args)
        redirect_str = f" {self.redirection.operator} {self.redirection.target}" if self.redirection else ''
        return f"ParsedCommand({self.name} {args_str}{redirect_str})"


class LsOptions:
    """Flags and target accepted by ls"""

    def __init__(self, path: Optional[str] = None, show_all: bool = False, reverse: bool = False):
        self.path = path
        self.show_all = show_all
        self.reverse = reverse


class CommandParser:
    """Parse shell command strings into pipeline components

    No quoting, escaping or expansion is recognised: a line is split on '|'
    and every segment on spaces.
    """

    REDIRECT_OPERATORS = ('>', '>>')

    @staticmethod
    def split_pipeline(command_line: str) -> List[str]:
        """
        Split a command line into trimmed, non-empty segments

        Example:
            >>> CommandParser.split_pipeline("ls -a | pwd")
            ['ls -a', 'pwd']
        """
        if not command_line.strip():
            return []

        segments = []
        for part in command_line.split('|'):
            part = part.strip()
            if part:
                segments.append(part)
        return segments

    @staticmethod
    def tokenize(segment: str) -> List[str]:
        """Split a segment on spaces; runs of spaces count as one separator"""
        return [token for token in segment.strip().split(' ') if token]

    @staticmethod
    def extract_redirection(args: List[str]) -> Tuple[List[str], Optional[Redirection]]:
        """
        Pull the redirection out of an argument list

        '>' is looked for first and wins over '>>'. The operator, its target
        and every token after the target are removed from the arguments.

        Raises:
            ParseError: if the operator has no filename after it
        """
        for operator in CommandParser.REDIRECT_OPERATORS:
            if operator not in args:
                continue
            idx = args.index(operator)
            if idx + 1 >= len(args):
                raise ParseError(f"Missing file name after '{operator}'")
            return args[:idx], Redirection(operator, args[idx + 1])
        return list(args), None

    @staticmethod
    def parse_segment(segment: str) -> ParsedCommand:
        """
        Parse one pipeline segment

        Example:
            >>> CommandParser.parse_segment("echo hi > out.txt")
            ParsedCommand(echo hi > out.txt)
        """
        tokens = CommandParser.tokenize(segment)
        if not tokens:
            raise ParseError("Empty command")

        args, redirection = CommandParser.extract_redirection(tokens[1:])
        return ParsedCommand(tokens[0], args, redirection)

    @staticmethod
    def parse_ls_options(args: List[str]) -> LsOptions:
        """Interpret ls arguments: -a, -r, anything else is the target (last wins)"""
        options = LsOptions()
        for arg in args:
            if arg == '-a':
                options.show_all = True
            elif arg == '-r':
                options.reverse = True
            else:
                options.path = arg
        return options
