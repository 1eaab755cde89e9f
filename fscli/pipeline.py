"""Pipeline of independently executed segments"""

from typing import Callable, List

from .parser import CommandParser


class Pipeline:
    """The segments of one input line

    Segments run in order and each one stands alone: nothing written by one
    stage is handed to the next, and a failing stage does not stop the rest.
    """

    def __init__(self, segments: List[str]):
        self.segments = segments
        self.exit_codes = []

    @classmethod
    def from_line(cls, command_line: str) -> "Pipeline":
        return cls(CommandParser.split_pipeline(command_line))

    def execute(self, run_segment: Callable[[str], int]) -> int:
        """
        Execute every segment

        Args:
            run_segment: Callable that runs one segment and returns its exit code

        Returns:
            Exit code of the last segment (0 for an empty pipeline)
        """
        self.exit_codes = []
        for segment in self.segments:
            self.exit_codes.append(run_segment(segment))
        return self.get_exit_code()

    def get_exit_code(self) -> int:
        """Get exit code of the last segment"""
        return self.exit_codes[-1] if self.exit_codes else 0

    def __len__(self):
        return len(self.segments)

    def __iter__(self):
        return iter(self.segments)

    def __repr__(self):
        return f"Pipeline({' | '.join(self.segments)})"
