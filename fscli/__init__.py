"""fscli - a minimal command-line shell emulator for basic filesystem work"""

from .version import __version__, get_version_string
from .shell import Shell

__all__ = ["Shell", "__version__", "get_version_string"]
