"""Local file system abstraction layer"""

import errno
import logging
import os
import shutil
from typing import Iterator, List, TextIO

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """Abstraction layer for the file system operations used by the builtins

    Every method takes an already resolved path. Methods returning bool report
    expected refusals (entry exists, entry missing) as False; any other
    OSError propagates to the caller.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the file system

        Args:
            encoding: Text encoding used to read and write files (default: utf-8)
        """
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_entries(self, path: str) -> List[str]:
        """
        List names of the immediate entries of a directory

        Raises:
            OSError: If the directory cannot be listed
        """
        return os.listdir(path)

    def create_directory(self, path: str) -> bool:
        """Create a single directory level; False if it exists or the parent is missing"""
        try:
            os.mkdir(path)
            return True
        except (FileExistsError, FileNotFoundError, NotADirectoryError) as e:
            logger.debug(f"mkdir {path} refused: {e}")
            return False

    def delete_empty_directory(self, path: str) -> bool:
        """Remove an empty directory; False if it is missing or not empty"""
        try:
            os.rmdir(path)
            return True
        except (FileNotFoundError, NotADirectoryError) as e:
            logger.debug(f"rmdir {path} refused: {e}")
            return False
        except OSError as e:
            if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                logger.debug(f"rmdir {path} refused: {e}")
                return False
            raise

    def delete_file(self, path: str) -> bool:
        """Remove a regular file; False if it is missing or a directory"""
        try:
            os.remove(path)
            return True
        except (FileNotFoundError, IsADirectoryError) as e:
            logger.debug(f"rm {path} refused: {e}")
            return False

    def move(self, source: str, destination: str) -> None:
        """
        Move or rename an entry, replacing an existing destination file

        Raises:
            OSError: If the entry cannot be moved
        """
        try:
            os.replace(source, destination)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise
            # Across devices os.replace cannot work, fall back to copy + delete
            shutil.move(source, destination)

    def create_empty_file(self, path: str) -> bool:
        """
        Create a new empty file

        Returns:
            True if the file was created, False if it already exists

        Raises:
            OSError: If the file cannot be created for any other reason
        """
        try:
            with open(path, 'x', encoding=self.encoding):
                pass
            return True
        except FileExistsError:
            return False

    def read_lines(self, path: str) -> Iterator[str]:
        """
        Lazily read the lines of a text file, without line terminators

        Raises:
            OSError: If the file cannot be opened or read
        """
        with open(path, 'r', encoding=self.encoding, errors='replace') as f:
            for line in f:
                yield line.rstrip('\r\n')

    def open_for_write(self, path: str, append: bool = False) -> TextIO:
        """
        Open a file for writing text

        Args:
            path: File path
            append: If True, append to the file; if False, overwrite it

        Raises:
            OSError: If the file cannot be opened
        """
        return open(path, 'a' if append else 'w', encoding=self.encoding, errors='surrogateescape')
