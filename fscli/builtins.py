"""Built-in shell commands"""

import os

from .command_decorators import BUILTINS, command, get_builtin
from .parser import CommandParser
from .process import Process

__all__ = ["BUILTINS", "get_builtin", "HELP_LINES"]


HELP_LINES = [
    "Supported commands:",
    "pwd - Print current directory",
    "cd <path> - Change directory",
    "cat <file1> <file2> ... [> <outputFile> | >> <outputFile>] - Display file contents",
    "mkdir <directory> - Create a new directory",
    "rmdir <directory> - Remove a directory",
    "rm <file> - Remove a file",
    "mv <sourcePath> <destPath> - Move or rename a file",
    "touch <filename> - Create a new empty file",
    "echo <message> [> <file> | >> <file>] - Write message to console or file",
    "ls <directory> [-a] [-r] [> <outputFile> | >> <outputFile>] - List files",
    "exit - Exit the CLI",
    "help - Display available commands",
]


@command(min_args=1, usage="echo <message> [> file | >> file]")
def cmd_echo(process: Process) -> int:
    """Echo arguments, redirectable"""
    return process.write_output(' '.join(process.args) + '\n')


@command()
def cmd_ls(process: Process) -> int:
    """
    List the entries of a directory

    Usage: ls [directory] [-a] [-r]

    Options:
        -a          Include names starting with '.'
        -r          Reverse the (by name) order
    """
    options = CommandParser.parse_ls_options(process.args)
    target = options.path if options.path is not None else process.session.cwd
    path = process.resolve_path(target)

    fs = process.filesystem
    if not fs.is_directory(path):
        return process.error(f"Invalid directory: {target}")

    try:
        names = fs.list_entries(path)
    except OSError:
        return process.error(f"Unable to list files in: {target}")

    if not options.show_all:
        names = [name for name in names if not name.startswith('.')]
    names.sort(reverse=options.reverse)

    return process.write_output(''.join(name + '\n' for name in names))


@command(min_args=1, usage="cat <file1> <file2> ... [> file | >> file]")
def cmd_cat(process: Process) -> int:
    """
    Concatenate files line by line, redirectable

    A missing or unreadable file is reported and skipped; whatever was read is
    still written out once all files have been processed.
    """
    fs = process.filesystem
    chunks = []
    exit_code = 0

    for filename in process.args:
        path = process.resolve_path(filename)
        if not fs.exists(path):
            exit_code = process.error(f"File does not exist: {filename}")
            continue
        try:
            for line in fs.read_lines(path):
                chunks.append(line + '\n')
        except OSError as e:
            exit_code = process.error(f"Error reading file: {e}")

    write_code = process.write_output(''.join(chunks))
    return write_code or exit_code


@command()
def cmd_pwd(process: Process) -> int:
    """Print working directory"""
    process.report(process.session.cwd)
    return 0


@command(min_args=1, usage="cd <path>")
def cmd_cd(process: Process) -> int:
    """Change the session working directory"""
    target = process.args[0]
    session = process.session

    if os.path.isabs(target):
        path = os.path.normpath(target)
    elif target == '..':
        parent = os.path.dirname(session.cwd)
        # The root has no parent
        path = None if parent == session.cwd else parent
    else:
        path = session.resolve_path(target)

    if path is None or not process.filesystem.is_directory(path):
        return process.error("Invalid path: No such directory.")

    session.change_directory(path)
    process.report(f"Changed directory to: {path}")
    return 0


@command(min_args=1, usage="mkdir <directory>")
def cmd_mkdir(process: Process) -> int:
    """Create one directory level"""
    path = process.resolve_path(process.args[0])
    if process.filesystem.create_directory(path):
        process.report(f"Directory created successfully: {path}")
        return 0
    return process.error("Could not create directory. It may already exist or the path is invalid.")


@command(min_args=1, usage="rmdir <directory>")
def cmd_rmdir(process: Process) -> int:
    """Remove an empty directory"""
    path = process.resolve_path(process.args[0])
    fs = process.filesystem

    if not fs.is_directory(path) or fs.list_entries(path):
        return process.error("Directory is not empty or does not exist.")

    if fs.delete_empty_directory(path):
        process.report(f"Directory removed successfully: {path}")
        return 0
    return process.error("Failed to delete the directory. Check permissions or if it's in use.")


@command(min_args=1, usage="rm <file>")
def cmd_rm(process: Process) -> int:
    """Remove a file, never a directory"""
    name = process.args[0]
    path = process.resolve_path(name)
    fs = process.filesystem

    if not fs.exists(path):
        return process.error(f"No such file or directory: {name}")
    if fs.is_directory(path):
        return process.error(f"Cannot delete directory: {name}. Use rmdir instead.")

    if fs.delete_file(path):
        process.report(f"File deleted successfully: {name}")
        return 0
    return process.error("Failed to delete the file. Check file permissions or if it is in use.")


@command(min_args=2, usage="mv <source> <destination>")
def cmd_mv(process: Process) -> int:
    """Move or rename; an existing directory destination receives the source"""
    source_name, dest_name = process.args[0], process.args[1]
    source = process.resolve_path(source_name)
    destination = process.resolve_path(dest_name)
    fs = process.filesystem

    if not fs.exists(source):
        return process.error(f"Source file does not exist: {source_name}")

    if fs.is_directory(destination):
        destination = os.path.join(destination, os.path.basename(source))

    try:
        fs.move(source, destination)
    except OSError as e:
        return process.error(f"Failed to move or rename: {e}")

    process.report(f"Moved/Renamed successfully: {source_name} to {destination}")
    return 0


@command(min_args=1, usage="touch <filename>")
def cmd_touch(process: Process) -> int:
    """Create a new empty file; an existing file is left alone and reported"""
    name = process.args[0]
    try:
        created = process.filesystem.create_empty_file(process.resolve_path(name))
    except OSError as e:
        return process.error(f"Failed to create file: {e}")

    if not created:
        return process.error(f"File already exists: {name}")
    process.report(f"File created: {name}")
    return 0


@command()
def cmd_help(process: Process) -> int:
    """Show help information"""
    for line in HELP_LINES:
        process.report(line)
    return 0
