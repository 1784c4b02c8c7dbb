"""Command-line parsing: open the files and locate the two commands."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from pipex.errors import PipexError
from pipex.textutils import is_space, split_words

DEFAULT_SEARCH_DIRS = ("/bin/", "/usr/bin/", "/usr/local/bin/")


@dataclass
class Command:
    """A command split into words, with the executable it resolved to."""

    argv: list[str]
    path: str


@dataclass
class Pipeline:
    """Input file, two commands and output file, with their open descriptors."""

    infile: str
    infd: int
    first: Command
    second: Command
    outfile: str
    outfd: int = field(default=-1)

    def describe(self) -> str:
        """Return a readable dump of both stages."""
        lines: list[str] = []
        for command, file in ((self.first, self.infile), (self.second, self.outfile)):
            lines.append("commands variable:")
            lines.extend(command.argv)
            lines.append(f"path: {command.path}")
            lines.append(f"file: {file}")
        return "\n".join(lines) + "\n"

    def close(self) -> None:
        """Close both file descriptors; calling it again does nothing."""
        for name in ("infd", "outfd"):
            fd = getattr(self, name)
            if fd >= 0:
                os.close(fd)
                setattr(self, name, -1)

    def __enter__(self) -> "Pipeline":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def resolve_path(command: str, search_dirs: Iterable[str] | None = None) -> str:
    """Return the first executable named ``command`` in the search directories."""
    dirs = DEFAULT_SEARCH_DIRS if search_dirs is None else search_dirs
    for directory in dirs:
        candidate = directory.rstrip("/") + "/" + command
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    raise PipexError("zsh: command not found: ", command)


def _open(path: str, flags: int, mode: int = 0o644) -> int:
    try:
        return os.open(path, flags, mode)
    except FileNotFoundError:
        raise PipexError("zsh: no such file or directory: ", path) from None
    except PermissionError:
        raise PipexError("zsh: permission denied: ", path) from None
    except OSError as exc:
        raise PipexError(f"pipex: {exc.strerror}") from None


def open_input(path: str) -> int:
    """Open ``path`` for reading and return its descriptor."""
    return _open(path, os.O_RDONLY)


def open_output(path: str) -> int:
    """Create or truncate ``path`` for writing and return its descriptor."""
    return _open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)


def _parse_command(text: str, search_dirs: Iterable[str] | None) -> Command:
    if not text:
        raise PipexError(" : permission denied")
    if len(text) == 1 and is_space(text):
        raise PipexError(" : command not found", text)
    words = split_words(text, " ")
    if not words:
        raise PipexError("zsh: command not found: ", text)
    return Command(argv=words, path=resolve_path(words[0], search_dirs))


def parse_args(argv: Sequence[str], search_dirs: Iterable[str] | None = None) -> Pipeline:
    """Build a pipeline from ``infile cmd1 cmd2 outfile``.

    The input file is opened first, then both commands are resolved, then
    the output file is created. Descriptors already opened are closed if a
    later step fails.
    """
    if len(argv) != 4:
        raise PipexError("invalid number of arguments")
    dirs = None if search_dirs is None else list(search_dirs)
    infile, first_text, second_text, outfile = argv
    infd = open_input(infile)
    try:
        first = _parse_command(first_text, dirs)
        second = _parse_command(second_text, dirs)
        outfd = open_output(outfile)
    except BaseException:
        os.close(infd)
        raise
    return Pipeline(infile, infd, first, second, outfile, outfd)