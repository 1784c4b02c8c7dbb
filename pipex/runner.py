"""Run a two-stage pipeline and the command-line entry point."""

from __future__ import annotations

import subprocess
import sys
from typing import Sequence

from pipex.errors import PipexError
from pipex.parsing import Pipeline, parse_args


def run_pipeline(pipeline: Pipeline) -> tuple[int, int]:
    """Run ``first < infile | second > outfile`` and return both exit codes.

    The commands are started with an empty environment.
    """
    try:
        first = subprocess.Popen(
            pipeline.first.argv,
            executable=pipeline.first.path,
            stdin=pipeline.infd,
            stdout=subprocess.PIPE,
            env={},
        )
    except OSError:
        raise PipexError("execve() failed") from None
    try:
        second = subprocess.Popen(
            pipeline.second.argv,
            executable=pipeline.second.path,
            stdin=first.stdout,
            stdout=pipeline.outfd,
            env={},
        )
    except OSError:
        first.stdout.close()
        first.wait()
        raise PipexError("execve() failed") from None
    first.stdout.close()
    return first.wait(), second.wait()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``infile cmd1 cmd2 outfile``, run it, and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        with parse_args(args) as pipeline:
            run_pipeline(pipeline)
    except PipexError as exc:
        text = str(exc)
        if text:
            print(text, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())