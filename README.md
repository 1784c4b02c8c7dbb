# pipex

`pipex` runs two commands with a pipe between them. The first command reads
from an input file. The second command writes to an output file. The command

    pipex infile "cat" "wc -l" outfile

does the same as this shell line:

    < infile cat | wc -l > outfile

## Installation

    pip install .

## Usage

    pipex INFILE CMD1 CMD2 OUTFILE

The arguments are handled in this order:

1. `INFILE` is opened for reading. It must exist and be readable.
2. `CMD1` and then `CMD2` are split into words at spaces, and empty words are
   dropped. The first word is the program name. `pipex` looks for it in
   `/bin/`, `/usr/bin/` and `/usr/local/bin/`, in that order, and takes the
   first match that is a regular, executable file.
3. `OUTFILE` is created or truncated, with mode `0644`.

Both commands run with an empty environment. The first command's standard
output is piped to the second command's standard input.

If a step fails, `pipex` writes a message to standard error and exits with
status 1. The cases are these:

| Situation                             | Message                                  |
|---------------------------------------|------------------------------------------|
| not exactly four arguments            | `invalid number of arguments`            |
| input or output file does not exist   | `zsh: no such file or directory: FILE`   |
| input or output file not permitted    | `zsh: permission denied: FILE`           |
| other error opening a file            | `pipex: <system error text>`             |
| empty command string                  | ` : permission denied`                   |
| command that is one whitespace char   | e.g. `\t : command not found`            |
| program not found in the search dirs  | `zsh: command not found: NAME`           |
| a command could not be started        | `execve() failed`                        |

If both commands start, `pipex` exits with status 0. It does this whatever
exit codes the commands themselves return.

## What it does not do

- It takes exactly two commands. Longer pipelines are not supported.
- There is no shell quoting or escaping. `"grep 'a b'"` becomes the words
  `grep`, `'a`, `b'`.
- `PATH` is not used. Only the three fixed directories are searched, and a
  command given with a `/` in its name is still looked up inside them.
- There is no here-document or append mode for the output file.

## Library use

```python
from pipex.parsing import parse_args
from pipex.runner import run_pipeline

with parse_args(["infile", "cat", "wc -l", "outfile"]) as pipeline:
    print(pipeline.describe())
    first_status, second_status = run_pipeline(pipeline)
```

- `pipex.parsing.parse_args(argv, search_dirs=None)` takes the four arguments
  without the program name. It returns a `Pipeline`, which holds `infile`,
  `infd`, `first`, `second`, `outfile` and `outfd`. `first` and `second` are
  `Command` objects with `argv` and `path`. If a later step fails, it closes
  the input descriptor it has already opened. Pass `search_dirs` to look in
  other directories.
- `Pipeline.describe()` returns a text dump of each command's words, the
  resolved path and the file. `Pipeline.close()` closes both descriptors.
  Using a `Pipeline` as a context manager closes them on exit.
- `pipex.parsing.resolve_path`, `open_input` and `open_output` are the single
  steps that `parse_args` uses.
- `pipex.runner.run_pipeline(pipeline)` runs both commands and returns their
  exit codes as a tuple.
- `pipex.runner.main(argv=None)` is the command-line entry point. It returns
  the exit status.
- Every failure raises `pipex.errors.PipexError`. Its `str()` is the message
  shown above. `pipex.errors.format_error` and `describe_space` build that
  text.

The package also has a few small helpers:

- `pipex.textutils`: `split_words`, C-style `atoi` (32-bit) and `atol`
  (64-bit), `is_space`, `trim` and `find_within`. `find_within` is a bounded
  substring search that returns an index or `None`.
- `pipex.printf`: `cformat(fmt, *args)` returns the formatted text.
  `print_formatted(fmt, *args, stream=None)` writes that text and returns its
  length. Both support `%c %s %d %i %u %x %X %p %%`. Unknown conversions
  produce nothing.
- `pipex.linereader`: `LineReader(fd, buffer_size=5)` and `read_lines` read
  lines, as bytes, from a file descriptor or binary file object. Each read
  fetches at most `buffer_size` bytes.

## Running the tests

    pip install ".[test]"
    pytest