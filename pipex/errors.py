"""Error type and message formatting for pipeline failures."""

from __future__ import annotations

from pipex.textutils import is_space

_SPACE_NAMES = {
    "\t": "\\t",
    " ": " ",
    "\n": "\\n",
    "\v": "\\v",
    "\f": "\\f",
    "\r": "\\r",
}


def describe_space(char: str) -> str | None:
    """Return a printable name for a whitespace character, or None."""
    return _SPACE_NAMES.get(char)


def format_error(message: str | None, detail: str | None = None) -> str:
    """Build the text reported for an error.

    A detail made of a single whitespace character is shown, escaped, in
    front of the message; any other detail is appended to it.
    """
    if detail is not None:
        if len(detail) == 1 and is_space(detail):
            return (describe_space(detail) or "") + (message or "")
        return (message or "") + detail
    return message or ""


class PipexError(Exception):
    """A failure that stops the pipeline; its text is what gets reported."""

    def __init__(self, message: str | None, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(format_error(message, detail))