"""Interactive Line Editor Package

Presents text as a pre-filled, fully editable input line using GNU readline.
"""

import sys
from contextlib import contextmanager
from typing import Callable

from gtc.errors import GtcError
from gtc.output import Colors


def _import_readline():
    import readline
    return readline


class EditError(GtcError):
    """Raised when the interactive edit does not produce a line."""
    pass


class EditorInitError(EditError):
    def __init__(self, reason: str):
        super().__init__(f"Could not initialize the terminal editor: {reason}")


class EditorReadError(EditError):
    def __init__(self):
        super().__init__("Failed to read the edited message")


class EditCancelledError(EditError):
    def __init__(self):
        super().__init__("Cancelled by user.")


class LineEditor:
    """Single-line editor with the initial text inserted as editable content.

    Args:
        input_func: Reads one line; input() by default so readline handles it.
        stdin: Checked for a terminal before a session starts.
        stream: Receives the color escapes around the prompt. Must also be a
            terminal, since input() only uses readline when both are.
    """

    PROMPT_COLOR = Colors.YELLOW

    def __init__(self, input_func: Callable[[str], str] = input, stdin=None, stream=None):
        self._input = input_func
        self._stdin = stdin
        self._stream = stream

    @property
    def stdin(self):
        return self._stdin or sys.stdin

    @property
    def stream(self):
        return self._stream or sys.stdout

    def _load_readline(self):
        if not hasattr(self.stdin, 'isatty') or not self.stdin.isatty():
            raise EditorInitError("standard input is not a terminal")
        if not hasattr(self.stream, 'isatty') or not self.stream.isatty():
            raise EditorInitError("standard output is not a terminal")
        try:
            return _import_readline()
        except ImportError as e:
            raise EditorInitError("the readline module is not available") from e

    @contextmanager
    def session(self, initial: str):
        """Pre-fill every prompt read inside the block with initial."""
        readline = self._load_readline()
        readline.set_startup_hook(lambda: readline.insert_text(initial))
        try:
            yield
        finally:
            readline.set_startup_hook()

    @contextmanager
    def _colored(self):
        self.stream.write(self.PROMPT_COLOR)
        self.stream.flush()
        try:
            yield
        finally:
            self.stream.write(Colors.RESET)
            self.stream.flush()

    def edit(self, initial: str) -> str:
        """Let the user edit initial and return the submitted line, trimmed.

        Raises:
            EditCancelledError: Ctrl-C or Ctrl-D at the prompt.
            EditorInitError: No terminal or no readline support.
            EditorReadError: Any other failure while reading.
        """
        with self.session(initial):
            with self._colored():
                try:
                    line = self._input('')
                except (KeyboardInterrupt, EOFError) as e:
                    raise EditCancelledError() from e
                except (OSError, ValueError) as e:
                    raise EditorReadError() from e
        return line.strip()


__all__ = [
    "LineEditor",
    "EditError",
    "EditorInitError",
    "EditorReadError",
    "EditCancelledError",
]
