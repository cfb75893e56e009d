"""Keyboard input handler for simple key commands."""
import os
import sys
import termios
import time
import tty
import select
from typing import Optional

ESCAPE_SEQUENCE_TIMEOUT = 0.05

ARROW_KEYS = {
    "A": "up",
    "B": "down",
}

NAMED_KEYS = {
    "\r": "enter",
    "\n": "enter",
    " ": "space",
}


class KeyboardHandler:
    """Polls stdin for single key commands without a background thread."""

    def __init__(self):
        """Initialize the keyboard handler."""
        self.fd: Optional[int] = None
        self.old_settings = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()

    def start(self):
        """Put the terminal into cbreak mode."""
        self._setup_terminal()

    def stop(self):
        """Restore the terminal."""
        self._restore_terminal()

    def _setup_terminal(self):
        """Setup terminal for single key input."""
        try:
            if sys.stdin.isatty():
                self.fd = sys.stdin.fileno()
                self.old_settings = termios.tcgetattr(self.fd)
                tty.setcbreak(self.fd)
        except (termios.error, AttributeError):
            # Not a TTY or termios not available
            self.fd = None

    def _restore_terminal(self):
        """Restore terminal to original settings."""
        try:
            if self.old_settings and self.fd is not None:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        except (termios.error, AttributeError):
            pass
        self.old_settings = None

    def read_key(self, timeout: float) -> Optional[str]:
        """Wait up to timeout seconds for a key and return its name.

        Printable keys come back as typed; up/down arrows, Enter, space and
        a lone Escape come back as "up", "down", "enter", "space", "esc".
        Other escape sequences yield None.
        """
        if self.fd is None:
            time.sleep(timeout)
            return None

        if not self._wait_readable(timeout):
            return None

        try:
            char = self._read_char()
            if char == "\x1b":
                return self._read_escape_sequence()
        except OSError:
            return None

        if char in NAMED_KEYS:
            return NAMED_KEYS[char]
        return char or None

    def _read_escape_sequence(self) -> Optional[str]:
        """Decode the rest of an escape sequence, or report a lone Escape."""
        if not self._wait_readable(ESCAPE_SEQUENCE_TIMEOUT):
            return "esc"
        if self._read_char() != "[":
            return None
        if not self._wait_readable(ESCAPE_SEQUENCE_TIMEOUT):
            return None
        return ARROW_KEYS.get(self._read_char())

    def _wait_readable(self, timeout: float) -> bool:
        return bool(select.select([self.fd], [], [], timeout)[0])

    def _read_char(self) -> str:
        return os.read(self.fd, 1).decode(errors="ignore")
