"""Main polling loop: render, wait for a key, dispatch."""
import logging
from typing import Dict
from .app_state import ApplicationState

logger = logging.getLogger(__name__)

QUIT = "quit"

KEY_BINDINGS: Dict[str, str] = {
    "q": QUIT,
    "esc": QUIT,
    "j": "move_down",
    "down": "move_down",
    "k": "move_up",
    "up": "move_up",
    "enter": "select_profile",
    "space": "select_profile",
    "r": "refresh",
}


class EventLoop:
    """Single-threaded loop driving the application state."""

    def __init__(self, state: ApplicationState, display, keyboard, poll_interval: float = 0.25):
        """Initialize the loop with its display and key source."""
        self.state = state
        self.display = display
        self.keyboard = keyboard
        self.poll_interval = poll_interval

    def run(self):
        """Loop until a quit key or Ctrl-C."""
        try:
            while True:
                self.display.render(self.state)
                key = self.keyboard.read_key(self.poll_interval)
                if key is not None and not self.handle_key(key):
                    break
        except KeyboardInterrupt:
            pass

    def handle_key(self, key: str) -> bool:
        """Dispatch one key; returns False when the loop should stop."""
        action = KEY_BINDINGS.get(key)
        if action is None:
            return True
        if action == QUIT:
            return False

        logger.debug("Key %r -> %s", key, action)
        getattr(self.state, action)()
        return True
