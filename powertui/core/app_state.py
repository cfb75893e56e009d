"""Application state shared by the event loop and the display."""
import logging
from typing import Optional
from .profiles import Profile
from .governor_controller import GovernorController, GovernorControlError
from ..collectors.battery_collector import BatteryCollector
from ..collectors.battery_models import BatteryInfo
from ..collectors.governor_collector import GovernorCollector
from ..config.config import Config

logger = logging.getLogger(__name__)


class ApplicationState:
    """Battery snapshot, active profile, cursor and status message."""

    def __init__(
        self,
        config: Config,
        battery_collector: Optional[BatteryCollector] = None,
        governor_collector: Optional[GovernorCollector] = None,
        governor_controller: Optional[GovernorController] = None
    ):
        """Initialize collaborators and take the first reading."""
        self.config = config
        self.battery_collector = battery_collector or BatteryCollector(config)
        self.governor_collector = governor_collector or GovernorCollector(config)
        self.governor_controller = governor_controller or GovernorController(config)

        self.battery: Optional[BatteryInfo] = None
        self.current_profile: Optional[Profile] = None
        self.selected = 0
        self.message: Optional[str] = None

        self.refresh()

    @property
    def selected_profile(self) -> Profile:
        """Profile under the cursor."""
        return Profile.all()[self.selected]

    def refresh(self):
        """Re-read battery and governor; jump the cursor to the active profile."""
        self.battery = self.battery_collector.read_battery()
        self.current_profile = self.governor_collector.read_profile()

        if self.current_profile is not None:
            self.selected = self.current_profile.index

    def move_up(self):
        """Move the cursor up one row, stopping at the top."""
        if self.selected > 0:
            self.selected -= 1

    def move_down(self):
        """Move the cursor down one row, stopping at the bottom."""
        if self.selected < len(Profile.all()) - 1:
            self.selected += 1

    def select_profile(self):
        """Apply the profile under the cursor and report the outcome."""
        profile = self.selected_profile
        try:
            self.governor_controller.apply_profile(profile.governor)
        except GovernorControlError as e:
            self.message = f"Error: {e}"
            return

        logger.info("Switched to %s", profile.display_name)
        self.current_profile = profile
        self.message = f"Switched to {profile.display_name}"
