"""Fixed set of selectable power profiles."""
from enum import Enum
from typing import List, Optional


class Profile(Enum):
    """User-facing power profile backed by one cpufreq governor."""
    POWER_SAVER = ("Power Saver", "powersave")
    BALANCED = ("Balanced", "schedutil")
    PERFORMANCE = ("Performance", "performance")

    def __init__(self, display_name: str, governor: str):
        self.display_name = display_name
        self.governor = governor

    @classmethod
    def all(cls) -> List["Profile"]:
        """Return every profile in display order."""
        return list(cls)

    @classmethod
    def from_governor(cls, governor: str) -> Optional["Profile"]:
        """Map a governor identifier back to its profile, or None."""
        governor = governor.strip()
        for profile in cls:
            if profile.governor == governor:
                return profile
        return None

    @property
    def index(self) -> int:
        """Position of this profile in the display order."""
        return self.all().index(self)
