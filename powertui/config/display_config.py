"""Display configuration data structure."""
from dataclasses import dataclass


@dataclass
class DisplayConfig:
    """Display preferences and battery colour thresholds."""
    show_colors: bool = True
    low_battery_percent: int = 20
    medium_battery_percent: int = 50

    def __post_init__(self):
        """Fix invalid values."""
        if self.low_battery_percent < 0 or self.low_battery_percent > 100:
            self.low_battery_percent = 20
        if self.medium_battery_percent < 0 or self.medium_battery_percent > 100:
            self.medium_battery_percent = 50
        if self.low_battery_percent >= self.medium_battery_percent:
            self.low_battery_percent = 20
            self.medium_battery_percent = 50
