"""Kernel interface paths configuration."""
from dataclasses import dataclass


@dataclass
class SysfsConfig:
    """Locations of the power-supply tree and the scaling governor."""
    power_supply_dir: str = "/sys/class/power_supply"
    governor_path: str = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_governor"

    def __post_init__(self):
        """Fix invalid values."""
        if not self.power_supply_dir:
            self.power_supply_dir = "/sys/class/power_supply"
        if not self.governor_path:
            self.governor_path = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_governor"
