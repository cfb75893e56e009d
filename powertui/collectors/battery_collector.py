"""Battery telemetry collector reading the kernel power-supply tree."""
import logging
import math
import os
from typing import Optional
from .battery_models import BatteryInfo
from ..config.config import Config

logger = logging.getLogger(__name__)


class BatteryCollector:
    """Collects a battery snapshot from /sys/class/power_supply."""

    def __init__(self, config: Config):
        """Initialize the battery collector."""
        self.config = config

    def read_battery(self) -> Optional[BatteryInfo]:
        """Read a full battery snapshot, or None when there is no usable battery.

        Only capacity is required. Status, health and time remaining are
        each computed on their own and fall back independently when the
        kernel does not expose what they need.
        """
        battery_path = self._find_battery()
        if battery_path is None:
            return None

        capacity = self._read_int(battery_path, "capacity")
        if capacity is None or not 0 <= capacity <= 100:
            logger.debug("Battery at %s has no usable capacity", battery_path)
            return None

        status = self._read_attribute(battery_path, "status") or "Unknown"

        return BatteryInfo(
            capacity=capacity,
            status=status,
            health=self._get_health(battery_path),
            time_remaining=self._get_time_remaining(battery_path, status)
        )

    def _find_battery(self) -> Optional[str]:
        """Return the first power supply whose type is Battery."""
        base = self.config.sysfs.power_supply_dir
        try:
            entries = sorted(os.listdir(base))
        except OSError as e:
            logger.debug("Cannot list %s: %s", base, e)
            return None

        for entry in entries:
            path = os.path.join(base, entry)
            if self._read_attribute(path, "type") == "Battery":
                return path
        return None

    def _get_health(self, battery_path: str) -> Optional[int]:
        """Get battery health as present full capacity over design capacity."""
        full = self._read_float(battery_path, "energy_full")
        design = self._read_float(battery_path, "energy_full_design")
        if full is None or design is None or design <= 0:
            return None
        return round(full / design * 100)

    def _get_time_remaining(self, battery_path: str, status: str) -> Optional[str]:
        """Estimate time to empty, or to full while charging."""
        power_now = self._read_float(battery_path, "power_now")
        if power_now is None or power_now <= 0:
            return None

        energy_now = self._read_float(battery_path, "energy_now")
        if energy_now is None:
            return None

        if status == "Charging":
            energy_full = self._read_float(battery_path, "energy_full")
            if energy_full is None:
                return None
            energy = max(energy_full - energy_now, 0.0)
            suffix = "until full"
        else:
            energy = energy_now
            suffix = "remaining"

        return format_duration(energy / power_now, suffix)

    def _read_attribute(self, battery_path: str, name: str) -> Optional[str]:
        """Read one sysfs attribute, stripped; None if it cannot be read."""
        try:
            with open(os.path.join(battery_path, name), 'r') as f:
                return f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s/%s: %s", battery_path, name, e)
            return None

    def _read_int(self, battery_path: str, name: str) -> Optional[int]:
        value = self._read_attribute(battery_path, name)
        try:
            return int(value) if value is not None else None
        except ValueError:
            return None

    def _read_float(self, battery_path: str, name: str) -> Optional[float]:
        """Read a finite number; nan and inf count as unparseable."""
        value = self._read_attribute(battery_path, name)
        try:
            number = float(value) if value is not None else None
        except ValueError:
            return None
        if number is None or not math.isfinite(number):
            return None
        return number


def format_duration(hours: float, suffix: str) -> str:
    """Format fractional hours as "<H>h <M>m <suffix>"."""
    whole_hours = math.floor(hours)
    minutes = round((hours - whole_hours) * 60)
    if minutes == 60:
        whole_hours += 1
        minutes = 0
    return f"{whole_hours}h {minutes}m {suffix}"
