"""Battery data model for the battery collector."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BatteryInfo:
    capacity: int  # percent, 0-100
    status: str  # "Charging", "Discharging", "Unknown", ...
    health: Optional[int]  # energy_full vs energy_full_design, percent
    time_remaining: Optional[str]  # e.g. "2h 15m remaining"
