"""Privileged governor command configuration."""
from dataclasses import dataclass, field
from typing import List

DEFAULT_COMMAND = ["sudo", "-n", "cpupower", "frequency-set", "-g"]


@dataclass
class GovernorCommandConfig:
    """Command used to switch the governor; the target is appended last."""
    command: List[str] = field(default_factory=lambda: list(DEFAULT_COMMAND))
    timeout: float = 10.0

    def __post_init__(self):
        """Fix invalid values."""
        if not self.command:
            self.command = list(DEFAULT_COMMAND)
        self.command = [str(part) for part in self.command]
        if self.timeout <= 0:
            self.timeout = 10.0
