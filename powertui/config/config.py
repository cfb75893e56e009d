"""Main configuration data structure."""
from dataclasses import dataclass, field
from .sysfs_config import SysfsConfig
from .governor_command_config import GovernorCommandConfig
from .display_config import DisplayConfig


@dataclass
class Config:
    """Main configuration class."""
    poll_interval: float = 0.25
    sysfs: SysfsConfig = field(default_factory=SysfsConfig)
    governor_command: GovernorCommandConfig = field(default_factory=GovernorCommandConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self):
        """Fix invalid values."""
        if self.poll_interval <= 0:
            self.poll_interval = 0.25
