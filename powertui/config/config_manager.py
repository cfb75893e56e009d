"""Configuration loading and management."""
import os
import yaml
from .config import Config
from .sysfs_config import SysfsConfig
from .governor_command_config import GovernorCommandConfig
from .display_config import DisplayConfig

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
        """Load configuration from YAML file - let it crash if bad."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        return ConfigManager.from_dict(config_data)

    @staticmethod
    def from_dict(config_data: dict) -> Config:
        """Build a Config, falling back to defaults for missing sections."""
        sysfs = SysfsConfig(**config_data.get('sysfs', {}))
        governor_command = GovernorCommandConfig(**config_data.get('governor_command', {}))
        display = DisplayConfig(**config_data.get('display', {}))

        return Config(
            poll_interval=config_data.get('poll_interval', 0.25),
            sysfs=sysfs,
            governor_command=governor_command,
            display=display
        )
