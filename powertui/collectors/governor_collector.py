"""Current CPU frequency governor collector."""
import logging
from typing import Optional
from ..config.config import Config
from ..core.profiles import Profile

logger = logging.getLogger(__name__)


class GovernorCollector:
    """Reads the active scaling governor of the first CPU."""

    def __init__(self, config: Config):
        """Initialize the governor collector."""
        self.config = config

    def read_governor(self) -> Optional[str]:
        """Get the raw governor identifier, or None if it cannot be read."""
        try:
            with open(self.config.sysfs.governor_path, 'r') as f:
                return f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read governor: %s", e)
            return None

    def read_profile(self) -> Optional[Profile]:
        """Get the profile matching the active governor.

        An unreadable governor and one that belongs to no profile are
        both reported as None.
        """
        governor = self.read_governor()
        if governor is None:
            return None
        return Profile.from_governor(governor)
