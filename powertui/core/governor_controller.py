"""Applies a CPU governor through a privileged external command."""
import logging
import subprocess
from ..config.config import Config

logger = logging.getLogger(__name__)


class GovernorControlError(Exception):
    """Raised when the governor could not be changed."""


class GovernorController:
    """Switches the scaling governor with `sudo -n cpupower frequency-set -g`."""

    def __init__(self, config: Config):
        """Initialize the governor controller."""
        self.config = config

    def apply_profile(self, governor: str) -> None:
        """Set the governor, raising GovernorControlError on any failure.

        Blocks until the command exits. Success is judged by exit status
        alone and failures are never retried.
        """
        cmd = self.config.governor_command.command + [governor]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.config.governor_command.timeout,
                text=True
            )
        except subprocess.TimeoutExpired:
            logger.warning("Governor command timed out: %s", ' '.join(cmd))
            raise GovernorControlError(f"{cmd[0]} timed out")
        except OSError as e:
            logger.warning("Governor command could not start: %s", e)
            raise GovernorControlError(f"Cannot run {cmd[0]}: {e.strerror or e}")

        if result.returncode != 0:
            logger.warning(
                "Governor command exited with %d: %s",
                result.returncode, result.stderr.strip()
            )
            raise GovernorControlError("Need passwordless sudo for cpupower")

        logger.info("Governor set to %s", governor)
