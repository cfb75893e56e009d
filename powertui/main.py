"""Main entry point for the powertui battery and power profile tool."""
import argparse
import logging
from .config.config_manager import ConfigManager, DEFAULT_CONFIG_PATH
from .core.app_state import ApplicationState
from .core.event_loop import EventLoop
from .keyboard_handler import KeyboardHandler
from .ui.display_manager import DisplayManager

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(description="Battery monitor and CPU power profile switcher")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH)
    parser.add_argument("--poll-interval", type=float, default=None,
                        help="Seconds to wait for input between redraws")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--log-file", default=None,
                        help="Write log messages to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the application."""
    args = parse_args(argv)

    # Logging to the terminal would tear the full-screen display
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )

    # Load configuration - let it crash if bad
    config = ConfigManager.load_config(args.config)
    if args.poll_interval is not None and args.poll_interval > 0:
        config.poll_interval = args.poll_interval
    if args.no_color:
        config.display.show_colors = False

    logger.info("Starting with config %s", args.config)
    state = ApplicationState(config)

    with KeyboardHandler() as keyboard, DisplayManager(config) as display:
        EventLoop(state, display, keyboard, config.poll_interval).run()

    logger.info("Exiting")


if __name__ == "__main__":
    main()
