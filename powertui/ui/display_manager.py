"""Display management using Rich for the full-screen terminal UI."""
from typing import Optional
from rich.console import Console
from rich.live import Live
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text
from ..collectors.battery_models import BatteryInfo
from ..config.config import Config
from ..core.app_state import ApplicationState
from ..core.profiles import Profile

HELP_TEXT = "j/k navigate  Enter select  r refresh  q quit"


class DisplayManager:
    """Manages the Rich Live screen; render() is a pure read of the state."""

    def __init__(self, config: Config, console: Optional[Console] = None):
        """Initialize the display manager."""
        self.config = config
        self.console = console or Console(
            color_system="auto" if config.display.show_colors else None
        )
        self.layout = self._create_layout()
        self.live: Optional[Live] = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()

    def start(self):
        """Enter the alternate screen."""
        self.live = Live(
            self.layout,
            console=self.console,
            auto_refresh=False,
            screen=True  # Full screen mode
        )
        self.live.start()

    def stop(self):
        """Leave the alternate screen."""
        if self.live:
            self.live.stop()
            self.live = None

    def render(self, state: ApplicationState):
        """Redraw every panel from the current state."""
        self._update_layout(state)
        if self.live:
            self.live.refresh()

    def _create_layout(self) -> Layout:
        """Create the main layout structure."""
        layout = Layout()

        layout.split_column(
            Layout(name="battery", size=5),
            Layout(name="profiles", size=5),
            Layout(name="footer", size=2),
            Layout(name="spacer")
        )

        return layout

    def _update_layout(self, state: ApplicationState):
        self.layout["battery"].update(self._create_battery_panel(state.battery))
        self.layout["profiles"].update(self._create_profiles_panel(state))
        self.layout["footer"].update(self._create_footer(state.message))
        self.layout["spacer"].update(Text(""))

    def _battery_color(self, capacity: int) -> str:
        """Pick the capacity bar colour from the configured thresholds."""
        if capacity <= self.config.display.low_battery_percent:
            return "red"
        if capacity <= self.config.display.medium_battery_percent:
            return "yellow"
        return "green"

    def _create_battery_panel(self, battery: Optional[BatteryInfo]) -> Panel:
        """Create the battery gauge panel."""
        if battery is None:
            return Panel(
                Text("No battery found", style="bright_black"),
                title="Battery",
                border_style="bright_black"
            )

        # Create simple text-based progress bar
        def make_progress_bar(value: int, width: int = 30) -> str:
            filled = int(value * width / 100)
            return "█" * filled + "░" * (width - filled)

        content = Text()
        content.append(make_progress_bar(battery.capacity), style=self._battery_color(battery.capacity))
        content.append("\n")
        content.append(self.battery_label(battery))

        return Panel(content, title="Battery", border_style="bright_black")

    @staticmethod
    def battery_label(battery: BatteryInfo) -> str:
        """Build the gauge label, leaving out fields that are absent."""
        label = f"{battery.capacity}%  {battery.status}"
        if battery.time_remaining:
            label += f"  ({battery.time_remaining})"
        if battery.health is not None:
            label += f"  Health: {battery.health}%"
        return label

    def _create_profiles_panel(self, state: ApplicationState) -> Panel:
        """Create the profile list with the cursor and active marker."""
        content = Text()

        for i, profile in enumerate(Profile.all()):
            is_current = state.current_profile == profile
            is_selected = state.selected == i

            pointer = "▶ " if is_selected else "  "
            marker = " ● " if is_current else "   "
            line = f"{pointer}{marker}{profile.display_name} ({profile.governor})"

            style = "green" if is_current else ""
            if is_selected:
                style = f"{style} on bright_black".strip()

            if i:
                content.append("\n")
            content.append(line, style=style)

        return Panel(content, title="Power Profile", border_style="bright_black")

    def _create_footer(self, message: Optional[str]) -> Text:
        """Show the status message, or the key help when there is none."""
        return Text(message or HELP_TEXT, style="bright_black", justify="center")
