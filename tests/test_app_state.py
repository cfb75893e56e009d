"""Application state tests using fake collaborators."""
import pytest

from powertui.collectors.battery_models import BatteryInfo
from powertui.core.app_state import ApplicationState
from powertui.core.governor_controller import GovernorControlError
from powertui.core.profiles import Profile


class FakeBatteryCollector:
    def __init__(self, battery=None):
        self.battery = battery

    def read_battery(self):
        return self.battery


class FakeGovernorCollector:
    def __init__(self, profile=None):
        self.profile = profile

    def read_profile(self):
        return self.profile


class FakeGovernorController:
    def __init__(self, error=None):
        self.error = error
        self.applied = []

    def apply_profile(self, governor):
        self.applied.append(governor)
        if self.error:
            raise GovernorControlError(self.error)


def make_state(config, battery=None, profile=None, error=None):
    return ApplicationState(
        config,
        battery_collector=FakeBatteryCollector(battery),
        governor_collector=FakeGovernorCollector(profile),
        governor_controller=FakeGovernorController(error),
    )


class TestInitialState:
    """Test the state right after startup"""

    def test_no_battery_no_profile(self, config):
        state = make_state(config)
        assert state.battery is None
        assert state.current_profile is None
        assert state.selected == 0
        assert state.message is None

    def test_startup_refresh(self, config):
        battery = BatteryInfo(capacity=42, status="Discharging", health=91, time_remaining="1h 5m remaining")
        state = make_state(config, battery=battery, profile=Profile.PERFORMANCE)
        assert state.battery == battery
        assert state.current_profile is Profile.PERFORMANCE
        assert state.selected == 2


class TestNavigation:
    """Test cursor movement"""

    def test_move_up_at_top(self, config):
        state = make_state(config)
        state.move_up()
        assert state.selected == 0

    def test_move_down_at_bottom(self, config):
        state = make_state(config, profile=Profile.PERFORMANCE)
        state.move_down()
        assert state.selected == 2

    def test_interior_moves(self, config):
        state = make_state(config, profile=Profile.BALANCED)
        state.move_up()
        assert state.selected == 0
        state.move_down()
        state.move_down()
        assert state.selected == 2
        state.move_up()
        assert state.selected == 1

    def test_selected_profile(self, config):
        state = make_state(config)
        state.move_down()
        assert state.selected_profile is Profile.BALANCED


class TestRefresh:
    """Test refresh re-reading telemetry"""

    @pytest.mark.parametrize("start", [0, 1, 2])
    @pytest.mark.parametrize("profile", list(Profile))
    def test_cursor_follows_active_profile(self, config, start, profile):
        state = make_state(config)
        state.selected = start
        state.governor_collector.profile = profile
        state.refresh()
        assert state.selected == profile.index

    def test_unknown_profile_keeps_cursor(self, config):
        state = make_state(config, profile=Profile.BALANCED)
        state.move_down()
        state.governor_collector.profile = None
        state.refresh()
        assert state.current_profile is None
        assert state.selected == 2

    def test_battery_replaced(self, config):
        state = make_state(config, battery=BatteryInfo(80, "Charging", None, None))
        state.battery_collector.battery = None
        state.refresh()
        assert state.battery is None

    def test_message_kept(self, config):
        state = make_state(config)
        state.message = "Switched to Balanced"
        state.refresh()
        assert state.message == "Switched to Balanced"


class TestSelectProfile:
    """Test applying the profile under the cursor"""

    def test_success(self, config):
        state = make_state(config, profile=Profile.POWER_SAVER)
        state.move_down()
        state.select_profile()

        assert state.governor_controller.applied == ["schedutil"]
        assert state.current_profile is Profile.BALANCED
        assert state.message == "Switched to Balanced"

    def test_failure_keeps_profile(self, config):
        state = make_state(config, profile=Profile.POWER_SAVER, error="Need passwordless sudo for cpupower")
        state.move_down()
        state.move_down()
        state.select_profile()

        assert state.governor_controller.applied == ["performance"]
        assert state.current_profile is Profile.POWER_SAVER
        assert state.message == "Error: Need passwordless sudo for cpupower"

    def test_message_replaced(self, config):
        state = make_state(config, error="boom")
        state.select_profile()
        state.governor_controller.error = None
        state.select_profile()
        assert state.message == "Switched to Power Saver"


class TestRealCollectors:
    """Test the state against malformed sysfs files"""

    def test_unreadable_files_do_not_crash(self, config, power_supply_dir, governor_file):
        battery = power_supply_dir / "BAT0"
        battery.mkdir()
        (battery / "type").write_text("Battery\n", encoding="utf-8")
        (battery / "capacity").write_text("70\n", encoding="utf-8")
        (battery / "status").write_bytes(b"\xff\xfe\n")
        governor_file.write_bytes(b"\xff\n")

        state = ApplicationState(config)
        state.refresh()

        assert state.battery.status == "Unknown"
        assert state.current_profile is None
        assert state.selected == 0
