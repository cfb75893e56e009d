"""Shared fixtures: fake sysfs trees and a config pointing at them."""
from pathlib import Path

import pytest

from powertui.config.config import Config
from powertui.config.sysfs_config import SysfsConfig


def write_supply(root: Path, name: str, **attributes) -> Path:
    """Create one power supply directory with the given attribute files."""
    supply = root / name
    supply.mkdir(parents=True)
    for key, value in attributes.items():
        (supply / key).write_text(f"{value}\n", encoding="utf-8")
    return supply


@pytest.fixture
def power_supply_dir(tmp_path: Path) -> Path:
    root = tmp_path / "power_supply"
    root.mkdir()
    return root


@pytest.fixture
def governor_file(tmp_path: Path) -> Path:
    path = tmp_path / "scaling_governor"
    path.write_text("schedutil\n", encoding="utf-8")
    return path


@pytest.fixture
def config(power_supply_dir: Path, governor_file: Path) -> Config:
    return Config(sysfs=SysfsConfig(
        power_supply_dir=str(power_supply_dir),
        governor_path=str(governor_file),
    ))
