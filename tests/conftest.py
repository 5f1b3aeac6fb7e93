"""
Pytest configuration and shared fixtures.

The application modules live flat in Code/ and import each other by bare name
(`import config`), so that directory goes on sys.path before collection.
"""
import math
import sys
from pathlib import Path

import pytest

CODE_DIR = Path(__file__).parent.parent / "Code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from engine import OrbitalEngine, SimulationConfig  # noqa: E402


def make_area(area_id, orbit_radius=200, angle_offset=0.0, **extra):
    entry = {
        "id": area_id,
        "label": area_id.title(),
        "color": "#123456",
        "energy": 0.5,
        "orbit_radius": orbit_radius,
        "angle_offset": angle_offset,
        "satellites": [],
    }
    entry.update(extra)
    return entry


@pytest.fixture
def default_engine():
    """Engine over the built-in six life areas."""
    return OrbitalEngine()


@pytest.fixture
def lone_engine():
    """A single paused area: no collisions, fixed target."""
    return OrbitalEngine([make_area("solo", orbit_radius=200)], sim=SimulationConfig(paused=True))


@pytest.fixture
def ring_engine():
    """Six areas evenly spaced on one circle, standing still."""
    areas = [make_area(f"a{k}", orbit_radius=300, angle_offset=k * 2 * math.pi / 6) for k in range(6)]
    return OrbitalEngine(areas, sim=SimulationConfig(orbit_speed=0, radius_scale=1))


@pytest.fixture
def area():
    """Factory for minimal life-area definitions."""
    return make_area
