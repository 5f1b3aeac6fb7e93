# orbit.py
# The Orbit Driver: advances the shared phase angle and pulls every free life area
# toward its slot on its circular path.

import logging
import math

import config
from utils import area_nodes, clamp, satellite_nodes

logger = logging.getLogger(f"{config.LOGGER_NAME}.orbit")


def orbit_target(center, orbit_radius, radius_scale, angle):
    """Closed-form point on a circle of radius orbit_radius * radius_scale."""
    r = orbit_radius * radius_scale
    return (center[0] + r * math.cos(angle), center[1] + r * math.sin(angle))


class OrbitDriver:
    def __init__(self, graph, center=(0.0, 0.0), reacquire_rate=config.REACQUIRE_RATE):
        self.G = graph
        self.center = (float(center[0]), float(center[1]))
        # Rate must stay in (0, 1] or the pull would overshoot or stall
        self.reacquire_rate = clamp(reacquire_rate, 1e-6, 1.0, config.REACQUIRE_RATE)

    def advance(self, sim):
        """Moves the global phase forward by one tick."""
        sim.global_angle = (sim.global_angle + sim.orbit_speed) % config.TWO_PI

    def target(self, node_id, sim):
        d = self.G.nodes[node_id]
        return orbit_target(self.center, d['orbit_radius'], sim.radius_scale,
                            sim.global_angle + d['angle_offset'])

    def targets(self, sim):
        return {n: self.target(n, sim) for n in area_nodes(self.G)}

    def step(self, store, sim, held=None):
        """Exponential pull of every non-held area toward its current target."""
        rate = self.reacquire_rate
        for n in area_nodes(self.G):
            if n == held:
                continue
            tx, ty = self.target(n, sim)
            pos = store.get(n)
            if pos is None:
                store.set(n, (tx, ty))
                continue
            x, y = pos
            store.set(n, (x + (tx - x) * rate, y + (ty - y) * rate))

    def snap(self, store, sim):
        """Puts every area exactly on its target, bypassing interpolation."""
        for n, target in self.targets(sim).items():
            store.set(n, target)

    def satellite_positions(self, store, sim):
        """Satellites ride a small circle around their parent, spaced by SATELLITE_SPACING."""
        out = {}
        for n in area_nodes(self.G):
            px, py = store.get(n)
            for sid in satellite_nodes(self.G, n):
                a = sim.global_angle + self.G.nodes[sid]['index'] * config.SATELLITE_SPACING
                out[sid] = (px + math.cos(a) * config.SATELLITE_RADIUS,
                            py + math.sin(a) * config.SATELLITE_RADIUS)
        return out
