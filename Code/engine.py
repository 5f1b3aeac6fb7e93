# engine.py
# The orbital layout engine. One OrbitalEngine owns the catalog graph, the Position Store,
# the simulation settings and the pointer state, and is the only thing allowed to write them.
# Renderers read snapshot() and forward pointer events; nothing here ever raises at runtime.

import logging

import config
from catalog import build_catalog
from collisions import CollisionResolver
from interaction import DragController, InteractionState
from orbit import OrbitDriver
from utils import area_nodes, as_point, clamp, distance, satellite_nodes

logger = logging.getLogger(f"{config.LOGGER_NAME}.engine")


class SimulationConfig:
    """
    User-tunable settings plus the shared phase angle.
    Every write goes through update(), which clamps instead of raising.
    """
    def __init__(self, orbit_speed=config.DEFAULT_ORBIT_SPEED, radius_scale=config.DEFAULT_RADIUS_SCALE,
                 paused=False, global_angle=0.0, freeze_on_hold=True):
        self.orbit_speed = config.DEFAULT_ORBIT_SPEED
        self.radius_scale = config.DEFAULT_RADIUS_SCALE
        self.paused = False
        self.global_angle = 0.0
        self.freeze_on_hold = True
        self.update(orbit_speed=orbit_speed, radius_scale=radius_scale, paused=paused,
                    global_angle=global_angle, freeze_on_hold=freeze_on_hold)

    def update(self, orbit_speed=None, radius_scale=None, paused=None, global_angle=None, freeze_on_hold=None):
        if orbit_speed is not None:
            self.orbit_speed = clamp(orbit_speed, config.ORBIT_SPEED_MIN, config.ORBIT_SPEED_MAX, self.orbit_speed)
        if radius_scale is not None:
            self.radius_scale = clamp(radius_scale, config.RADIUS_SCALE_MIN, config.RADIUS_SCALE_MAX,
                                      self.radius_scale)
        if paused is not None:
            self.paused = bool(paused)
        if global_angle is not None:
            angle = clamp(global_angle, -1e9, 1e9, self.global_angle)
            self.global_angle = angle % config.TWO_PI
        if freeze_on_hold is not None:
            self.freeze_on_hold = bool(freeze_on_hold)
        return self

    def as_dict(self):
        return {
            "orbit_speed": self.orbit_speed,
            "radius_scale": self.radius_scale,
            "paused": self.paused,
            "global_angle": self.global_angle,
            "freeze_on_hold": self.freeze_on_hold,
        }


class PositionStore:
    """Authoritative (x, y) per life area, kept in the 'pos' attribute of the catalog graph."""
    def __init__(self, graph):
        self.G = graph
        self.ids = tuple(area_nodes(graph))

    def __contains__(self, node_id):
        return node_id in self.ids

    def get(self, node_id):
        if node_id not in self.ids:
            return None
        return self.G.nodes[node_id].get('pos')

    def set(self, node_id, pos):
        if node_id not in self.ids:
            logger.debug("Ignoring position write for unknown node %r", node_id)
            return False
        self.G.nodes[node_id]['pos'] = (float(pos[0]), float(pos[1]))
        return True

    def all(self):
        return {n: self.G.nodes[n]['pos'] for n in self.ids}


class OrbitalEngine:
    """
    Drives the life-area orbit. Each tick runs, in this order:
      1. the held node is pinned to the pointer
      2. the phase advances and free nodes are pulled toward their orbit slots
      3. the collision pass runs over every node, the held one included
      4. the held node is pinned again, so only the nudges it gives others survive
    Swapping 2 and 3 would let the orbital pull undo the separation within the same tick.
    """
    def __init__(self, areas=None, center=(0.0, 0.0), sim=None,
                 min_separation=config.MIN_SEPARATION, push_factor=config.PUSH_FACTOR,
                 reacquire_rate=config.REACQUIRE_RATE, collision_every=config.COLLISION_EVERY,
                 drag_threshold=config.DRAG_THRESHOLD):
        self.G = build_catalog(areas)
        self.sim = sim if sim is not None else SimulationConfig()
        self.interaction = InteractionState()
        self.store = PositionStore(self.G)
        self.driver = OrbitDriver(self.G, center, reacquire_rate)
        self.resolver = CollisionResolver(min_separation, push_factor)
        self.drag = DragController(self.interaction, self.store.ids, drag_threshold)
        self.collision_every = int(clamp(collision_every, 1, 10000, config.COLLISION_EVERY))
        self.tick_count = 0

        # Positions exist before the first tick
        self.driver.snap(self.store, self.sim)
        self._place_satellites()

    # --- Simulation ---

    def tick(self):
        held = self.interaction.held_node_id

        self.drag.apply(self.store)

        if not self.sim.paused and not (held is not None and self.sim.freeze_on_hold):
            self.driver.advance(self.sim)
        self.driver.step(self.store, self.sim, held=held)

        self.tick_count += 1
        # First tick always resolves, then every collision_every ticks
        if (self.tick_count - 1) % self.collision_every == 0:
            self.resolver.step(self.store, self.store.ids)

        self.drag.apply(self.store)
        self._place_satellites()

    def _place_satellites(self):
        for sid, pos in self.driver.satellite_positions(self.store, self.sim).items():
            self.G.nodes[sid]['pos'] = pos

    # --- Controls ---

    def set_config(self, orbit_speed=None, radius_scale=None, paused=None, freeze_on_hold=None):
        self.sim.update(orbit_speed=orbit_speed, radius_scale=radius_scale, paused=paused,
                        freeze_on_hold=freeze_on_hold)
        return self.sim

    def toggle_pause(self):
        self.sim.update(paused=not self.sim.paused)
        return self.sim.paused

    def reset(self):
        """Drops any hold and snaps every area onto its current orbit target."""
        self.drag.cancel()
        self.driver.snap(self.store, self.sim)
        self._place_satellites()

    # --- Pointer Events ---

    def hold(self, node_id, point):
        return self.drag.hold(node_id, point, anchor=self.store.get(node_id))

    def move_held(self, point):
        if not self.drag.move(point):
            return False
        self.drag.apply(self.store)
        self._place_satellites()
        return True

    def release(self):
        return self.drag.release()

    def cancel_hold(self):
        return self.drag.cancel()

    def select(self, node_id):
        """Selects node_id for the detail panel; None clears. Unknown ids are ignored."""
        if node_id is None or node_id in self.store:
            self.interaction.selected_node_id = node_id
        return self.interaction.selected_node_id

    # --- Queries ---

    @property
    def held_node_id(self):
        return self.interaction.held_node_id

    @property
    def selected_node_id(self):
        return self.interaction.selected_node_id

    def node_state(self, node_id):
        return self.drag.state_of(node_id)

    def positions(self):
        return self.store.all()

    def satellite_positions(self):
        return {n: d['pos'] for n, d in self.G.nodes(data=True) if d.get('kind') == "satellite"}

    def targets(self):
        return self.driver.targets(self.sim)

    def overlapping_pairs(self):
        return self.resolver.overlapping_pairs(self.store, self.store.ids)

    def node_at(self, point):
        """Topmost life area whose footprint contains point (last drawn wins)."""
        p = as_point(point)
        if p is None:
            return None
        for n in reversed(self.store.ids):
            if distance(p, self.store.get(n)) <= self.G.nodes[n]['footprint_radius']:
                return n
        return None

    def details(self, node_id):
        """Static detail-panel content for node_id, or None."""
        if node_id not in self.store:
            return None
        d = self.G.nodes[node_id]
        return {
            "id": node_id,
            "label": d['label'],
            "color": d['color'],
            "energy": d['energy'],
            "score": d['score'],
            "satellites": [self.G.nodes[s]["label"] for s in satellite_nodes(self.G, node_id)],
            "reflection": d['reflection'],
        }

    def snapshot(self):
        """Everything a renderer needs for one frame."""
        return {
            "positions": self.positions(),
            "satellites": self.satellite_positions(),
            "selected": self.interaction.selected_node_id,
            "held": self.interaction.held_node_id,
            "angle": self.sim.global_angle,
        }
