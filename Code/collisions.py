# collisions.py
# The Collision Resolver: keeps life-area orbs from sitting on top of each other by
# nudging overlapping pairs apart a little every pass.

import logging
import math

import config

logger = logging.getLogger(f"{config.LOGGER_NAME}.collisions")

# Golden angle, used to give every coincident pair its own separation direction
_GOLDEN_ANGLE = math.pi * (3 - math.sqrt(5))


class CollisionResolver:
    """
    Pairwise overlap removal over the Position Store.
    Nudges are damped by push_factor so separation converges over several passes.
    """
    def __init__(self, min_separation=config.MIN_SEPARATION, push_factor=config.PUSH_FACTOR,
                 tie_break_offset=config.TIE_BREAK_OFFSET):
        self.min_separation = float(min_separation)
        self.push_factor = float(push_factor)
        self.tie_break_offset = float(tie_break_offset)

    def step(self, store, node_ids):
        """
        One pass over every pair in node_ids order. Returns the number of pairs pushed.
        Nudges are written in place, so later pairs see earlier corrections.
        """
        pushed = 0
        ids = [n for n in node_ids if store.get(n) is not None]

        for i in range(len(ids)):
            for j in range(i + 1, len(ids)):
                a_id, b_id = ids[i], ids[j]
                ax, ay = store.get(a_id)
                bx, by = store.get(b_id)

                dx = bx - ax
                dy = by - ay
                dist = math.hypot(dx, dy)

                if dist == 0:
                    # Exact coincidence: skip this pass, split them so the next one can resolve it
                    self._break_tie(store, a_id, b_id, i, j)
                    continue

                if dist < self.min_separation:
                    overlap = self.min_separation - dist
                    nx_, ny_ = dx / dist, dy / dist
                    push = overlap * self.push_factor
                    store.set(a_id, (ax - nx_ * push, ay - ny_ * push))
                    store.set(b_id, (bx + nx_ * push, by + ny_ * push))
                    pushed += 1

        return pushed

    def _break_tie(self, store, a_id, b_id, i, j):
        angle = _GOLDEN_ANGLE * (i * 31 + j)
        ox = math.cos(angle) * self.tie_break_offset / 2
        oy = math.sin(angle) * self.tie_break_offset / 2
        ax, ay = store.get(a_id)
        store.set(a_id, (ax - ox, ay - oy))
        store.set(b_id, (ax + ox, ay + oy))
        logger.debug("Coincident pair %s/%s, splitting for next pass", a_id, b_id)

    def overlapping_pairs(self, store, node_ids):
        """Pairs currently closer than min_separation (coincident pairs included)."""
        ids = [n for n in node_ids if store.get(n) is not None]
        pairs = []
        for i in range(len(ids)):
            for j in range(i + 1, len(ids)):
                ax, ay = store.get(ids[i])
                bx, by = store.get(ids[j])
                if math.hypot(bx - ax, by - ay) < self.min_separation:
                    pairs.append((ids[i], ids[j]))
        return pairs
