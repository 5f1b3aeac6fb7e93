# interaction.py
# The Drag Controller: one life area at a time can be picked up and bound to the pointer.
# Telling a click from a drag uses the same small movement threshold as the graph editor.

import logging

import config
from utils import as_point, distance

logger = logging.getLogger(f"{config.LOGGER_NAME}.interaction")

FREE = "FREE"
HELD = "HELD"


class InteractionState:
    """Who is held and who is selected. The two are independent."""
    def __init__(self):
        self.held_node_id = None
        self.selected_node_id = None


class DragController:
    def __init__(self, state, known_nodes, drag_threshold=config.DRAG_THRESHOLD):
        self.state = state
        self.known_nodes = known_nodes
        self.drag_threshold = drag_threshold
        self.pointer = None
        self.drag_start_pos = None
        self.is_dragging = False

    def state_of(self, node_id):
        return HELD if node_id is not None and node_id == self.state.held_node_id else FREE

    def hold(self, node_id, point, anchor=None):
        """
        FREE -> HELD. Ignored while another node is held or for unknown ids.
        anchor is where the node sits right now; it stays pinned there until the first move.
        """
        if self.state.held_node_id is not None:
            logger.debug("Ignoring hold on %s: %s is already held", node_id, self.state.held_node_id)
            return False
        if node_id not in self.known_nodes:
            logger.debug("Ignoring hold on unknown node %r", node_id)
            return False

        start = as_point(point)
        if start is None:
            logger.debug("Ignoring hold on %s: bad pointer %r", node_id, point)
            return False

        self.state.held_node_id = node_id
        # The node stays where it is until the pointer actually moves
        self.pointer = as_point(anchor)
        self.drag_start_pos = start
        self.is_dragging = False
        return True

    def move(self, point):
        """Records the pointer for the held node. Returns False when nothing is held."""
        if self.state.held_node_id is None:
            return False
        pointer = as_point(point)
        if pointer is None:
            return False
        self.pointer = pointer
        # Drag threshold separates a click from a drag
        if not self.is_dragging and distance(self.drag_start_pos, self.pointer) > self.drag_threshold:
            self.is_dragging = True
        return True

    def apply(self, store):
        """Pins the held node to the pointer, overwriting anything written to it this tick."""
        held = self.state.held_node_id
        if held is not None and self.pointer is not None:
            store.set(held, self.pointer)

    def release(self, allow_click=True):
        """
        HELD -> FREE. A release that never passed the drag threshold counts as a click and
        toggles the selection. Returns the released node id, or None if nothing was held.
        """
        node_id = self.state.held_node_id
        if node_id is None:
            return None

        if allow_click and not self.is_dragging:
            self.toggle_selection(node_id)

        self.state.held_node_id = None
        self.pointer = None
        self.drag_start_pos = None
        self.is_dragging = False
        return node_id

    def cancel(self):
        """Pointer left the surface: drop the hold without treating it as a click."""
        return self.release(allow_click=False)

    def toggle_selection(self, node_id):
        if node_id not in self.known_nodes:
            return self.state.selected_node_id
        if self.state.selected_node_id == node_id:
            self.state.selected_node_id = None
        else:
            self.state.selected_node_id = node_id
        return self.state.selected_node_id
