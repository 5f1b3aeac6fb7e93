# highlights.py
# Builds highlight groups for the canvas. Each group is a dict of nodes (halo), edges (glow
# line), color and width, drawn behind the regular orbs.
import config
from utils import satellite_nodes


def get_selection_highlight(G, node_id):
    """
    Halo around the selected life area plus glowing links to its satellites.
    """
    if node_id is None or not G.has_node(node_id):
        return []
    if G.nodes[node_id].get('kind') != "area":
        return []

    sats = satellite_nodes(G, node_id)
    # Stronger energy gets a thicker glow
    energy = G.nodes[node_id].get('energy', 0.5)

    return [{
        "nodes": [node_id],
        "edges": [(node_id, s) for s in sats],
        "color": G.nodes[node_id].get('color', "yellow"),
        "width": 6 + 8 * energy
    }]


def get_collision_highlights(pairs):
    """
    Marks every pair of orbs currently closer than the minimum separation.
    """
    if not pairs:
        return []

    involved = set()
    for a, b in pairs:
        involved.add(a)
        involved.add(b)

    return [{
        "nodes": sorted(involved, key=str),
        "edges": list(pairs),
        "color": config.COLLISION_COLOR,
        "width": 8
    }]
