# catalog.py
# Turns life-area definitions (from config.py or a JSON file) into the networkx graph the
# engine and the canvas share. Areas are graph nodes, satellites hang off them by an edge.

import json
import logging
import math

import networkx as nx

import config
from utils import clamp

logger = logging.getLogger(f"{config.LOGGER_NAME}.catalog")

# Accept the field names used by the web catalog as well as our own
_ALIASES = {
    "name": "label",
    "orbitRadius": "orbit_radius",
    "angleOffset": "angle_offset",
    "footprintRadius": "footprint_radius",
    "connections": "satellites",
    "relationships": "satellites",
}


class CatalogError(ValueError):
    """Raised when a life-area catalog cannot be turned into a graph."""


def satellite_id(area_id, index):
    return f"{area_id}:{index}"


def display_size(connections):
    """Orb diameter used for drawing and for the default footprint."""
    return config.ORB_SIZE + config.ORB_GROWTH_PER_CONNECTION * connections


def _normalize(entry):
    if not isinstance(entry, dict):
        raise CatalogError(f"Life area entries must be objects, got {type(entry).__name__}.")
    clean = {}
    for key, value in entry.items():
        clean[_ALIASES.get(key, key)] = value
    return clean


def _number(entry, key, default=None):
    raw = entry.get(key, default)
    if raw is None:
        raise CatalogError(f"Life area '{entry.get('id')}' is missing '{key}'.")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise CatalogError(f"Life area '{entry.get('id')}' has a non-numeric '{key}': {raw!r}")
    if not math.isfinite(value):
        raise CatalogError(f"Life area '{entry.get('id')}' has a non-finite '{key}'.")
    return value


def _satellite_labels(raw):
    labels = []
    for item in raw or []:
        if isinstance(item, dict):
            labels.append(str(item.get('label') or item.get('name') or ""))
        else:
            labels.append(str(item))
    return labels


def build_catalog(areas=None):
    """
    Builds the catalog graph from a list of life-area definitions.
    Defaults to config.DEFAULT_LIFE_AREAS when no list is given.
    """
    if areas is None:
        areas = config.DEFAULT_LIFE_AREAS

    G = nx.Graph()
    for raw in areas:
        entry = _normalize(raw)

        area_id = entry.get('id')
        if area_id is None or str(area_id).strip() == "":
            raise CatalogError("Every life area needs an 'id'.")
        if G.has_node(area_id):
            raise CatalogError(f"Duplicate life area id: {area_id!r}")

        G.add_node(
            area_id,
            kind="area",
            label=str(entry.get('label') or area_id),
            color=entry.get('color') or "#FFFFFF",
            energy=clamp(entry.get('energy', 0.5), 0.0, 1.0, 0.5),
            score=clamp(entry.get('score', 0.0), 0.0, 5.0, 0.0),
            orbit_radius=max(0.0, _number(entry, 'orbit_radius')),
            angle_offset=_number(entry, 'angle_offset', 0.0),
            reflection=entry.get('reflection') or config.REFLECTIONS.get(area_id, config.DEFAULT_REFLECTION),
            pos=None,
        )

        for i, label in enumerate(_satellite_labels(entry.get('satellites'))):
            sid = satellite_id(area_id, i)
            if G.has_node(sid):
                raise CatalogError(f"Satellite id {sid!r} collides with an existing node.")
            G.add_node(sid, kind="satellite", parent=area_id, index=i, label=label, pos=None)
            G.add_edge(area_id, sid)

        # Footprint follows the display size unless the definition pins it
        if entry.get('footprint_radius') is None:
            footprint = display_size(G.degree(area_id)) / 2
        else:
            footprint = max(0.0, _number(entry, 'footprint_radius'))
        G.nodes[area_id]['footprint_radius'] = footprint

    logger.debug("Built catalog with %d nodes", G.number_of_nodes())
    return G


def load_catalog(fp):
    """
    Reads a JSON catalog of the form {"LifeAreas": [...]} and returns the list of definitions.
    """
    try:
        # Use 'utf-8-sig' to handle potential invisible characters
        with open(fp, 'r', encoding='utf-8-sig') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Failed to read catalog {fp}: {e}") from e

    if not isinstance(data, dict) or "LifeAreas" not in data:
        raise CatalogError("Invalid file format: Missing 'LifeAreas' key.")

    areas = data["LifeAreas"]
    if not isinstance(areas, list):
        raise CatalogError("'LifeAreas' must be a list.")

    # Validate eagerly so the caller never gets a half-usable catalog
    build_catalog(areas)
    return areas
