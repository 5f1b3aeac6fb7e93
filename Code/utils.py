# utils.py
# Handles the "Heavy Lifting" math shared by the engine and the dashboard.
# If you want to add a new dashboard statistic, you add it to calculate_metric.

import logging
import math

import config

logger = logging.getLogger(f"{config.LOGGER_NAME}.utils")


def distance(a, b):
    return math.hypot(b[0] - a[0], b[1] - a[1])


def clamp(value, low, high, fallback):
    """
    Coerces value into [low, high].
    Non-numeric or NaN input returns fallback instead of raising.
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return fallback
    if math.isnan(v):
        return fallback
    return max(low, min(high, v))


def as_point(value):
    """(x, y) as floats, or None when value is not a finite pair of numbers."""
    try:
        x, y = float(value[0]), float(value[1])
    except (TypeError, ValueError, IndexError, KeyError):
        return None
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    return (x, y)


def area_nodes(G):
    """Life-area node ids in catalog order (satellites excluded)."""
    return [n for n, d in G.nodes(data=True) if d.get('kind') == "area"]


def satellite_nodes(G, area_id):
    """Satellite ids attached to area_id, ordered by their index."""
    sats = [n for n in G.neighbors(area_id) if G.nodes[n].get('kind') == "satellite"]
    return sorted(sats, key=lambda n: G.nodes[n].get('index', 0))


def calculate_metric(G, metric_name):
    """
    Calculates a dashboard statistic for the life-area graph G.
    Returns a string representation of the result or 'Err'.
    """
    try:
        areas = area_nodes(G)
        n = len(areas)

        if metric_name == "Areas":
            return n

        if metric_name == "Connections":
            return sum(1 for _, d in G.nodes(data=True) if d.get('kind') == "satellite")

        if n == 0:
            return "0"

        if metric_name == "Avg Energy":
            avg = sum(G.nodes[a].get('energy', 0.0) for a in areas) / n
            return f"{avg:.2f}"

        if metric_name == "Avg Score":
            avg = sum(G.nodes[a].get('score', 0.0) for a in areas) / n
            return f"{avg:.2f}"

        if metric_name == "Most Connected":
            top = max(areas, key=lambda a: G.degree(a))
            return G.nodes[top].get('label', str(top))

    except Exception as e:
        logger.error("Error calculating %s: %s", metric_name, e)
        return "Err"

    return ""
