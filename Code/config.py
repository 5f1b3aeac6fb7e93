# config.py
# Stores all the "Magic Numbers" and settings. If you want to change the tick rate, the collision
# spacing, or the default life areas, you do it here without touching the simulation code.

import math

# --- Logging ---
LOGGER_NAME = "life_orbits"

# --- Simulation Timing ---
TICK_INTERVAL_MS = 30
COLLISION_EVERY = 2  # collision pass every N ticks; 2 ticks is nearest to a 50 ms collision timer

# --- Orbit Driver ---
DEFAULT_ORBIT_SPEED = 0.01
ORBIT_SPEED_MIN = 0.0
ORBIT_SPEED_MAX = 0.05
ORBIT_SPEED_SLIDER = (0.001, 0.05, 0.001)  # (from, to, resolution)

DEFAULT_RADIUS_SCALE = 1.0
RADIUS_SCALE_MIN = 0.5
RADIUS_SCALE_MAX = 2.0
RADIUS_SCALE_SLIDER = (0.5, 2.0, 0.1)

REACQUIRE_RATE = 0.05
TWO_PI = 2 * math.pi

# --- Collision Resolver ---
MIN_SEPARATION = 120
PUSH_FACTOR = 0.3
TIE_BREAK_OFFSET = 1e-3

# --- Drag Controller ---
DRAG_THRESHOLD = 5

# --- Node Display ---
ORB_SIZE = 100
SELECTED_ORB_SIZE = 140
ORB_GROWTH_PER_CONNECTION = 0  # display size gain per satellite
SATELLITE_RADIUS = 50
SATELLITE_SPACING = 0.5
SATELLITE_DOT = 4

# --- Canvas Colors ---
BACKGROUND = "#1b1530"
ORBIT_RING_COLOR = "#3a2f5c"
SATELLITE_LINE_COLOR = "#8e7cc3"
CENTER_COLOR = "#ffd27f"
COLLISION_COLOR = "#FF0000"

# --- Default Life Areas ---
DEFAULT_LIFE_AREAS = [
    {
        "id": "work",
        "label": "Work & Purpose",
        "color": "#FFD23F",
        "energy": 0.8,
        "orbit_radius": 180,
        "angle_offset": 0,
        "satellites": ["Sarah (Mentor)", "Team Lead", "Project Partners"],
        "score": 4.2,
    },
    {
        "id": "health",
        "label": "Health",
        "color": "#FF5E5B",
        "energy": 0.6,
        "orbit_radius": 210,
        "angle_offset": 1.2,
        "satellites": ["Dr. Martinez", "Fitness Coach"],
        "score": 3.8,
    },
    {
        "id": "intimacy",
        "label": "Intimacy",
        "color": "#E155B0",
        "energy": 0.9,
        "orbit_radius": 240,
        "angle_offset": 2.4,
        "satellites": ["Partner", "Close Friends"],
        "score": 4.7,
    },
    {
        "id": "finance",
        "label": "Finance",
        "color": "#FCA311",
        "energy": 0.5,
        "orbit_radius": 270,
        "angle_offset": 3.6,
        "satellites": ["Financial Advisor"],
        "score": 3.2,
    },
    {
        "id": "spiritual",
        "label": "Spiritual",
        "color": "#7209B7",
        "energy": 0.7,
        "orbit_radius": 300,
        "angle_offset": 4.8,
        "satellites": ["Meditation Group", "Spiritual Mentor"],
        "score": 4.0,
    },
    {
        "id": "creativity",
        "label": "Creativity",
        "color": "#00F5FF",
        "energy": 0.75,
        "orbit_radius": 330,
        "angle_offset": 0.6,
        "satellites": ["Art Community", "Creative Partner"],
        "score": 4.3,
    },
]

# Static detail text shown for the selected area
REFLECTIONS = {
    "work": "Work relationships orbit with purpose: steady and glowing with collaborative energy.",
    "health": "Health is stabilizing. Maintain your rhythm and rest.",
    "intimacy": "Intimacy in harmony. Nurture emotional gravity.",
    "finance": "Finance needs rebalancing. Find your sustainable orbit.",
    "spiritual": "Spiritual center strong. Align orbit with inner truth.",
    "creativity": "Creative energy flows freely. Let imagination dance in orbital harmony.",
}
DEFAULT_REFLECTION = "Your life area is in motion. Observe and adjust your orbit."
