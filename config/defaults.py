"""Default configuration constants for the Cabin Seat Map."""

# Seat classes, in cabin order (front to back)
SEAT_CLASSES = ["business", "economy-plus", "economy"]

# Seat positions
POSITIONS = ["window", "middle", "aisle"]

# Static per-class pricing
SEAT_PRICES = {
    "business": 1200,
    "economy-plus": 350,
    "economy": 200,
}
DEFAULT_SEAT_PRICE = 200

# Selection limits
DEFAULT_MAX_SELECTION = 999

# Allowed seats per side of the aisle
MIN_SEATS_PER_SIDE = 2
MAX_SEATS_PER_SIDE = 3

# Reference aircraft profile: Boeing 737-800
REFERENCE_AIRCRAFT = {
    "model_name": "Boeing 737-800",
    "business_rows": (1, 3),
    "economy_plus_rows": (4, 8),
    "economy_rows": (9, 28),
    "columns_per_section": {
        "business": (["A", "B"], ["C", "D"]),
        "economy-plus": (["A", "B", "C"], ["D", "E", "F"]),
        "economy": (["A", "B", "C"], ["D", "E", "F"]),
    },
    "emergency_row_numbers": [8, 20],
}

# Popularity scoring weights
POPULARITY_BASE_SCORE = 50
POPULARITY_WINDOW_BONUS = 30
POPULARITY_AISLE_BONUS = 20
POPULARITY_BUSINESS_BONUS = 25
POPULARITY_FRONT_ROW_LIMIT = 5        # Rows up to here get the front bonus
POPULARITY_FRONT_ROW_BONUS = 15
POPULARITY_FORWARD_ROW_LIMIT = 10     # Rows up to here get the forward bonus
POPULARITY_FORWARD_ROW_BONUS = 10
POPULARITY_EMERGENCY_BONUS = 20
POPULARITY_MIDDLE_PENALTY = 30
POPULARITY_BACK_ROW_THRESHOLD = 20    # Rows beyond this get the back penalty
POPULARITY_BACK_ROW_PENALTY = 15
POPULARITY_JITTER_SPAN = 20           # floor(random * span) - offset
POPULARITY_JITTER_OFFSET = 10
POPULARITY_MIN_SCORE = 0
POPULARITY_MAX_SCORE = 100

# Heat-map buckets: (min score, color, legend label), highest first
HEAT_MAP_BUCKETS = [
    (80, "#FFD700", "Most Popular (80-100)"),   # Gold
    (60, "#FFA500", "High Demand (60-79)"),     # Orange
    (40, "#FF69B4", "Moderate (40-59)"),        # Hot pink
    (20, "#9370DB", "Low Demand (20-39)"),      # Medium purple
    (0, "#4B0082", "Least Popular (0-19)"),     # Indigo
]

# Seat status legend
LEGEND_ITEMS = [
    {"type": "available", "label": "Available", "color": "#E8F4FD"},
    {"type": "occupied", "label": "Occupied", "color": "#B0B0B0"},
    {"type": "selected", "label": "Selected", "color": "#4A90D9"},
    {"type": "business", "label": "Business Class", "color": "#C9A227"},
    {"type": "economy-plus", "label": "Economy Plus", "color": "#5DA271"},
    {"type": "economy", "label": "Economy", "color": "#7F8C8D"},
]

# Logging
LOG_LEVEL = "INFO"
