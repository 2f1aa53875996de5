"""Default configuration constants for the Room Board dashboard."""

# Canvas geometry (px). Room coordinates are local to their floor's origin.
CANVAS_WIDTH = 2000
SINGLE_FLOOR_HEIGHT = 800

# All-floors view: each floor gets a band of this height, header included
FLOOR_HEADER_HEIGHT = 100
FLOOR_BAND_HEIGHT = SINGLE_FLOOR_HEIGHT + FLOOR_HEADER_HEIGHT

# View mode that stacks every floor in one scroll view
ALL_FLOORS = "ALL"

# Gesture handling
DRAG_ACTIVATION_DISTANCE = 5  # Pointer travel (px) before a press becomes a drag

# Room sizing (px)
MIN_ROOM_WIDTH = 100
MIN_ROOM_HEIGHT = 60
DEFAULT_ROOM_WIDTH = 200
DEFAULT_ROOM_HEIGHT = 120

# Position given to rooms created from the floor plan
DEFAULT_ROOM_X = 20
DEFAULT_ROOM_Y = 20

# Defaults for newly created rooms
DEFAULT_ROOM_FLOOR = 3
DEFAULT_BASE_PRICE = 350000

# Background grid spacing drawn on the canvas
CANVAS_GRID_SIZE = 20

# Session storage keys
STORAGE_KEYS = {
    "users": "roomboard_users",
    "rooms": "roomboard_rooms",
    "residents": "roomboard_residents",
    "contracts": "roomboard_contracts",
    "payments": "roomboard_payments",
    "expenses": "roomboard_expenses",
}
CURRENT_USER_KEY = "roomboard_current_user_id"

# Demo seed
DEMO_USER_ID = "demo-user-id"
DEMO_USERNAME = "admin"
DEMO_ROOM_COUNT = 15

# Expense categories and their suggested subcategories
EXPENSE_SUBCATEGORIES = {
    "UTILITY": ["Electricity", "Water", "Gas", "Internet"],
    "MAINTENANCE": ["Cleaning", "Pest control", "Inspection"],
    "REPAIR": ["Plumbing", "Electrical", "Wallpaper", "Flooring", "Other"],
    "OTHER": ["Tax", "Insurance", "Management", "Other"],
}

# Currency display
CURRENCY_SUFFIX = "원"

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
