# config.py
# App configuration and constants

# Output is always written here, relative to the cwd
OUTPUT_FILENAME = "heatmap.geojson"

# Bounding box of the grid, kept as strings so Decimal stays exact
BOUNDING_BOX_BOUNDS = {
    "west": "-3.192473",
    "east": "-3.184319",
    "north": "55.946233",
    "south": "55.942617",
}

# Grid is GRID_SIZE x GRID_SIZE cells
GRID_SIZE = 10

# Reading ranges [low, high) mapped to fill colors
COLOR_THRESHOLDS = [
    (0, 32, "#00ff00"),
    (32, 64, "#40ff00"),
    (64, 96, "#80ff00"),
    (96, 128, "#c0ff00"),
    (128, 160, "#ffc000"),
    (160, 192, "#ff8000"),
    (192, 224, "#ff4000"),
    (224, 256, "#ff0000"),
]
DEFAULT_COLOR = "#aaaaaa"  # Anything outside [0, 256)

# Fixed styling carried by every feature
FILL_OPACITY = 0.75
STROKE_WIDTH = 2
STROKE_OPACITY = 1

# App metadata
APP_NAME = "Air Quality Heatmap"
APP_VERSION = "1.0.0"
