# services/classifier.py
# Maps a reading to its fill color

from heatmap.config import COLOR_THRESHOLDS, DEFAULT_COLOR

# Every color classify() can return
PALETTE = [color for _, _, color in COLOR_THRESHOLDS] + [DEFAULT_COLOR]


def classify(value: int) -> str:
    """
    Return the hex color for a reading.

    Ranges are inclusive-low, exclusive-high. Values outside [0, 256),
    negatives included, get the default gray.
    """
    for low, high, color in COLOR_THRESHOLDS:
        if low <= value < high:
            return color
    return DEFAULT_COLOR
