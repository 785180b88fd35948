# services/grid.py
# Subdivides the bounding box into a row-major grid of cells

from decimal import Decimal
from typing import List

from heatmap.config import BOUNDING_BOX_BOUNDS, GRID_SIZE
from heatmap.models import BoundingBox, GridCell

BOUNDING_BOX = BoundingBox(**BOUNDING_BOX_BOUNDS)


def build_grid(bbox: BoundingBox = BOUNDING_BOX, size: int = GRID_SIZE) -> List[GridCell]:
    """
    Build size x size cells, row 0 along the north edge and col 0 along the west.

    Edges are computed from the box corners with Decimal so every cell has
    the same exact width and height and neighbours share edges exactly.
    """
    if size < 1:
        raise ValueError(f"Grid size must be positive, got {size}")

    n = Decimal(size)
    step_x = bbox.width / n
    step_y = bbox.height / n

    cells = []
    for row in range(size):
        north = bbox.north - row * step_y
        south = bbox.north - (row + 1) * step_y
        for col in range(size):
            west = bbox.west + col * step_x
            east = bbox.west + (col + 1) * step_x
            cells.append(GridCell(row=row, col=col, west=west, east=east, north=north, south=south))
    return cells
