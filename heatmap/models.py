# models.py
# Pydantic models for the grid, its styling, and the output document

import json
from decimal import Decimal
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator
from shapely.geometry import Polygon, box, mapping

from heatmap.config import FILL_OPACITY, STROKE_OPACITY, STROKE_WIDTH


# --- Geometry Models ---

class BoundingBox(BaseModel):
    """Geographic extent covered by the grid, in exact decimal degrees."""
    west: Decimal
    east: Decimal
    north: Decimal
    south: Decimal

    @model_validator(mode="after")
    def check_extent(self):
        if self.east <= self.west:
            raise ValueError(f"east ({self.east}) must be greater than west ({self.west})")
        if self.north <= self.south:
            raise ValueError(f"north ({self.north}) must be greater than south ({self.south})")
        return self

    @property
    def width(self) -> Decimal:
        return self.east - self.west

    @property
    def height(self) -> Decimal:
        return self.north - self.south

    def to_polygon(self) -> Polygon:
        return box(float(self.west), float(self.south), float(self.east), float(self.north))


class GridCell(BaseModel):
    """
    One rectangle of the grid.

    Edges stay Decimal; they only become floats when the ring is emitted.
    """
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)
    west: Decimal
    east: Decimal
    north: Decimal
    south: Decimal

    def index(self, size: int) -> int:
        """Row-major position of this cell in a size x size grid."""
        return self.row * size + self.col

    def ring(self) -> List[List[float]]:
        """Closed ring: NW, NE, SE, SW, back to NW."""
        w, e = float(self.west), float(self.east)
        n, s = float(self.north), float(self.south)
        return [[w, n], [e, n], [e, s], [w, s], [w, n]]

    def to_polygon(self) -> Polygon:
        return Polygon(self.ring())


# --- Styling / Output Models ---

class FeatureStyle(BaseModel):
    """Fixed styling properties shared by every feature."""
    model_config = ConfigDict(populate_by_name=True)

    fill_opacity: float = Field(FILL_OPACITY, alias="fill-opacity")
    stroke_width: int = Field(STROKE_WIDTH, alias="stroke-width")
    stroke_opacity: int = Field(STROKE_OPACITY, alias="stroke-opacity")


class HeatmapFeature(BaseModel):
    """A grid cell paired with its reading and the color it classifies to."""
    cell: GridCell
    reading: int
    color: str
    style: FeatureStyle = Field(default_factory=FeatureStyle)

    def to_geojson(self) -> Dict[str, Any]:
        style = self.style.model_dump(by_alias=True)
        return {
            "type": "Feature",
            "geometry": mapping(self.cell.to_polygon()),
            "properties": {
                "rgb-string": self.color,
                "fill-opacity": style["fill-opacity"],
                "fill": self.color,
                "stroke-width": style["stroke-width"],
                "stroke-opacity": style["stroke-opacity"],
            },
        }


class HeatmapDocument(BaseModel):
    """Row-major collection of features (row 0 is the northern edge)."""
    features: List[HeatmapFeature]

    def colors(self) -> List[str]:
        return [f.color for f in self.features]

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [f.to_geojson() for f in self.features],
        }

    def to_json(self) -> str:
        """Compact single-line GeoJSON."""
        return json.dumps(self.to_geojson(), separators=(",", ":"))
