# services/features.py
# Pairs grid cells with readings and styles them

from typing import List, Optional, Sequence

from heatmap.errors import ReadingCountError
from heatmap.models import FeatureStyle, GridCell, HeatmapDocument, HeatmapFeature
from heatmap.services.classifier import classify


def assemble_features(
    cells: Sequence[GridCell],
    readings: Sequence[int],
    style: Optional[FeatureStyle] = None,
) -> HeatmapDocument:
    """
    Reading i goes with cell i (both row-major).

    Readings beyond the number of cells are ignored.
    """
    if len(readings) < len(cells):
        raise ReadingCountError(expected=len(cells), actual=len(readings))

    style = style or FeatureStyle()
    features: List[HeatmapFeature] = []
    for cell, value in zip(cells, readings):
        features.append(HeatmapFeature(cell=cell, reading=value, color=classify(value), style=style))
    return HeatmapDocument(features=features)
