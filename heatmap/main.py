# main.py
# Command line entry point

"""
Air Quality Heatmap
===================
Turns 100 comma-separated air quality readings into a 10x10 GeoJSON grid
of colored polygons over a fixed bounding box.

Run with:
    heatmap readings.txt
    python -m heatmap readings.txt

The result is written to heatmap.geojson in the current directory.
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from heatmap.config import APP_NAME, APP_VERSION, GRID_SIZE, OUTPUT_FILENAME
from heatmap.errors import HeatmapError
from heatmap.services.features import assemble_features
from heatmap.services.grid import BOUNDING_BOX, build_grid
from heatmap.services.parser import parse_readings, read_input
from heatmap.services.writer import write_document


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="heatmap",
        description="Convert air quality readings into a colored GeoJSON grid.",
    )
    parser.add_argument("input", help="Path to the comma-separated readings file")
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return parser


def run(input_path: Path, output_path: Path) -> Path:
    """Parse, grid, classify, assemble and write. Raises HeatmapError on failure."""
    print(f"Reading readings from {input_path}...")
    readings = parse_readings(read_input(input_path))
    print(f"  Parsed {len(readings)} readings")

    cells = build_grid(BOUNDING_BOX, GRID_SIZE)
    print(f"  Built {len(cells)} cells ({GRID_SIZE}x{GRID_SIZE})")

    if len(readings) > len(cells):
        print(f"  Ignoring {len(readings) - len(cells)} extra readings")

    document = assemble_features(cells, readings)
    write_document(document, output_path)
    print(f"Wrote {len(document.features)} features to {output_path}")
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    print("=" * 50)
    print(f"{APP_NAME} v{APP_VERSION}")
    print("=" * 50)

    start = time.time()
    try:
        run(Path(args.input), Path(OUTPUT_FILENAME))
    except HeatmapError as e:
        print(f"Error: {e}")
        return 1

    print(f"Done in {time.time() - start:.2f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
