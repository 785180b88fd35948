"""Air quality readings to a colored GeoJSON grid."""

from heatmap.config import APP_VERSION as __version__
