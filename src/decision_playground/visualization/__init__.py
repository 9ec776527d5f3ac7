from .coordinates import CoordinateMapper
from .colors import ColorEncoder, VIRIDIS_STOPS, hex_to_rgb
from .heatmap import (
    HeatmapConfig,
    HeatmapRenderer,
    Marker,
    create_surface,
    BACKGROUND_ALPHA,
    MARKER_RADIUS,
)

__all__ = [
    "CoordinateMapper",
    "ColorEncoder",
    "VIRIDIS_STOPS",
    "hex_to_rgb",
    "HeatmapConfig",
    "HeatmapRenderer",
    "Marker",
    "create_surface",
    "BACKGROUND_ALPHA",
    "MARKER_RADIUS",
]
