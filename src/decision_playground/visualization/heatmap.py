"""
Decision Surface Heatmap
========================

Draws a model's output grid as a color-coded raster with an overlay of
train/test data points on top of it, on a host-owned matplotlib Axes.

The renderer has an explicit two-phase lifecycle:

1. Construction computes the coordinate scales and paints a cosmetic
   placeholder grid into the renderer's own RGBA buffer.
2. `attach(ax)` materializes the image and marker artists on the surface.

Every drawing call made before `attach` raises `LifecycleError`.

Point overlays are reconciled against the markers of the previous call,
keyed by position in the visible point list: surplus markers are removed,
retained markers are moved/recolored and missing ones are created.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

# ---------------------------------------------------------------------
# local imports
# ---------------------------------------------------------------------

from .colors import RGB, ColorEncoder
from .coordinates import CoordinateMapper
from ..datasets.example_2d import Example2D
from ..errors import ConfigurationError, DimensionError, LifecycleError
from ..utils.logger import logger
from ..utils.random import RandomSource, get_rng

# ---------------------------------------------------------------------

BACKGROUND_ALPHA = 160
MARKER_RADIUS = 3
AXES_PADDING = 20

TRAIN_GROUP = "train"
TEST_GROUP = "test"

# (z-order, edge color) per marker group
MARKER_STYLES = {
    TRAIN_GROUP: (2, "white"),
    TEST_GROUP: (3, "black"),
}

# ---------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class HeatmapConfig:
    """Recognized heatmap settings.

    Attributes:
        show_axes: Draw data-space axes around the surface.
        no_svg: Disable the point overlay; point updates then raise
            `ConfigurationError`.
    """

    show_axes: bool = False
    no_svg: bool = False

    @classmethod
    def from_dict(cls, settings: Optional[Mapping[str, Any]]) -> "HeatmapConfig":
        """Builds a config from a mapping, rejecting unknown keys.

        The camelCase spellings `showAxes` and `noSvg` are accepted as
        aliases of the field names.
        """
        if settings is None:
            return cls()

        aliases = {"showAxes": "show_axes", "noSvg": "no_svg"}
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in settings.items():
            name = aliases.get(key, key)
            if name not in known:
                raise ConfigurationError(
                    f"Unknown heatmap setting: [{key}], expected one of {sorted(known)}")
            if name in values:
                raise ConfigurationError(f"Heatmap setting [{name}] given more than once")
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"Heatmap setting [{key}] must be a bool, got {type(value).__name__}")
            values[name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


@dataclass
class Marker:
    """One overlay marker, keyed by its position in the visible point list."""

    index: int
    cx: float = 0.0
    cy: float = 0.0
    fill: RGB = (0, 0, 0)
    artist: Optional[Circle] = field(default=None, repr=False, compare=False)


# ---------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------


class HeatmapRenderer:
    """Draws a heatmap of a `num_samples x num_samples` output grid.

    Args:
        width: Side of the square drawing area in pixels.
        num_samples: Side of the output grid painted by `update_background`.
        x_domain: (min, max) of data-space x.
        y_domain: (min, max) of data-space y.
        config: `HeatmapConfig` or a mapping of settings.
        rng: Seed or generator for the placeholder grid.

    Raises:
        ValueError: On a non-positive width or num_samples.
        ConfigurationError: On unknown settings.
    """

    def __init__(
            self,
            width: int,
            num_samples: int,
            x_domain: Tuple[float, float],
            y_domain: Tuple[float, float],
            config: Union[HeatmapConfig, Mapping[str, Any], None] = None,
            rng: RandomSource = None):
        if isinstance(num_samples, bool) or not isinstance(num_samples, (int, np.integer)) \
                or num_samples < 1:
            raise ValueError(f"num_samples must be a positive integer, got {num_samples!r}")
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")

        if isinstance(config, HeatmapConfig):
            self._config = config
        else:
            self._config = HeatmapConfig.from_dict(config)

        self._width = width
        self._num_samples = int(num_samples)
        self._coordinates = CoordinateMapper(width, x_domain, y_domain)
        self._color_encoder = ColorEncoder()

        self._surface: Optional[Axes] = None
        self._image = None
        self._markers: Dict[str, List[Marker]] = {
            TRAIN_GROUP: [],
            TEST_GROUP: [],
        }

        self._buffer = self._placeholder(get_rng(rng))

        logger.info(
            f"HeatmapRenderer created: width=[{width}], num_samples=[{num_samples}], "
            f"x_domain={self._coordinates.x_domain}, y_domain={self._coordinates.y_domain}, "
            f"config={self._config.to_dict()}")

    # -----------------------------------------------------------------
    # properties
    # -----------------------------------------------------------------

    @property
    def config(self) -> HeatmapConfig:
        return self._config

    @property
    def width(self) -> int:
        return self._width

    @property
    def num_samples(self) -> int:
        return self._num_samples

    @property
    def coordinates(self) -> CoordinateMapper:
        return self._coordinates

    @property
    def color_encoder(self) -> ColorEncoder:
        return self._color_encoder

    @property
    def is_attached(self) -> bool:
        return self._surface is not None

    @property
    def buffer(self) -> np.ndarray:
        """Copy of the RGBA raster, shape (num_samples, num_samples, 4)."""
        return self._buffer.copy()

    def markers(self, group: str = TRAIN_GROUP) -> Tuple[Marker, ...]:
        """Current marker records of a group ("train" or "test")."""
        if group not in self._markers:
            raise KeyError(f"Unknown marker group: [{group}]")
        return tuple(self._markers[group])

    # -----------------------------------------------------------------
    # lifecycle
    # -----------------------------------------------------------------

    def attach(self, surface: Axes) -> None:
        """Materializes the heatmap on a host-owned matplotlib Axes.

        Raises:
            LifecycleError: If the renderer is already attached.
        """
        if self._surface is not None:
            raise LifecycleError("HeatmapRenderer is already attached to a surface")

        width = self._width
        self._image = surface.imshow(
            self._buffer,
            extent=(0, width, width, 0),
            interpolation="nearest",
            zorder=0)
        surface.set_xlim(0, width)
        surface.set_ylim(width, 0)
        surface.set_aspect("equal")

        if self._config.show_axes:
            x_scale = self._coordinates.x_scale
            y_scale = self._coordinates.y_scale
            surface.set_xticks([])
            surface.set_yticks([])
            surface.secondary_xaxis("bottom", functions=(x_scale.invert, x_scale))
            surface.secondary_yaxis("left", functions=(y_scale.invert, y_scale))
        else:
            surface.set_axis_off()

        self._surface = surface
        logger.info(f"HeatmapRenderer attached to surface (show_axes={self._config.show_axes})")

    def _require_attached(self, operation: str) -> None:
        if self._surface is None:
            raise LifecycleError(
                f"Cannot {operation} before the renderer is attached to a surface")

    def _request_redraw(self) -> None:
        figure = self._surface.figure
        if figure is not None and figure.canvas is not None:
            figure.canvas.draw_idle()

    # -----------------------------------------------------------------
    # background
    # -----------------------------------------------------------------

    def _placeholder(self, rng: np.random.Generator) -> np.ndarray:
        lo, hi = self._color_encoder.domain
        n = self._num_samples
        values = lo + rng.random((n, n)) * (hi - lo)
        return self._to_rgba(values, discretize=False)

    def _to_rgba(self, values: np.ndarray, discretize: bool) -> np.ndarray:
        n = self._num_samples
        image = np.empty((n, n, 4), dtype=np.uint8)
        image[..., :3] = self._color_encoder.encode_array(values, discretize)
        image[..., 3] = BACKGROUND_ALPHA
        return image

    def update_background(
            self,
            matrix: Union[Sequence[Sequence[float]], np.ndarray],
            discretize: bool = False) -> None:
        """Paints a model output grid.

        `matrix[row][col]` colors the cell at image row `row` (row 0 at the
        top, i.e. the largest y) and column `col` (column 0 at the smallest x).

        Args:
            matrix: num_samples x num_samples model outputs.
            discretize: Collapse outputs to their sign before coloring.

        Raises:
            LifecycleError: If called before `attach`.
            DimensionError: If the matrix is not num_samples x num_samples.
            ValueError: If the matrix contains NaN or Inf values.
        """
        self._require_attached("update the background")

        try:
            data = np.asarray(matrix, dtype=np.float64)
        except ValueError as e:
            raise DimensionError(f"The provided data matrix is ragged: {e}") from e

        n = self._num_samples
        if data.ndim != 2 or data.shape != (n, n):
            raise DimensionError(
                f"The provided data matrix must be of size num_samples X num_samples "
                f"({n}x{n}), got shape {data.shape}")
        if not np.all(np.isfinite(data)):
            raise ValueError("The provided data matrix contains NaN or Inf values")

        # colors are computed in full before the buffer is swapped in
        self._buffer = self._to_rgba(data, discretize)
        self._image.set_data(self._buffer)
        self._request_redraw()
        logger.debug(f"Painted {n}x{n} background (discretize={discretize})")

    # -----------------------------------------------------------------
    # point overlay
    # -----------------------------------------------------------------

    def update_points(self, points: Sequence[Example2D]) -> None:
        """Reconciles the training point markers with `points`."""
        self._update_markers(TRAIN_GROUP, points)

    def update_test_points(self, points: Sequence[Example2D]) -> None:
        """Reconciles the test point markers with `points`."""
        self._update_markers(TEST_GROUP, points)

    def _update_markers(self, group: str, points: Sequence[Example2D]) -> None:
        if self._config.no_svg:
            raise ConfigurationError("Can't add points since no_svg=True")
        self._require_attached(f"update {group} points")

        # keep only points that are inside the bounds
        visible = [p for p in points if self._coordinates.contains(p)]
        markers = self._markers[group]

        # exit
        removed = markers[len(visible):]
        for marker in removed:
            marker.artist.remove()
        del markers[len(visible):]

        # enter
        z_order, edge_color = MARKER_STYLES[group]
        added = 0
        for index in range(len(markers), len(visible)):
            artist = Circle(
                (0.0, 0.0),
                radius=MARKER_RADIUS,
                edgecolor=edge_color,
                linewidth=0.5,
                zorder=z_order)
            self._surface.add_patch(artist)
            markers.append(Marker(index=index, artist=artist))
            added += 1

        # update, including the markers just created
        for marker, point in zip(markers, visible):
            marker.cx, marker.cy = self._coordinates.map_point(point)
            marker.fill = self._color_encoder.encode(point.label)
            marker.artist.set_center((marker.cx, marker.cy))
            marker.artist.set_facecolor(tuple(c / 255.0 for c in marker.fill))

        self._request_redraw()
        logger.debug(
            f"Reconciled [{group}] markers: added={added}, removed={len(removed)}, "
            f"total={len(markers)}, filtered_out={len(points) - len(visible)}")


# ---------------------------------------------------------------------


def create_surface(
        width: int,
        dpi: int = 100,
        show_axes: bool = False) -> Tuple[Figure, Axes]:
    """Creates a figure whose axes cover `width x width` pixels.

    With `show_axes`, a margin is left around the axes for tick labels.
    """
    padding = AXES_PADDING if show_axes else 0
    total = width + 2 * padding
    fig = plt.figure(figsize=(total / dpi, total / dpi), dpi=dpi)
    ax = fig.add_axes([padding / total, padding / total, width / total, width / total])
    return fig, ax
