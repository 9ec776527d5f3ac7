import numpy as np
from typing import Tuple, Union

# ---------------------------------------------------------------------
# local imports
# ---------------------------------------------------------------------

from ..utils.scales import LinearScale

# ---------------------------------------------------------------------


class CoordinateMapper:
    """Data-space to pixel-space mapping for a square drawing surface.

    The x axis maps onto [0, width]; the y axis maps onto [height, 0] so that
    increasing data-y moves towards the top of a surface whose pixel origin
    is the top-left corner. Nothing is clamped: values outside the domains
    land outside the surface and callers filter with `contains`.
    """

    def __init__(
            self,
            width: float,
            x_domain: Tuple[float, float],
            y_domain: Tuple[float, float],
            height: Union[float, None] = None):
        if width <= 0:
            raise ValueError(f"width must be positive, got {width}")
        height = width if height is None else height
        self.x_scale = LinearScale(domain=x_domain, range_=(0, width))
        self.y_scale = LinearScale(domain=y_domain, range_=(height, 0))

    @property
    def x_domain(self) -> Tuple[float, float]:
        return self.x_scale.domain

    @property
    def y_domain(self) -> Tuple[float, float]:
        return self.y_scale.domain

    def map_x(self, x):
        return self.x_scale(x)

    def map_y(self, y):
        return self.y_scale(y)

    def map_point(self, point) -> Tuple[float, float]:
        """Maps an object with `x` and `y` attributes to pixel (px, py)."""
        return self.x_scale(point.x), self.y_scale(point.y)

    def invert_point(self, px: float, py: float) -> Tuple[float, float]:
        """Maps pixel coordinates back into data space."""
        return self.x_scale.invert(px), self.y_scale.invert(py)

    def contains(self, point) -> bool:
        """True when the point lies inside both domains (bounds inclusive)."""
        x0, x1 = sorted(self.x_domain)
        y0, y1 = sorted(self.y_domain)
        return x0 <= point.x <= x1 and y0 <= point.y <= y1

    def contains_array(self, xy: np.ndarray) -> np.ndarray:
        """Vectorized `contains` over an (N, 2) array of points."""
        x0, x1 = sorted(self.x_domain)
        y0, y1 = sorted(self.y_domain)
        xy = np.asarray(xy, dtype=np.float64).reshape(-1, 2)
        return (xy[:, 0] >= x0) & (xy[:, 0] <= x1) & (xy[:, 1] >= y0) & (xy[:, 1] <= y1)
