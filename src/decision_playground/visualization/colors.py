"""
Color Encoding
==============

Maps scalar model outputs and labels onto a fixed ten-stop viridis ramp.
"""

import numpy as np
from matplotlib.colors import LinearSegmentedColormap
from typing import Tuple, Union

# ---------------------------------------------------------------------

VIRIDIS_STOPS = (
    0x440154, 0x482878, 0x3e4989, 0x31688e, 0x26828e, 0x1f9e89,
    0x35b779, 0x6ece58, 0xb5de2b, 0xfde725
)

RGB = Tuple[int, int, int]

# ---------------------------------------------------------------------


def hex_to_rgb(value: int) -> RGB:
    """Splits a 0xRRGGBB integer into its channels."""
    return (value >> 16) & 0xff, (value >> 8) & 0xff, value & 0xff


class ColorEncoder:
    """Piecewise-linear color ramp over a fixed scalar domain.

    The stops are spaced evenly over `domain`; a value is colored by
    interpolating between the two stops that bracket it and rounding to
    integer channels. Values outside the domain take the nearest end color.

    In discretize mode a value is first collapsed to +1 (v >= 0) or -1
    (v < 0) and encoded against a [-1, 1] view of the ramp, which yields
    exactly the last or first stop.

    Args:
        domain: (min, max) of the continuous input. Defaults to [-1, 1].
        stops: 0xRRGGBB color stops, first stop at the domain minimum.
    """

    def __init__(
            self,
            domain: Tuple[float, float] = (-1.0, 1.0),
            stops: Tuple[int, ...] = VIRIDIS_STOPS):
        if len(stops) < 2:
            raise ValueError("At least two color stops are required")
        lo, hi = float(domain[0]), float(domain[1])
        if lo >= hi:
            raise ValueError(f"Color domain must be increasing, got {domain}")
        self._domain = (lo, hi)
        self._stops = np.array([hex_to_rgb(s) for s in stops], dtype=np.float64)
        self._positions = np.linspace(0.0, 1.0, len(stops))

    @property
    def domain(self) -> Tuple[float, float]:
        return self._domain

    @property
    def stops(self) -> Tuple[RGB, ...]:
        return tuple(tuple(int(c) for c in stop) for stop in self._stops)

    def _normalize(self, values: np.ndarray, discretize: bool) -> np.ndarray:
        if discretize:
            signs = np.where(values >= 0, 1.0, -1.0)
            return (signs + 1.0) / 2.0
        lo, hi = self._domain
        return np.clip((values - lo) / (hi - lo), 0.0, 1.0)

    def encode_array(
            self,
            values: Union[np.ndarray, float],
            discretize: bool = False) -> np.ndarray:
        """Encodes an array of scalars into a uint8 array of shape (..., 3)."""
        values = np.asarray(values, dtype=np.float64)
        t = self._normalize(values, discretize)
        channels = [
            np.interp(t, self._positions, self._stops[:, c]) for c in range(3)
        ]
        return np.rint(np.stack(channels, axis=-1)).astype(np.uint8)

    def encode(self, value: float, discretize: bool = False) -> RGB:
        """Encodes one scalar into an (r, g, b) tuple of ints."""
        rgb = self.encode_array(np.asarray([value]), discretize)[0]
        return int(rgb[0]), int(rgb[1]), int(rgb[2])

    def encode_hex(self, value: float, discretize: bool = False) -> str:
        r, g, b = self.encode(value, discretize)
        return f"#{r:02x}{g:02x}{b:02x}"

    def as_colormap(self, name: str = "playground_viridis") -> LinearSegmentedColormap:
        """The same ramp as a matplotlib colormap over [0, 1]."""
        colors = [tuple(stop / 255.0) for stop in self._stops]
        return LinearSegmentedColormap.from_list(
            name, list(zip(self._positions, colors)))
