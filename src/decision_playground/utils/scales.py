"""
Linear Scales
=============

A small linear scale in the spirit of d3's `scale.linear()`: a mapping from
a two-element input domain onto a two-element output range, with an
optional clamp and an inverse. Used by the dataset generators for their
fixed label/variance maps and by the coordinate mapper of the heatmap.
"""

import numpy as np
from typing import Tuple, Union

# ---------------------------------------------------------------------

Number = Union[float, int]
ArrayLike = Union[Number, np.ndarray]

# ---------------------------------------------------------------------


class LinearScale:
    """Maps `domain` linearly onto `range_`.

    Values outside the domain extrapolate unless `clamp` is set, in which
    case the output is limited to the range bounds.

    Args:
        domain: Two-element (d0, d1) input interval; d0 != d1.
        range_: Two-element (r0, r1) output interval. r0 > r1 is allowed and
            gives an inverted scale.
        clamp: Limit outputs to the range.

    Raises:
        ValueError: If either interval does not have two elements or the
            domain is degenerate.
    """

    def __init__(
            self,
            domain: Tuple[Number, Number],
            range_: Tuple[Number, Number],
            clamp: bool = False):
        if len(domain) != 2 or len(range_) != 2:
            raise ValueError(
                f"domain and range must have two elements, got {domain} and {range_}")
        d0, d1 = float(domain[0]), float(domain[1])
        if d0 == d1:
            raise ValueError(f"Degenerate domain {domain}")
        self._domain = (d0, d1)
        self._range = (float(range_[0]), float(range_[1]))
        self._clamp = clamp

    @property
    def domain(self) -> Tuple[float, float]:
        return self._domain

    @property
    def range(self) -> Tuple[float, float]:
        return self._range

    @property
    def clamp(self) -> bool:
        return self._clamp

    def __call__(self, value: ArrayLike) -> ArrayLike:
        d0, d1 = self._domain
        r0, r1 = self._range
        t = (np.asarray(value, dtype=np.float64) - d0) / (d1 - d0)
        if self._clamp:
            t = np.clip(t, 0.0, 1.0)
        out = r0 + t * (r1 - r0)
        return float(out) if np.ndim(out) == 0 else out

    def invert(self, value: ArrayLike) -> ArrayLike:
        """Maps a value from the range back into the domain."""
        d0, d1 = self._domain
        r0, r1 = self._range
        if r0 == r1:
            raise ValueError("Cannot invert a scale with a degenerate range")
        t = (np.asarray(value, dtype=np.float64) - r0) / (r1 - r0)
        if self._clamp:
            t = np.clip(t, 0.0, 1.0)
        out = d0 + t * (d1 - d0)
        return float(out) if np.ndim(out) == 0 else out

    def __repr__(self) -> str:
        return (f"LinearScale(domain={self._domain}, range={self._range}, "
                f"clamp={self._clamp})")
