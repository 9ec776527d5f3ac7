"""
Synthetic 2-D Regression Datasets
=================================

Generators whose label is a continuous target. The Friedman variants
follow the published benchmark formulas and report the first input as
`x` and the target as both `y` and `label`.
"""

import math
import numpy as np
from typing import List, Optional

# ---------------------------------------------------------------------
# local imports
# ---------------------------------------------------------------------

from .example_2d import Example2D, Point, dist, check_num_samples
from ..utils.random import get_rng, uniform
from ..utils.scales import LinearScale

# ---------------------------------------------------------------------

RADIUS = 6

# (center x, center y, sign) of the Gaussian bumps used by regress_gaussian
GAUSSIANS = (
    (-4, 2.5, 1),
    (0, 2.5, -1),
    (4, 2.5, 1),
    (-4, -2.5, -1),
    (0, -2.5, 1),
    (4, -2.5, -1),
)

# ---------------------------------------------------------------------


def regress_plane(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Label is a linear map of x + y from [-10, 10] onto [-1, 1]."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    label_scale = LinearScale(domain=(-10, 10), range_=(-1, 1))
    points = []

    for _ in range(num_samples):
        x = uniform(-RADIUS, RADIUS, rng)
        y = uniform(-RADIUS, RADIUS, rng)
        noise_x = uniform(-RADIUS, RADIUS, rng) * noise
        noise_y = uniform(-RADIUS, RADIUS, rng) * noise
        label = label_scale((x + noise_x) + (y + noise_y))
        points.append(Example2D(x, y, label))
    return points


def regress_gaussian(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Label is the strongest signed bump of a six-Gaussian mixture."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    label_scale = LinearScale(domain=(0, 2), range_=(1, 0), clamp=True)

    def get_label(p: Point) -> float:
        # keep the contribution with the largest absolute value
        label = 0.0
        for cx, cy, sign in GAUSSIANS:
            new_label = sign * label_scale(dist(p, (cx, cy)))
            if abs(new_label) > abs(label):
                label = new_label
        return label

    points = []
    for _ in range(num_samples):
        x = uniform(-RADIUS, RADIUS, rng)
        y = uniform(-RADIUS, RADIUS, rng)
        noise_x = uniform(-RADIUS, RADIUS, rng) * noise
        noise_y = uniform(-RADIUS, RADIUS, rng) * noise
        label = get_label(Point(x + noise_x, y + noise_y))
        points.append(Example2D(x, y, label))
    return points


def regress_sine_wave(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """y = amplitude * sin(frequency * x) + noise, with label = y."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    frequency = 0.5
    amplitude = 1
    points = []

    for _ in range(num_samples):
        x = uniform(-10, 10, rng)
        y = amplitude * math.sin(frequency * x) + uniform(-1, 1, rng) * noise
        points.append(Example2D(x, y, y))
    return points


def regress_friedman1(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Friedman #1: 10 sin(pi x1 x2) + 20 (x3 - 0.5)^2 + 10 x4 + 5 x5."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    points = []

    for _ in range(num_samples):
        x1 = uniform(0, 1, rng)
        x2 = uniform(0, 1, rng)
        x3 = uniform(0, 1, rng)
        x4 = uniform(0, 1, rng)
        x5 = uniform(0, 1, rng)
        y = (10 * math.sin(math.pi * x1 * x2) + 20 * (x3 - 0.5) ** 2
             + 10 * x4 + 5 * x5 + uniform(-1, 1, rng) * noise)
        points.append(Example2D(x1, y, y))
    return points


def _friedman_inputs(rng: np.random.Generator):
    x1 = uniform(0, 100, rng)
    x2 = uniform(40 * math.pi, 560 * math.pi, rng)
    x3 = uniform(0, 1, rng)
    x4 = uniform(1, 11, rng)
    return x1, x2, x3, x4


def regress_friedman2(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Friedman #2: sqrt(x1^2 + (x2 x3 - 1 / (x2 x4))^2)."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    points = []

    for _ in range(num_samples):
        x1, x2, x3, x4 = _friedman_inputs(rng)
        y = math.sqrt(x1 * x1 + (x2 * x3 - 1 / (x2 * x4)) ** 2) + uniform(-1, 1, rng) * noise
        points.append(Example2D(x1, y, y))
    return points


def regress_friedman3(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Friedman #3: atan((x2 x3 - 1 / (x2 x4)) / x1)."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    points = []

    for _ in range(num_samples):
        x1, x2, x3, x4 = _friedman_inputs(rng)
        # x1 is drawn from [0, 100); atan2 handles the x1 == 0 draw
        y = math.atan2(x2 * x3 - 1 / (x2 * x4), x1) + uniform(-1, 1, rng) * noise
        points.append(Example2D(x1, y, y))
    return points


def regress_argmax(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Label is 0 when x is the larger coordinate, 1 otherwise. Noise is unused."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    points = []

    for _ in range(num_samples):
        x = uniform(-RADIUS, RADIUS, rng)
        y = uniform(-RADIUS, RADIUS, rng)
        label = 0 if max(x, y) == x else 1
        points.append(Example2D(x, y, label))
    return points


def regress_maximum(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Label is max(x, y). Noise is unused."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    points = []

    for _ in range(num_samples):
        x = uniform(-RADIUS, RADIUS, rng)
        y = uniform(-RADIUS, RADIUS, rng)
        points.append(Example2D(x, y, max(x, y)))
    return points
