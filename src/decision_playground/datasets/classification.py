"""
Synthetic 2-D Classification Datasets
=====================================

Each generator draws `num_samples` labeled points with labels in {-1, +1}.
Noise is always injected before the label rule is evaluated, so larger
noise produces more label overlap near the class boundary. Generators that
build two groups emit `num_samples // 2` examples per group.
"""

import math
import numpy as np
from typing import List, Optional

# ---------------------------------------------------------------------
# local imports
# ---------------------------------------------------------------------

from .example_2d import Example2D, Point, dist, check_num_samples
from ..utils.random import get_rng, normal, uniform
from ..utils.scales import LinearScale

# ---------------------------------------------------------------------


def classify_hash_data(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Generates a checkerboard ("hash") dataset over [-5, 5]^2 with 3x3 cells."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    grid_size = 3
    points = []

    for _ in range(num_samples):
        x = uniform(-5, 5, rng)
        y = uniform(-5, 5, rng)
        noise_x = uniform(-1, 1, rng) * noise
        noise_y = uniform(-1, 1, rng) * noise
        cell_sum = math.floor((x + noise_x) / grid_size) + math.floor((y + noise_y) / grid_size)
        label = 1 if cell_sum % 2 == 0 else -1
        points.append(Example2D(x, y, label))
    return points


def classify_two_gauss_data(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Generates two Gaussian blobs at (2, 2) (+1) and (-2, -2) (-1).

    The blob variance grows linearly with noise, mapping [0, 0.5] onto
    [0.5, 4] (and extrapolating beyond).
    """
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    variance_scale = LinearScale(domain=(0, .5), range_=(0.5, 4))
    variance = variance_scale(noise)
    n = num_samples // 2
    points = []

    def gen_gauss(cx: float, cy: float, label: int) -> None:
        for _ in range(n):
            x = normal(cx, variance, rng)
            y = normal(cy, variance, rng)
            points.append(Example2D(x, y, label))

    gen_gauss(2, 2, 1)
    gen_gauss(-2, -2, -1)
    return points


def classify_spiral_data(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Generates two interleaved Archimedean spirals offset by pi."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    n = num_samples // 2
    points = []

    def gen_spiral(delta_t: float, label: int) -> None:
        for i in range(n):
            r = i / n * 5
            t = 1.75 * i / n * 2 * math.pi + delta_t
            x = r * math.sin(t) + uniform(-1, 1, rng) * noise
            y = r * math.cos(t) + uniform(-1, 1, rng) * noise
            points.append(Example2D(x, y, label))

    gen_spiral(0, 1)
    gen_spiral(math.pi, -1)
    return points


def classify_circle_data(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Generates points on two rings (0.5R and 0.7R) labeled by a 0.6R threshold.

    The label is computed on the noised point while the stored coordinates
    stay on the ring, so noise only flips labels.
    """
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    radius = 5
    center = Point(0, 0)
    n = num_samples // 2
    points = []

    def get_circle_label(p: Point) -> int:
        return 1 if dist(p, center) < radius * 0.6 else -1

    for r in (radius * 0.5, radius * 0.7):
        for _ in range(n):
            angle = uniform(0, 2 * math.pi, rng)
            x = r * math.sin(angle)
            y = r * math.cos(angle)
            noise_x = uniform(-radius, radius, rng) * noise
            noise_y = uniform(-radius, radius, rng) * noise
            label = get_circle_label(Point(x + noise_x, y + noise_y))
            points.append(Example2D(x, y, label))
    return points


def classify_xor_data(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Generates the XOR quadrant dataset labeled by the sign of x * y."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    padding = 0.3
    points = []

    for _ in range(num_samples):
        x = uniform(-5, 5, rng)
        x += padding if x > 0 else -padding
        y = uniform(-5, 5, rng)
        y += padding if y > 0 else -padding
        noise_x = uniform(-5, 5, rng) * noise
        noise_y = uniform(-5, 5, rng) * noise
        label = 1 if (x + noise_x) * (y + noise_y) >= 0 else -1
        points.append(Example2D(x, y, label))
    return points


def classify_concentric_circles(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Generates an inner ring of radius 2 (+1) and an outer ring of radius 4 (-1)."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    n = num_samples // 2
    points = []

    def gen_circle(radius: float, label: int) -> None:
        for _ in range(n):
            angle = uniform(0, 2 * math.pi, rng)
            x = radius * math.cos(angle) + uniform(-1, 1, rng) * noise
            y = radius * math.sin(angle) + uniform(-1, 1, rng) * noise
            points.append(Example2D(x, y, label))

    gen_circle(2, 1)
    gen_circle(4, -1)
    return points


def classify_moons(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Generates two interleaving half circles."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    n = num_samples // 2
    points = []

    for i in range(n):
        angle = math.pi * i / n
        x = math.cos(angle) + uniform(-1, 1, rng) * noise
        y = math.sin(angle) + uniform(-1, 1, rng) * noise
        points.append(Example2D(x, y, 1))

    for i in range(n):
        angle = math.pi * i / n
        x = 1 - math.cos(angle) + uniform(-1, 1, rng) * noise
        y = 1 - math.sin(angle) - 0.5 + uniform(-1, 1, rng) * noise
        points.append(Example2D(x, y, -1))

    return points


def classify_biclusters(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Generates two linear bands, y = x (+1) and y = -x (-1)."""
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    n = num_samples // 2
    points = []

    for _ in range(n):
        x = uniform(-5, 5, rng)
        y = x + uniform(-1, 1, rng) * noise
        points.append(Example2D(x, y, 1))

    for _ in range(n):
        x = uniform(-5, 5, rng)
        y = -x + uniform(-1, 1, rng) * noise
        points.append(Example2D(x, y, -1))

    return points
