import math
import numpy as np
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple


class Point(NamedTuple):
    """A location in data space."""
    x: float
    y: float


class Example2D(NamedTuple):
    """A two dimensional example: x and y coordinates with the label.

    Attributes:
        x: First coordinate
        y: Second coordinate
        label: Class sign (-1 / +1) for classification datasets, a
            continuous target for regression datasets
    """
    x: float
    y: float
    label: float


DataGenerator = Callable[[int, float, Optional[np.random.Generator]], List[Example2D]]


def dist(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Returns the Euclidean distance between two points."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return math.sqrt(dx * dx + dy * dy)


def check_num_samples(num_samples: int) -> int:
    """Validates the sample count shared by every generator."""
    if isinstance(num_samples, bool) or not isinstance(num_samples, (int, np.integer)):
        raise ValueError(f"num_samples must be an integer, got {num_samples!r}")
    if num_samples < 1:
        raise ValueError(f"num_samples must be positive, got {num_samples}")
    return int(num_samples)


def to_arrays(examples: Sequence[Example2D]) -> Tuple[np.ndarray, np.ndarray]:
    """Splits examples into an (N, 2) feature array and an (N,) label array."""
    if len(examples) == 0:
        return np.zeros((0, 2), dtype=np.float64), np.zeros((0,), dtype=np.float64)
    data = np.asarray(examples, dtype=np.float64)
    return data[:, :2], data[:, 2]
