import math
import numpy as np
from typing import List, Optional

# ---------------------------------------------------------------------
# local imports
# ---------------------------------------------------------------------

from .example_2d import Example2D, check_num_samples
from ..utils.random import get_rng, uniform

# ---------------------------------------------------------------------

BITMAP_SIZE = 28

# output domain of the rescaled lattice: [-6, 6)
DOMAIN_EXTENT = 12
DOMAIN_OFFSET = 6

# grayscale 28x28 handwritten "3", row-major (THREE[row][col])
THREE = (
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 197, 234, 234, 234, 234, 234, 234, 196, 197, 219, 97, 97, 97, 13, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 213, 253, 253, 253, 253, 253, 253, 253, 253, 253, 253, 253, 253, 218, 179, 64, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 93, 210, 253, 253, 253, 253, 253, 253, 253, 253, 253, 253, 253, 253, 253, 243, 177, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 18, 82, 82, 82, 82, 82, 82, 82, 171, 219, 219, 233, 253, 253, 253, 235, 16, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 111, 253, 253, 253, 253, 124, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 130, 247, 253, 253, 253, 242, 123, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 30, 111, 200, 248, 253, 253, 253, 253, 253, 173, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 203, 234, 253, 253, 253, 253, 253, 253, 253, 167, 10, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 227, 253, 253, 253, 253, 253, 253, 193, 77, 14, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 201, 253, 253, 253, 253, 253, 177, 9, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 32, 89, 189, 229, 253, 253, 161, 19, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 71, 144, 142, 33, 0, 0, 0, 0, 0, 0, 0, 28, 253, 253, 253, 93, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 254, 253, 177, 0, 0, 0, 0, 0, 0, 0, 0, 28, 253, 253, 253, 34, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 198, 253, 208, 81, 0, 0, 0, 0, 0, 0, 0, 17, 209, 253, 253, 90, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 192, 253, 253, 246, 201, 83, 83, 47, 75, 83, 83, 172, 239, 253, 253, 52, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 25, 204, 253, 253, 253, 253, 253, 230, 248, 253, 253, 253, 253, 253, 253, 34, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 29, 75, 179, 212, 236, 253, 253, 253, 253, 253, 253, 253, 253, 236, 28, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 57, 96, 229, 232, 232, 232, 232, 232, 165, 57, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
)

# ---------------------------------------------------------------------


def classify_mnist_three_data(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None
) -> List[Example2D]:
    """Samples lattice cells of a fixed 28x28 digit bitmap.

    A cell is labeled +1 when its pixel is lit and -1 otherwise; the cell
    indices are then rescaled onto [-6, 6). `noise` is accepted for
    signature compatibility and has no effect on this dataset.
    """
    num_samples = check_num_samples(num_samples)
    rng = get_rng(rng)
    points = []

    for _ in range(num_samples):
        col = int(math.floor(uniform(0, BITMAP_SIZE, rng)))
        row = int(math.floor(uniform(0, BITMAP_SIZE, rng)))
        label = 1 if THREE[row][col] > 0 else -1
        x = col * DOMAIN_EXTENT / BITMAP_SIZE - DOMAIN_OFFSET
        y = row * DOMAIN_EXTENT / BITMAP_SIZE - DOMAIN_OFFSET
        points.append(Example2D(x, y, label))
    return points
