import numpy as np
from typing import Callable, Sequence, Tuple, Union

# ---------------------------------------------------------------------
# local imports
# ---------------------------------------------------------------------

from .logger import logger
from ..errors import DimensionError

# ---------------------------------------------------------------------

MatrixLike = Union[Sequence[Sequence[float]], np.ndarray]

# ---------------------------------------------------------------------


def as_square_matrix(matrix: MatrixLike) -> np.ndarray:
    """Converts `matrix` to a float64 array and checks that it is square.

    Raises:
        DimensionError: If the input is ragged, not 2-D, empty or not square.
    """
    try:
        array = np.asarray(matrix, dtype=np.float64)
    except ValueError as e:
        raise DimensionError(f"Matrix rows must all have the same length: {e}") from e

    if array.ndim != 2 or array.shape[0] == 0:
        raise DimensionError(f"Expected a non-empty 2-D matrix, got shape {array.shape}")
    if array.shape[0] != array.shape[1]:
        raise DimensionError(
            f"The provided matrix must be a square matrix, got shape {array.shape}")
    return array


def reduce_matrix(matrix: MatrixLike, factor: int) -> np.ndarray:
    """Downsamples a square matrix by block averaging.

    Each output cell is the mean of the corresponding non-overlapping
    `factor x factor` block of the input.

    Args:
        matrix: Square matrix with side divisible by `factor`.
        factor: Positive integer reduction factor.

    Returns:
        Array of shape (side // factor, side // factor).

    Raises:
        ValueError: If `factor` is not a positive integer.
        DimensionError: If the matrix is not square or its side is not
            divisible by `factor`.
    """
    if isinstance(factor, bool) or not isinstance(factor, (int, np.integer)) or factor < 1:
        raise ValueError(f"factor must be a positive integer, got {factor!r}")

    array = as_square_matrix(matrix)
    side = array.shape[0]
    if side % factor != 0:
        raise DimensionError(
            f"The width/height of the matrix ({side}) must be divisible by "
            f"the reduction factor ({factor})")

    out_side = side // factor
    reduced = array.reshape(out_side, factor, out_side, factor).mean(axis=(1, 3))
    logger.debug(f"Reduced matrix {side}x{side} -> {out_side}x{out_side} (factor={factor})")
    return reduced


def sample_decision_grid(
        predict: Callable[[np.ndarray], np.ndarray],
        num_samples: int,
        x_domain: Tuple[float, float],
        y_domain: Tuple[float, float]
) -> np.ndarray:
    """Evaluates a model over a uniform lattice spanning the two domains.

    The returned matrix is laid out the way the heatmap paints it: row 0
    holds the largest y value, column 0 the smallest x value.

    Args:
        predict: Vectorized model output, called once with an (N, 2) array
            of (x, y) points and returning N scalars.
        num_samples: Lattice side length.
        x_domain: (min, max) of x.
        y_domain: (min, max) of y.

    Returns:
        Array of shape (num_samples, num_samples).
    """
    if num_samples < 1:
        raise ValueError(f"num_samples must be positive, got {num_samples}")

    xs = np.linspace(x_domain[0], x_domain[1], num_samples)
    ys = np.linspace(y_domain[1], y_domain[0], num_samples)
    xx, yy = np.meshgrid(xs, ys)
    points = np.column_stack([xx.ravel(), yy.ravel()])

    values = np.asarray(predict(points), dtype=np.float64).reshape(-1)
    if values.shape[0] != points.shape[0]:
        raise DimensionError(
            f"predict returned {values.shape[0]} values for {points.shape[0]} points")
    return values.reshape(num_samples, num_samples)
