import math
import numpy as np
from typing import Any, List, Optional, Union


RandomSource = Union[None, int, np.random.Generator]


def get_rng(seed_or_rng: RandomSource = None) -> np.random.Generator:
    """Resolves a seed or generator into a numpy random Generator.

    Every sampler in the package draws from an explicit generator so that
    call sequences can be reproduced under test.

    Args:
        seed_or_rng: None for a fresh, unseeded generator, an integer seed,
            or an existing `np.random.Generator` which is returned unchanged.

    Returns:
        A `np.random.Generator`.

    Raises:
        TypeError: If `seed_or_rng` is of an unsupported type.
    """
    if seed_or_rng is None:
        return np.random.default_rng()
    if isinstance(seed_or_rng, np.random.Generator):
        return seed_or_rng
    if isinstance(seed_or_rng, (int, np.integer)) and not isinstance(seed_or_rng, bool):
        return np.random.default_rng(int(seed_or_rng))
    raise TypeError(
        f"Expected None, an int seed or np.random.Generator, got {type(seed_or_rng).__name__}")


def uniform(
        a: float,
        b: float,
        rng: Optional[np.random.Generator] = None
) -> float:
    """Returns a sample from a uniform [a, b) distribution."""
    rng = get_rng(rng)
    return float(rng.random()) * (b - a) + a


def normal(
        mean: float = 0.0,
        variance: float = 1.0,
        rng: Optional[np.random.Generator] = None
) -> float:
    """Samples from a normal distribution with the polar rejection method.

    Pairs (v1, v2) are drawn uniformly in (-1, 1) until s = v1^2 + v2^2
    falls inside the unit circle. s == 0 is rejected as well, since
    ln(s) / s is undefined there.

    Args:
        mean: The mean. Default is 0.
        variance: The variance. Default is 1.
        rng: Random generator to draw from.

    Returns:
        A normally distributed float.

    Raises:
        ValueError: If variance is negative.
    """
    if variance < 0:
        raise ValueError(f"variance must be non-negative, got {variance}")
    rng = get_rng(rng)

    while True:
        v1 = 2.0 * float(rng.random()) - 1.0
        v2 = 2.0 * float(rng.random()) - 1.0
        s = v1 * v1 + v2 * v2
        if 0.0 < s <= 1.0:
            break

    result = math.sqrt(-2.0 * math.log(s) / s) * v1
    return mean + math.sqrt(variance) * result


def shuffle(
        items: List[Any],
        rng: Optional[np.random.Generator] = None
) -> None:
    """Shuffles a list in place using the Fisher-Yates algorithm."""
    rng = get_rng(rng)
    counter = len(items)
    while counter > 0:
        index = int(math.floor(float(rng.random()) * counter))
        counter -= 1
        items[counter], items[index] = items[index], items[counter]
