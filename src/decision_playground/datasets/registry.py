from typing import Dict, List

# ---------------------------------------------------------------------
# local imports
# ---------------------------------------------------------------------

from .example_2d import DataGenerator, Example2D
from .bitmap import classify_mnist_three_data
from .classification import (
    classify_biclusters,
    classify_circle_data,
    classify_concentric_circles,
    classify_hash_data,
    classify_moons,
    classify_spiral_data,
    classify_two_gauss_data,
    classify_xor_data,
)
from .regression import (
    regress_argmax,
    regress_friedman1,
    regress_friedman2,
    regress_friedman3,
    regress_gaussian,
    regress_maximum,
    regress_plane,
    regress_sine_wave,
)
from ..errors import ConfigurationError
from ..utils.logger import logger
from ..utils.random import RandomSource, get_rng

# ---------------------------------------------------------------------

CLASSIFICATION_DATASETS: Dict[str, DataGenerator] = {
    "circle": classify_circle_data,
    "xor": classify_xor_data,
    "gauss": classify_two_gauss_data,
    "spiral": classify_spiral_data,
    "hash": classify_hash_data,
    "concentric": classify_concentric_circles,
    "moons": classify_moons,
    "biclusters": classify_biclusters,
    "mnist": classify_mnist_three_data,
}

REGRESSION_DATASETS: Dict[str, DataGenerator] = {
    "reg-plane": regress_plane,
    "reg-gauss": regress_gaussian,
    "reg-sine": regress_sine_wave,
    "friedman1": regress_friedman1,
    "friedman2": regress_friedman2,
    "friedman3": regress_friedman3,
    "argmax": regress_argmax,
    "maximum": regress_maximum,
}

# ---------------------------------------------------------------------


def is_regression(name: str) -> bool:
    """Returns True when `name` refers to a regression dataset."""
    if name in REGRESSION_DATASETS:
        return True
    if name in CLASSIFICATION_DATASETS:
        return False
    raise ConfigurationError(f"Unknown dataset: [{name}]")


def get_generator(name: str) -> DataGenerator:
    """Looks up a generator by name in both registries.

    Raises:
        ConfigurationError: If no dataset is registered under `name`.
    """
    if name in CLASSIFICATION_DATASETS:
        return CLASSIFICATION_DATASETS[name]
    if name in REGRESSION_DATASETS:
        return REGRESSION_DATASETS[name]
    available = sorted(list(CLASSIFICATION_DATASETS) + list(REGRESSION_DATASETS))
    raise ConfigurationError(f"Unknown dataset: [{name}], available: {available}")


def generate(
        name: str,
        num_samples: int,
        noise: float,
        rng: RandomSource = None
) -> List[Example2D]:
    """Generates a named dataset.

    Args:
        name: Registry key, e.g. "spiral" or "reg-plane".
        num_samples: Number of samples to draw.
        noise: Noise level, typically in [0, 1].
        rng: Seed or generator; a fresh generator is used when None.

    Returns:
        List of Example2D.
    """
    generator = get_generator(name)
    examples = generator(num_samples, noise, get_rng(rng))
    logger.info(
        f"Generated dataset [{name}] with num_samples: [{num_samples}], "
        f"noise: [{noise}] -> {len(examples)} examples")
    return examples
