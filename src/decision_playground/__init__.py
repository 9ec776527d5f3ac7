__author__ = "Nikolas Markou"
__version__ = "0.1.0"

from .errors import (
    PlaygroundError,
    ConfigurationError,
    DimensionError,
    LifecycleError,
)
from .utils.matrix import reduce_matrix, sample_decision_grid
