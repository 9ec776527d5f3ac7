from .example_2d import Example2D, Point, DataGenerator, dist, to_arrays
from .classification import (
    classify_hash_data,
    classify_two_gauss_data,
    classify_spiral_data,
    classify_circle_data,
    classify_xor_data,
    classify_concentric_circles,
    classify_moons,
    classify_biclusters,
)
from .regression import (
    regress_plane,
    regress_gaussian,
    regress_sine_wave,
    regress_friedman1,
    regress_friedman2,
    regress_friedman3,
    regress_argmax,
    regress_maximum,
)
from .bitmap import classify_mnist_three_data
from .registry import (
    CLASSIFICATION_DATASETS,
    REGRESSION_DATASETS,
    get_generator,
    is_regression,
    generate,
)
