import math
import pytest
import numpy as np

from decision_playground.datasets import (
    regress_argmax,
    regress_friedman1,
    regress_friedman2,
    regress_friedman3,
    regress_gaussian,
    regress_maximum,
    regress_plane,
    regress_sine_wave,
)

ALL_GENERATORS = [
    regress_plane,
    regress_gaussian,
    regress_sine_wave,
    regress_friedman1,
    regress_friedman2,
    regress_friedman3,
    regress_argmax,
    regress_maximum,
]


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(2024)


class TestSharedContract:

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    @pytest.mark.parametrize("num_samples", [1, 13, 200])
    def test_length(self, generator, num_samples, rng):
        assert len(generator(num_samples, 0.2, rng)) == num_samples

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    @pytest.mark.parametrize("noise", [0.0, 0.5, 1.0])
    def test_finite_labels(self, generator, noise, rng):
        for e in generator(300, noise, rng):
            assert math.isfinite(e.x) and math.isfinite(e.y) and math.isfinite(e.label)

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    def test_seeded_reproducibility(self, generator):
        a = generator(30, 0.4, np.random.default_rng(3))
        b = generator(30, 0.4, np.random.default_rng(3))
        assert a == b


class TestPlane:
    def test_noise_free_label(self, rng):
        for e in regress_plane(300, 0.0, rng):
            assert e.label == pytest.approx((e.x + e.y) / 10)
            assert -1.2 <= e.label <= 1.2


class TestGaussianMixture:
    def test_label_range(self, rng):
        for e in regress_gaussian(500, 0.3, rng):
            assert -1.0 <= e.label <= 1.0

    def test_noise_free_bump_centers(self):
        rng = np.random.default_rng(0)
        examples = regress_gaussian(6000, 0.0, rng)
        near_positive = [e for e in examples if math.hypot(e.x + 4, e.y - 2.5) < 0.3]
        near_negative = [e for e in examples if math.hypot(e.x, e.y - 2.5) < 0.3]
        assert near_positive and near_negative
        assert all(e.label > 0.8 for e in near_positive)
        assert all(e.label < -0.8 for e in near_negative)

    def test_far_from_bumps_is_zero(self, rng):
        examples = regress_gaussian(3000, 0.0, rng)
        corner = [e for e in examples if abs(e.x) > 5.5 and abs(e.y) < 0.3]
        # at x = +-5.5 the nearest bump is 1.5 + away horizontally and 2.5 vertically
        assert all(e.label == 0 for e in corner)


class TestSineWave:
    def test_noise_free_curve(self, rng):
        for e in regress_sine_wave(300, 0.0, rng):
            assert e.y == pytest.approx(math.sin(0.5 * e.x))
            assert e.label == e.y
            assert -10 <= e.x < 10

    def test_noise_bounded(self, rng):
        for e in regress_sine_wave(300, 0.5, rng):
            assert abs(e.y - math.sin(0.5 * e.x)) <= 0.5


class TestFriedman:
    def test_friedman1_range(self, rng):
        for e in regress_friedman1(500, 0.0, rng):
            assert 0 <= e.x < 1
            # 10 + 5 + 10 + 5 is the supremum of the noise-free target
            assert 0 <= e.y <= 30
            assert e.label == e.y

    def test_friedman2_dominated_by_product(self, rng):
        for e in regress_friedman2(500, 0.0, rng):
            assert 0 <= e.x < 100
            assert e.y >= e.x
            assert e.label == e.y

    def test_friedman3_is_an_angle(self, rng):
        for e in regress_friedman3(500, 0.0, rng):
            assert -math.pi / 2 <= e.y <= math.pi / 2
            assert e.label == e.y


class TestMaxima:
    def test_argmax_indicator(self, rng):
        for e in regress_argmax(300, 0.0, rng):
            assert e.label == (0 if e.x >= e.y else 1)

    def test_maximum(self, rng):
        for e in regress_maximum(300, 0.0, rng):
            assert e.label == max(e.x, e.y)
            assert -6 <= e.x < 6 and -6 <= e.y < 6
