"""
Test suite for the synthetic 2-D classification generators.

Sampling is random, so these tests check structural and statistical
properties with seeded generators rather than exact values.
"""

import math
import pytest
import numpy as np

from decision_playground.datasets import (
    Example2D,
    classify_biclusters,
    classify_circle_data,
    classify_concentric_circles,
    classify_hash_data,
    classify_mnist_three_data,
    classify_moons,
    classify_spiral_data,
    classify_two_gauss_data,
    classify_xor_data,
    to_arrays,
)
from decision_playground.datasets.bitmap import THREE

PAIRED_GENERATORS = [
    classify_two_gauss_data,
    classify_spiral_data,
    classify_circle_data,
    classify_concentric_circles,
    classify_moons,
    classify_biclusters,
]

UNPAIRED_GENERATORS = [
    classify_hash_data,
    classify_xor_data,
    classify_mnist_three_data,
]

ALL_GENERATORS = PAIRED_GENERATORS + UNPAIRED_GENERATORS


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


class TestSharedContract:
    """Properties every classification generator must satisfy."""

    @pytest.mark.parametrize("generator", PAIRED_GENERATORS)
    @pytest.mark.parametrize("num_samples", [1, 7, 100, 101])
    def test_paired_length(self, generator, num_samples, rng):
        examples = generator(num_samples, 0.1, rng)
        assert len(examples) == (num_samples // 2) * 2

    @pytest.mark.parametrize("generator", UNPAIRED_GENERATORS)
    @pytest.mark.parametrize("num_samples", [1, 7, 100])
    def test_unpaired_length(self, generator, num_samples, rng):
        assert len(generator(num_samples, 0.1, rng)) == num_samples

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    @pytest.mark.parametrize("noise", [0.0, 0.5, 1.0])
    def test_labels_are_signs(self, generator, noise, rng):
        examples = generator(200, noise, rng)
        assert all(isinstance(e, Example2D) for e in examples)
        assert {e.label for e in examples} <= {-1, 1}
        assert all(math.isfinite(e.x) and math.isfinite(e.y) for e in examples)

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    def test_seeded_reproducibility(self, generator):
        a = generator(50, 0.3, np.random.default_rng(9))
        b = generator(50, 0.3, np.random.default_rng(9))
        assert a == b

    @pytest.mark.parametrize("generator", ALL_GENERATORS)
    @pytest.mark.parametrize("num_samples", [0, -3, 2.5])
    def test_invalid_num_samples(self, generator, num_samples, rng):
        with pytest.raises(ValueError):
            generator(num_samples, 0.1, rng)

    @pytest.mark.parametrize("generator", PAIRED_GENERATORS)
    def test_groups_are_ordered(self, generator, rng):
        """The first half carries +1 and the second half -1 where labels follow the group."""
        if generator is classify_circle_data:
            pytest.skip("circle labels are computed from the noised position")
        examples = generator(40, 0.2, rng)
        assert all(e.label == 1 for e in examples[:20])
        assert all(e.label == -1 for e in examples[20:])


class TestXOR:
    def test_noise_free_labels_match_quadrant(self, rng):
        for e in classify_xor_data(500, 0.0, rng):
            assert e.label == (1 if e.x * e.y >= 0 else -1)

    def test_padding_keeps_points_off_axes(self, rng):
        for e in classify_xor_data(500, 0.0, rng):
            assert abs(e.x) >= 0.3 and abs(e.y) >= 0.3
            assert -5.3 <= e.x <= 5.3 and -5.3 <= e.y <= 5.3

    def test_noise_flips_some_labels(self, rng):
        examples = classify_xor_data(2000, 1.0, rng)
        mismatched = sum(1 for e in examples if e.label != (1 if e.x * e.y >= 0 else -1))
        assert mismatched > 0


class TestHash:
    def test_noise_free_checkerboard(self, rng):
        for e in classify_hash_data(500, 0.0, rng):
            parity = (math.floor(e.x / 3) + math.floor(e.y / 3)) % 2
            assert e.label == (1 if parity == 0 else -1)
            assert -5 <= e.x < 5 and -5 <= e.y < 5


class TestCircle:
    def test_noise_free_rings_and_labels(self, rng):
        examples = classify_circle_data(200, 0.0, rng)
        radii = [math.hypot(e.x, e.y) for e in examples]
        np.testing.assert_allclose(radii[:100], 2.5)
        np.testing.assert_allclose(radii[100:], 3.5)
        assert all(e.label == 1 for e in examples[:100])
        assert all(e.label == -1 for e in examples[100:])

    def test_noise_only_changes_labels(self, rng):
        examples = classify_circle_data(400, 1.0, rng)
        radii = np.array([math.hypot(e.x, e.y) for e in examples])
        np.testing.assert_allclose(radii[:200], 2.5)
        np.testing.assert_allclose(radii[200:], 3.5)
        assert any(e.label == -1 for e in examples[:200])


class TestTwoGauss:
    def test_cluster_centers(self, rng):
        X, y = to_arrays(classify_two_gauss_data(4000, 0.0, rng))
        np.testing.assert_allclose(X[y == 1].mean(axis=0), [2, 2], atol=0.1)
        np.testing.assert_allclose(X[y == -1].mean(axis=0), [-2, -2], atol=0.1)

    def test_variance_follows_noise(self, rng):
        # noise 0 -> variance 0.5, noise 0.5 -> variance 4
        X0, _ = to_arrays(classify_two_gauss_data(4000, 0.0, rng))
        X1, _ = to_arrays(classify_two_gauss_data(4000, 0.5, rng))
        assert X0[:2000, 0].var() == pytest.approx(0.5, rel=0.15)
        assert X1[:2000, 0].var() == pytest.approx(4.0, rel=0.15)


class TestSpiral:
    def test_noise_free_geometry(self, rng):
        examples = classify_spiral_data(100, 0.0, rng)
        n = 50
        for i, e in enumerate(examples[:n]):
            r = i / n * 5
            t = 1.75 * i / n * 2 * math.pi
            assert e.x == pytest.approx(r * math.sin(t))
            assert e.y == pytest.approx(r * math.cos(t))
        # second arm is the first rotated by pi
        for a, b in zip(examples[:n], examples[n:]):
            assert b.x == pytest.approx(-a.x, abs=1e-9)
            assert b.y == pytest.approx(-a.y, abs=1e-9)


class TestConcentricCircles:
    def test_noise_free_radii(self, rng):
        examples = classify_concentric_circles(100, 0.0, rng)
        radii = np.array([math.hypot(e.x, e.y) for e in examples])
        np.testing.assert_allclose(radii[:50], 2.0)
        np.testing.assert_allclose(radii[50:], 4.0)


class TestMoons:
    def test_noise_free_arcs(self, rng):
        examples = classify_moons(20, 0.0, rng)
        first, second = examples[:10], examples[10:]
        for e in first:
            assert math.hypot(e.x, e.y) == pytest.approx(1.0)
            assert e.y >= 0
        for e in second:
            assert math.hypot(1 - e.x, 0.5 - e.y) == pytest.approx(1.0)


class TestBiclusters:
    def test_noise_free_bands(self, rng):
        examples = classify_biclusters(100, 0.0, rng)
        for e in examples[:50]:
            assert e.y == pytest.approx(e.x)
        for e in examples[50:]:
            assert e.y == pytest.approx(-e.x)

    def test_noise_bounded(self, rng):
        for e in classify_biclusters(200, 0.5, rng)[:100]:
            assert abs(e.y - e.x) <= 0.5


class TestMnistThree:
    def test_bitmap_shape(self):
        assert len(THREE) == 28
        assert all(len(row) == 28 for row in THREE)

    def test_lattice_and_labels(self, rng):
        for e in classify_mnist_three_data(500, 0.0, rng):
            col = round((e.x + 6) * 28 / 12)
            row = round((e.y + 6) * 28 / 12)
            assert 0 <= col < 28 and 0 <= row < 28
            assert e.label == (1 if THREE[row][col] > 0 else -1)

    def test_both_classes_present(self, rng):
        labels = {e.label for e in classify_mnist_three_data(1000, 0.0, rng)}
        assert labels == {-1, 1}

    def test_noise_has_no_effect(self):
        a = classify_mnist_three_data(100, 0.0, np.random.default_rng(5))
        b = classify_mnist_three_data(100, 1.0, np.random.default_rng(5))
        assert a == b
