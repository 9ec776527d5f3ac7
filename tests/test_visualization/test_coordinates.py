import pytest
import numpy as np

from decision_playground.datasets import Example2D, Point
from decision_playground.visualization import CoordinateMapper


@pytest.fixture
def mapper() -> CoordinateMapper:
    return CoordinateMapper(width=300, x_domain=(-6, 6), y_domain=(-6, 6))


class TestCoordinateMapper:

    def test_x_maps_left_to_right(self, mapper):
        assert mapper.map_x(-6) == pytest.approx(0.0)
        assert mapper.map_x(6) == pytest.approx(300.0)

    def test_y_is_inverted(self, mapper):
        assert mapper.map_y(-6) == pytest.approx(300.0)
        assert mapper.map_y(6) == pytest.approx(0.0)
        for y1, y2 in [(-6, -5.9), (-1, 0), (0, 3), (2.5, 6)]:
            assert mapper.map_y(y1) > mapper.map_y(y2)

    def test_no_clamping(self, mapper):
        assert mapper.map_x(12) == pytest.approx(450.0)
        assert mapper.map_y(-12) == pytest.approx(450.0)

    def test_map_point(self, mapper):
        px, py = mapper.map_point(Example2D(0.0, 3.0, 1))
        assert px == pytest.approx(150.0)
        assert py == pytest.approx(75.0)

    def test_invert_point(self, mapper):
        x, y = mapper.invert_point(*mapper.map_point(Point(1.5, -2.0)))
        assert x == pytest.approx(1.5)
        assert y == pytest.approx(-2.0)

    def test_domains(self, mapper):
        assert mapper.x_domain == (-6.0, 6.0)
        assert mapper.y_domain == (-6.0, 6.0)

    def test_contains_is_inclusive(self, mapper):
        assert mapper.contains(Point(6, -6))
        assert mapper.contains(Point(0, 0))
        assert not mapper.contains(Point(6.01, 0))
        assert not mapper.contains(Point(0, -6.5))

    def test_contains_array(self, mapper):
        mask = mapper.contains_array(np.array([[0, 0], [7, 0], [-6, 6]]))
        np.testing.assert_array_equal(mask, [True, False, True])

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            CoordinateMapper(width=0, x_domain=(0, 1), y_domain=(0, 1))
