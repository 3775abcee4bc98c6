import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arbor.geometry import Vector2, radians

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)


class TestAngles:
    @pytest.mark.parametrize(
        ("deg", "rad"),
        [(0, 0.0), (90, math.pi / 2), (180, math.pi), (270, 3 * math.pi / 2)],
    )
    def test_radians(self, deg: float, rad: float) -> None:
        assert radians(deg) == pytest.approx(rad)


class TestVector2:
    def test_default_is_origin(self) -> None:
        assert Vector2() == Vector2(0.0, 0.0)

    def test_from_radians_points_up_at_270_degrees(self) -> None:
        """Screen y grows downward, so 270 degrees is straight up."""
        direction = Vector2.from_radians(radians(270))

        assert direction.x == pytest.approx(0.0, abs=1e-12)
        assert direction.y == pytest.approx(-1.0)

    def test_sum_and_add(self) -> None:
        a = Vector2(1.0, 2.0)
        b = Vector2(-3.0, 0.5)

        assert Vector2.sum(a, b, Vector2(1.0, 1.0)) == Vector2(-1.0, 3.5)
        assert a + b == Vector2(-2.0, 2.5)
        assert Vector2.sum() == Vector2()

    def test_scale_and_iter(self) -> None:
        assert tuple(Vector2(2.0, -1.0).scale(3)) == (6.0, -3.0)

    def test_str(self) -> None:
        assert str(Vector2(1.5, 2.0)) == "(1.5, 2.0)"

    @given(finite, finite, finite, finite)
    def test_addition_is_commutative(
        self, x1: float, y1: float, x2: float, y2: float
    ) -> None:
        assert Vector2(x1, y1) + Vector2(x2, y2) == Vector2(x2, y2) + Vector2(x1, y1)
