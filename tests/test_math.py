import math

import pytest

from rasterbench.math import deg_to_rad, polar_point, segment_angles
from rasterbench.types import Vector2


def test_deg_to_rad():
    assert deg_to_rad(180) == pytest.approx(math.pi)


def test_polar_point():
    p = polar_point(Vector2(10, 20), 5, -math.pi / 2)
    assert tuple(p) == pytest.approx((10.0, 15.0))


def test_segment_angles_cover_full_turn():
    angles = segment_angles(4)
    assert angles == pytest.approx([0, math.pi / 2, math.pi, 1.5 * math.pi, 2 * math.pi])


def test_vector_indexing():
    v = Vector2(1.0, 2.0)
    assert v[0] == 1.0
    assert v[:] == (1.0, 2.0)
    with pytest.raises(IndexError):
        v[2]
    with pytest.raises(TypeError, match="indices must be int or slice"):
        v["x"]
