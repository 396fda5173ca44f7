import math

import pytest

from rasterbench.buffers import vertex_at, vertex_count
from rasterbench.color import BLUE, GREEN, RED, Color
from rasterbench.models.settings import StripSettings
from rasterbench.models.strip import generate_triangle_strip


def test_default_strip_size():
    vertices = generate_triangle_strip(200, 200)
    # Two seed vertices plus an inner/outer pair per segment.
    assert vertex_count(vertices) == 2 * 18 + 2
    assert len(vertices) == (2 * 18 + 2) * 6


@pytest.mark.parametrize("segments", [1, 3, 7, 32])
def test_strip_size_follows_segments(segments):
    vertices = generate_triangle_strip(
        100, 100, StripSettings(segments=segments)
    )
    assert vertex_count(vertices) == 2 * segments + 2


def test_seed_vertices():
    vertices = generate_triangle_strip(200, 200)

    x, y, z, *rgb = vertex_at(vertices, 0)
    assert (x, y, z) == pytest.approx((140.0, 100.0, 0.0))
    assert tuple(rgb) == tuple(RED)

    x, y, z, *rgb = vertex_at(vertices, 1)
    assert (x, y, z) == pytest.approx((180.0, 100.0, 0.0))
    assert tuple(rgb) == tuple(BLUE)


def test_first_segment_far_edge():
    vertices = generate_triangle_strip(200, 200)
    step = 2 * math.pi / 18

    x, y, _, *rgb = vertex_at(vertices, 2)
    assert (x, y) == pytest.approx(
        (100 + 40 * math.cos(step), 100 + 40 * math.sin(step))
    )
    assert tuple(rgb) == tuple(GREEN)

    x, y, _, *rgb = vertex_at(vertices, 3)
    assert (x, y) == pytest.approx(
        (100 + 80 * math.cos(step), 100 + 80 * math.sin(step))
    )
    assert tuple(rgb) == tuple(RED)


def test_palette_cycles_per_segment():
    vertices = generate_triangle_strip(200, 200)
    palette = (RED, GREEN, BLUE)
    for i in range(18):
        inner = vertex_at(vertices, 2 + 2 * i)
        outer = vertex_at(vertices, 3 + 2 * i)
        assert inner[3:] == tuple(palette[(i + 1) % 3])
        assert outer[3:] == tuple(palette[i % 3])


def test_positions_within_outer_radius():
    vertices = generate_triangle_strip(200, 120)
    for k in range(vertex_count(vertices)):
        x, y, z, *_ = vertex_at(vertices, k)
        assert 100 - 80 - 1e-9 <= x <= 100 + 80 + 1e-9
        assert 60 - 80 - 1e-9 <= y <= 60 + 80 + 1e-9
        assert z == 0
        radius = math.hypot(x - 100, y - 60)
        assert radius == pytest.approx(40) or radius == pytest.approx(80)


def test_strip_is_open_but_closes_visually():
    vertices = generate_triangle_strip(200, 200)
    first = vertex_at(vertices, 0)
    last_inner = vertex_at(vertices, vertex_count(vertices) - 2)
    assert last_inner[:2] == pytest.approx(first[:2])


def test_fresh_buffer_per_call():
    a = generate_triangle_strip(200, 200)
    b = generate_triangle_strip(200, 200)
    assert a == b
    assert a is not b


def test_degenerate_frame_is_well_formed():
    vertices = generate_triangle_strip(0, -10)
    assert vertex_count(vertices) == 38
    assert vertex_at(vertices, 0)[:2] == pytest.approx((40.0, -5.0))


def test_custom_palette_cycles_by_three():
    a, b, c = Color(1, 1, 1), Color(2, 2, 2), Color(3, 3, 3)
    vertices = generate_triangle_strip(
        100, 100, StripSettings(segments=4, palette=(a, b, c))
    )
    colors = [vertex_at(vertices, k)[3] for k in range(vertex_count(vertices))]
    # Seed pair, then (inner, outer) = (palette[(i+1) % 3], palette[i % 3]).
    assert colors == [1, 3, 2, 1, 3, 2, 1, 3, 2, 1]
