import numpy as np
import pytest

from rasterbench.buffers import (
    IndexedMesh,
    as_array,
    iter_triangles,
    pack_indices,
    pack_vertices,
    push_vertex,
    vertex_at,
    vertex_count,
)
from rasterbench.color import Color
from rasterbench.types import Vector2


def _quad():
    buf = []
    push_vertex(buf, Vector2(0, 0), Color(255, 0, 0))
    push_vertex(buf, Vector2(10, 0), Color(0, 255, 0))
    push_vertex(buf, Vector2(0, 10), Color(0, 0, 255))
    push_vertex(buf, Vector2(10, 10), Color(255, 255, 0))
    return buf


def test_push_vertex_layout():
    buf = []
    push_vertex(buf, Vector2(1.5, 2.5), Color(1, 2, 3))
    assert buf == [1.5, 2.5, 0.0, 1, 2, 3]


def test_vertex_at_and_count():
    buf = _quad()
    assert vertex_count(buf) == 4
    assert vertex_at(buf, 3) == (10, 10, 0.0, 255, 255, 0)


@pytest.mark.parametrize("index", [-1, 4])
def test_vertex_at_out_of_range(index):
    with pytest.raises(IndexError, match="out of range"):
        vertex_at(_quad(), index)


def test_iter_triangles_indexed_and_flat():
    buf = _quad()
    tris = list(iter_triangles(buf, [0, 1, 2, 1, 3, 2]))
    assert len(tris) == 2
    assert tris[1][1] == vertex_at(buf, 3)

    # Flat walk ignores a trailing partial triangle.
    assert len(list(iter_triangles(buf))) == 1


def test_indexed_mesh_counts():
    mesh = IndexedMesh(vertices=_quad(), indices=[0, 1, 2, 1, 3, 2])
    assert mesh.vertex_count == 4
    assert mesh.triangle_count == 2


def test_as_array_shape():
    arr = as_array(_quad())
    assert arr.shape == (4, 6)
    assert arr.dtype == np.float32


def test_pack_vertices_normalizes_color():
    packed = np.frombuffer(pack_vertices(_quad()), dtype=np.float32)
    rows = packed.reshape(4, 5)
    assert rows[1].tolist() == pytest.approx([10.0, 0.0, 0.0, 1.0, 0.0])


def test_pack_indices_is_uint32():
    data = pack_indices([0, 1, 70000])
    assert np.frombuffer(data, dtype="u4").tolist() == [0, 1, 70000]
