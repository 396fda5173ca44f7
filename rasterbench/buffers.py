# rasterbench/buffers.py
"""
Vertex buffer convention shared by every generator.

A vertex is six numbers in a flat list: x, y, z, r, g, b. Positions are
floats (z is always 0), colors are ints in [0, 255]. Index buffers refer to
vertices by vertex index, not by flat offset.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

import numpy as np
from numpy.typing import NDArray

from rasterbench.color import Color
from rasterbench.types import IndexBuffer, Vector2, VertexBuffer

VERTEX_STRIDE = 6
VERTICES_PER_TRIANGLE = 3

Vertex = Tuple[float, float, float, int, int, int]


@dataclass(frozen=True)
class IndexedMesh:
    """Shared vertices plus a triangle list addressing them."""

    vertices: VertexBuffer = field(default_factory=list)
    indices: IndexBuffer = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return vertex_count(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // VERTICES_PER_TRIANGLE


def push_vertex(buffer: VertexBuffer, pos: Vector2, color: Color) -> None:
    buffer.extend((pos.x, pos.y, 0.0, color.r, color.g, color.b))


def vertex_count(buffer: VertexBuffer) -> int:
    return len(buffer) // VERTEX_STRIDE


def vertex_at(buffer: VertexBuffer, index: int) -> Vertex:
    """Return the full record of vertex `index`."""
    if index < 0 or index >= vertex_count(buffer):
        raise IndexError(
            f"vertex {index} out of range for {vertex_count(buffer)} vertices"
        )
    offset = index * VERTEX_STRIDE
    x, y, z, r, g, b = buffer[offset : offset + VERTEX_STRIDE]
    return (x, y, z, int(r), int(g), int(b))


def iter_vertices(buffer: VertexBuffer) -> Iterator[Vertex]:
    for i in range(vertex_count(buffer)):
        yield vertex_at(buffer, i)


def iter_triangles(
    buffer: VertexBuffer, indices: IndexBuffer | None = None
) -> Iterator[Tuple[Vertex, Vertex, Vertex]]:
    """
    Walk a triangle list.

    With `indices`, every three indices form a triangle. Without, every
    three consecutive vertices do.
    """
    if indices is None:
        indices = list(range(vertex_count(buffer)))

    usable = len(indices) - len(indices) % VERTICES_PER_TRIANGLE
    for i in range(0, usable, VERTICES_PER_TRIANGLE):
        yield (
            vertex_at(buffer, indices[i]),
            vertex_at(buffer, indices[i + 1]),
            vertex_at(buffer, indices[i + 2]),
        )


def as_array(buffer: VertexBuffer) -> NDArray[np.float32]:
    """(N, 6) float32 view of a vertex buffer, one row per vertex."""
    return np.asarray(buffer, dtype=np.float32).reshape(-1, VERTEX_STRIDE)


def pack_vertices(buffer: VertexBuffer) -> bytes:
    """
    Pack for GPU upload as "2f 3f": pixel position plus normalized color.

    z is dropped since every generator emits planar geometry.
    """
    arr = as_array(buffer)
    packed = np.empty((len(arr), 5), dtype=np.float32)
    packed[:, 0:2] = arr[:, 0:2]
    packed[:, 2:5] = arr[:, 3:6] / 255.0
    return packed.tobytes()


def pack_indices(indices: IndexBuffer) -> bytes:
    return np.asarray(indices, dtype="u4").tobytes()
