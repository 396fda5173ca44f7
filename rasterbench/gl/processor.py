# rasterbench/gl/processor.py
from __future__ import annotations

from typing import Iterable, Optional

import moderngl
import numpy as np

from rasterbench.buffers import (
    VERTEX_STRIDE,
    pack_indices,
    pack_vertices,
    vertex_count,
)
from rasterbench.color import Color
from rasterbench.gl.framebuffer import GLFrameBuffer
from rasterbench.types import IndexBuffer, VertexBuffer

VERTEX_SHADER = """
#version 330 core
uniform mat4 u_proj;
in vec2 in_position;
in vec3 in_color;
out vec3 v_color;

void main() {
    v_color = in_color;
    gl_Position = u_proj * vec4(in_position, 0.0, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330 core
in vec3 v_color;
out vec4 f_color;

void main() {
    f_color = vec4(v_color, 1.0);
}
"""


def strip_triangles(count: int) -> list[int]:
    """Triangle list equivalent of a strip of `count` vertices."""
    out: list[int] = []
    for k in range(count - 2):
        out += [k, k + 1, k + 2]
    return out


def fan_triangles(count: int) -> list[int]:
    """Triangle list equivalent of a fan of `count` vertices, pivot first."""
    out: list[int] = []
    for k in range(1, count - 1):
        out += [0, k, k + 1]
    return out


def border_lines(
    vertices: VertexBuffer, triangles: Iterable[int], color: Color
) -> VertexBuffer:
    """One line segment per triangle edge, all in `color`."""
    tri = list(triangles)
    out: VertexBuffer = []
    for i in range(0, len(tri) - len(tri) % 3, 3):
        a, b, c = tri[i], tri[i + 1], tri[i + 2]
        for p, q in ((a, b), (b, c), (c, a)):
            for v in (p, q):
                offset = v * VERTEX_STRIDE
                out += [
                    vertices[offset],
                    vertices[offset + 1],
                    0.0,
                    color.r,
                    color.g,
                    color.b,
                ]
    return out


class GLGeometricProcessor:
    """
    GeometricProcessor backed by moderngl.

    Fills with per-vertex colors interpolated by the GL rasterizer and,
    when asked, outlines every triangle with GL lines.
    """

    def __init__(self, ctx: moderngl.Context):
        self._ctx = ctx
        self._program = ctx.program(
            vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER
        )
        self._u_proj = self._program["u_proj"]

    def fill_triangle_strip(
        self,
        vertices: VertexBuffer,
        frame: GLFrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None:
        self._draw(vertices, None, moderngl.TRIANGLE_STRIP, frame)
        if draw_border:
            tris = strip_triangles(vertex_count(vertices))
            self._draw_border(vertices, tris, frame, border_color)

    def fill_triangle_fan(
        self,
        vertices: VertexBuffer,
        frame: GLFrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None:
        self._draw(vertices, None, moderngl.TRIANGLE_FAN, frame)
        if draw_border:
            tris = fan_triangles(vertex_count(vertices))
            self._draw_border(vertices, tris, frame, border_color)

    def fill_triangles_index(
        self,
        vertices: VertexBuffer,
        indices: IndexBuffer,
        num_triangles: int,
        frame: GLFrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None:
        tris = indices[: num_triangles * 3]
        self._draw(vertices, tris, moderngl.TRIANGLES, frame)
        if draw_border:
            self._draw_border(vertices, tris, frame, border_color)

    def fill_triangles(
        self,
        vertices: VertexBuffer,
        num_triangles: int,
        frame: GLFrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None:
        count = min(num_triangles * 3, vertex_count(vertices))
        self._draw(vertices[: count * 6], None, moderngl.TRIANGLES, frame)
        if draw_border:
            self._draw_border(vertices, range(count), frame, border_color)

    def release(self) -> None:
        self._program.release()

    def _draw_border(
        self,
        vertices: VertexBuffer,
        triangles: Iterable[int],
        frame: GLFrameBuffer,
        color: Color,
    ) -> None:
        lines = border_lines(vertices, triangles, color)
        self._draw(lines, None, moderngl.LINES, frame)

    def _draw(
        self,
        vertices: VertexBuffer,
        indices: Optional[IndexBuffer],
        mode: int,
        frame: GLFrameBuffer,
    ) -> None:
        count = len(indices) if indices is not None else vertex_count(vertices)
        if count == 0:
            return

        frame.use()
        self._u_proj.write(
            self._ortho_projection(0, frame.width, frame.height, 0, -1.0, 1.0)
        )

        vbo = self._ctx.buffer(pack_vertices(vertices))
        ibo = self._ctx.buffer(pack_indices(indices)) if indices else None
        vao = self._ctx.vertex_array(
            self._program,
            [(vbo, "2f 3f", "in_position", "in_color")],
            index_buffer=ibo,
            index_element_size=4,
        )
        try:
            vao.render(mode, vertices=count)
        finally:
            vao.release()
            vbo.release()
            if ibo is not None:
                ibo.release()

    def _ortho_projection(self, l, r, b, t, n, f):
        """Standard Ortho Matrix"""
        rml, tmb, fmn = r - l, t - b, f - n
        return np.array(
            [
                [2.0 / rml, 0.0, 0.0, 0.0],
                [0.0, 2.0 / tmb, 0.0, 0.0],
                [0.0, 0.0, -2.0 / fmn, 0.0],
                [-(r + l) / rml, -(t + b) / tmb, -(f + n) / fmn, 1.0],
            ],
            dtype="f4",
        ).tobytes()
