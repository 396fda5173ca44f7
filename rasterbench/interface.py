# rasterbench/interface.py
from typing import Protocol

from rasterbench.color import Color
from rasterbench.types import IndexBuffer, VertexBuffer


class FrameBuffer(Protocol):
    """Drawable surface. Generators only read its size."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


class GeometricProcessor(Protocol):
    """
    Rasterizer entry points, one per primitive kind.

    Implementations scan-convert the buffers into `frame` and must not
    keep references to the buffers after returning.
    """

    def fill_triangle_strip(
        self,
        vertices: VertexBuffer,
        frame: FrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None: ...

    def fill_triangle_fan(
        self,
        vertices: VertexBuffer,
        frame: FrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None: ...

    def fill_triangles_index(
        self,
        vertices: VertexBuffer,
        indices: IndexBuffer,
        num_triangles: int,
        frame: FrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None: ...

    def fill_triangles(
        self,
        vertices: VertexBuffer,
        num_triangles: int,
        frame: FrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None: ...
