# rasterbench/catalog.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rasterbench.buffers import VERTICES_PER_TRIANGLE, vertex_count
from rasterbench.color import Color
from rasterbench.interface import FrameBuffer, GeometricProcessor
from rasterbench.models.fan import generate_triangle_fan
from rasterbench.models.grid import generate_triangles, generate_triangles_index
from rasterbench.models.settings import CatalogSettings
from rasterbench.models.strip import generate_triangle_strip
from rasterbench.types import IndexBuffer, VertexBuffer


class ModelKind(str, Enum):
    """Registered test models, in registration order."""

    MESH_INDEX = "meshIndex"
    MESH_TRIANGLES = "meshTriangles"
    TRIANGLE_FAN = "triangleFan"
    TRIANGLE_STRIP = "triangleStrip"

    @classmethod
    def parse(cls, model: str) -> Optional[ModelKind]:
        try:
            return cls(model)
        except ValueError:
            return None


class Primitive(str, Enum):
    TRIANGLE_STRIP = "triangle_strip"
    TRIANGLE_FAN = "triangle_fan"
    TRIANGLES_INDEX = "triangles_index"
    TRIANGLES = "triangles"


@dataclass(frozen=True)
class GeneratedModel:
    """Buffers for one model, ready to hand to a GeometricProcessor."""

    kind: ModelKind
    primitive: Primitive
    vertices: VertexBuffer
    indices: Optional[IndexBuffer] = None
    triangle_count: int = 0


class ModelCatalog:
    """
    Named test models and how to draw them.

    The set of models and their settings are fixed at construction.
    """

    def __init__(
        self,
        processor: GeometricProcessor,
        settings: CatalogSettings = CatalogSettings(),
    ) -> None:
        self._processor = processor
        self._settings = settings

    @property
    def settings(self) -> CatalogSettings:
        return self._settings

    def get_models(self) -> list[str]:
        return [kind.value for kind in ModelKind]

    def get_model(self, model: str, width: float, height: float) -> VertexBuffer:
        """
        Raw vertex buffer for `model`.

        Only the triangle strip is served here; every other name, known or
        not, yields an empty buffer. Use `generate` for the others.
        """
        if ModelKind.parse(model) is ModelKind.TRIANGLE_STRIP:
            return generate_triangle_strip(width, height, self._settings.strip)
        return []

    def generate(
        self, model: str, width: float, height: float
    ) -> Optional[GeneratedModel]:
        """Buffers for any registered model, or None for an unknown name."""
        kind = ModelKind.parse(model)
        if kind is None:
            return None

        match kind:
            case ModelKind.TRIANGLE_STRIP:
                vertices = generate_triangle_strip(
                    width, height, self._settings.strip
                )
                return GeneratedModel(
                    kind,
                    Primitive.TRIANGLE_STRIP,
                    vertices,
                    triangle_count=max(vertex_count(vertices) - 2, 0),
                )
            case ModelKind.TRIANGLE_FAN:
                vertices = generate_triangle_fan(height, self._settings.fan)
                return GeneratedModel(
                    kind,
                    Primitive.TRIANGLE_FAN,
                    vertices,
                    triangle_count=max(vertex_count(vertices) - 2, 0),
                )
            case ModelKind.MESH_INDEX:
                mesh = generate_triangles_index(self._settings.mesh_index)
                return GeneratedModel(
                    kind,
                    Primitive.TRIANGLES_INDEX,
                    mesh.vertices,
                    indices=mesh.indices,
                    triangle_count=mesh.triangle_count,
                )
            case ModelKind.MESH_TRIANGLES:
                vertices = generate_triangles(self._settings.mesh_triangles)
                return GeneratedModel(
                    kind,
                    Primitive.TRIANGLES,
                    vertices,
                    triangle_count=vertex_count(vertices)
                    // VERTICES_PER_TRIANGLE,
                )

    def draw_model(
        self,
        model: str,
        frame: FrameBuffer,
        draw_border: bool,
        border_color: Color,
    ) -> None:
        """Generate `model` for `frame` and fill it. Unknown names draw nothing."""
        generated = self.generate(model, frame.width, frame.height)
        if generated is None:
            return

        processor = self._processor
        match generated.primitive:
            case Primitive.TRIANGLE_STRIP:
                processor.fill_triangle_strip(
                    generated.vertices, frame, draw_border, border_color
                )
            case Primitive.TRIANGLE_FAN:
                processor.fill_triangle_fan(
                    generated.vertices, frame, draw_border, border_color
                )
            case Primitive.TRIANGLES_INDEX:
                assert generated.indices is not None
                processor.fill_triangles_index(
                    generated.vertices,
                    generated.indices,
                    generated.triangle_count,
                    frame,
                    draw_border,
                    border_color,
                )
            case Primitive.TRIANGLES:
                processor.fill_triangles(
                    generated.vertices,
                    generated.triangle_count,
                    frame,
                    draw_border,
                    border_color,
                )
