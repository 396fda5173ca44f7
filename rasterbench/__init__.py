# rasterbench/__init__.py
from rasterbench.buffers import VERTEX_STRIDE, IndexedMesh
from rasterbench.catalog import (
    GeneratedModel,
    ModelCatalog,
    ModelKind,
    Primitive,
)
from rasterbench.color import Color
from rasterbench.interface import FrameBuffer, GeometricProcessor
from rasterbench.models import (
    CatalogSettings,
    FanSettings,
    GridSettings,
    StripSettings,
    build_indexed_grid,
    expand_to_flat_triangle_list,
    generate_triangle_fan,
    generate_triangle_strip,
    generate_triangles,
    generate_triangles_index,
)

__all__ = [
    "VERTEX_STRIDE",
    "CatalogSettings",
    "Color",
    "FanSettings",
    "FrameBuffer",
    "GeneratedModel",
    "GeometricProcessor",
    "GridSettings",
    "IndexedMesh",
    "ModelCatalog",
    "ModelKind",
    "Primitive",
    "StripSettings",
    "build_indexed_grid",
    "expand_to_flat_triangle_list",
    "generate_triangle_fan",
    "generate_triangle_strip",
    "generate_triangles",
    "generate_triangles_index",
]
