# rasterbench/models/__init__.py
from rasterbench.models.fan import generate_triangle_fan
from rasterbench.models.grid import (
    build_indexed_grid,
    expand_to_flat_triangle_list,
    generate_triangles,
    generate_triangles_index,
)
from rasterbench.models.settings import (
    FLAT_GRID,
    CatalogSettings,
    FanSettings,
    GridSettings,
    StripSettings,
)
from rasterbench.models.strip import generate_triangle_strip

__all__ = [
    "FLAT_GRID",
    "CatalogSettings",
    "FanSettings",
    "GridSettings",
    "StripSettings",
    "build_indexed_grid",
    "expand_to_flat_triangle_list",
    "generate_triangle_fan",
    "generate_triangle_strip",
    "generate_triangles",
    "generate_triangles_index",
]
