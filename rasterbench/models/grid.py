# rasterbench/models/grid.py
from rasterbench.buffers import VERTEX_STRIDE, IndexedMesh, push_vertex
from rasterbench.color import Color
from rasterbench.models.settings import FLAT_GRID, GridSettings
from rasterbench.types import IndexBuffer, Vector2, VertexBuffer


def grid_index(i: int, j: int, y_steps: int) -> int:
    """Buffer index of grid vertex (i, j); columns of y_steps + 1 vertices."""
    return i * (y_steps + 1) + j


def build_indexed_grid(settings: GridSettings = GridSettings()) -> IndexedMesh:
    """
    Vertex pass plus index pass over an x_steps by y_steps grid.

    Vertices are emitted with i (x) as the outer loop and j (y) as the
    inner loop. Each cell becomes two triangles with the same winding:
    (i,j) (i,j+1) (i+1,j) and (i,j+1) (i+1,j+1) (i+1,j).
    """
    c00, c10, c01, c11 = settings.corners
    x_step = settings.x_step
    y_step = settings.y_step

    vertices: VertexBuffer = []
    for i in range(settings.x_steps + 1):
        for j in range(settings.y_steps + 1):
            s = i / settings.x_steps
            t = j / settings.y_steps
            color = Color.interpolate2d(c00, c10, c01, c11, s, t)
            pos = Vector2(settings.x + i * x_step, settings.y + j * y_step)
            push_vertex(vertices, pos, color)

    ys = settings.y_steps
    indices: IndexBuffer = []
    for i in range(settings.x_steps):
        for j in range(settings.y_steps):
            indices.extend(
                (
                    grid_index(i, j, ys),
                    grid_index(i, j + 1, ys),
                    grid_index(i + 1, j, ys),
                    grid_index(i, j + 1, ys),
                    grid_index(i + 1, j + 1, ys),
                    grid_index(i + 1, j, ys),
                )
            )

    return IndexedMesh(vertices=vertices, indices=indices)


def expand_to_flat_triangle_list(mesh: IndexedMesh) -> VertexBuffer:
    """
    Resolve every index into a copy of its vertex record.

    The result has no sharing: each triangle owns three full vertices, in
    index order.
    """
    flat: VertexBuffer = []
    for index in mesh.indices:
        offset = index * VERTEX_STRIDE
        flat.extend(mesh.vertices[offset : offset + VERTEX_STRIDE])
    return flat


def generate_triangles_index(
    settings: GridSettings = GridSettings(),
) -> IndexedMesh:
    return build_indexed_grid(settings)


def generate_triangles(settings: GridSettings = FLAT_GRID) -> VertexBuffer:
    """Same grid as the indexed mesh, expanded into a flat triangle list."""
    return expand_to_flat_triangle_list(build_indexed_grid(settings))
