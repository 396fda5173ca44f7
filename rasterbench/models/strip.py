# rasterbench/models/strip.py
from rasterbench.buffers import push_vertex
from rasterbench.math import polar_point, segment_angles
from rasterbench.models.settings import StripSettings
from rasterbench.types import Vector2, VertexBuffer


def generate_triangle_strip(
    width: float, height: float, settings: StripSettings = StripSettings()
) -> VertexBuffer:
    """
    Build a torus centered on the frame as a single triangle strip.

    Each segment contributes an inner and an outer vertex at its far edge;
    the first segment also seeds the strip with the pair at angle 0. Outer
    vertex colors cycle through the palette so neighbouring triangles
    alternate. The strip is not welded back to its first pair; with enough
    segments the last pair lands on top of the first.

    Returns 2 * segments + 2 vertices.
    """
    center = Vector2(width / 2, height / 2)
    palette = settings.palette

    vertices: VertexBuffer = []
    angles = segment_angles(settings.segments)

    for i in range(settings.segments):
        curr_angle = angles[i]
        next_angle = angles[i + 1]

        if i == 0:
            push_vertex(
                vertices,
                polar_point(center, settings.inner_radius, curr_angle),
                palette[i % 3],
            )
            push_vertex(
                vertices,
                polar_point(center, settings.outer_radius, curr_angle),
                palette[(i + 2) % 3],
            )

        push_vertex(
            vertices,
            polar_point(center, settings.inner_radius, next_angle),
            palette[(i + 1) % 3],
        )
        push_vertex(
            vertices,
            polar_point(center, settings.outer_radius, next_angle),
            palette[i % 3],
        )

    return vertices
