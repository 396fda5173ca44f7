# rasterbench/models/fan.py

from rasterbench.buffers import push_vertex
from rasterbench.math import deg_to_rad, polar_point
from rasterbench.models.settings import FanSettings
from rasterbench.types import Vector2, VertexBuffer


def generate_triangle_fan(
    height: float, settings: FanSettings = FanSettings()
) -> VertexBuffer:
    """
    Fan sweeping from angle 0 to -sweep_degrees around the apex.

    The apex comes first, followed by triangles + 1 rim vertices. Every
    triangle shares the apex as its pivot.
    """
    apex = Vector2(settings.apex_x, height - settings.apex_inset)
    color0, color1, color2 = settings.palette[:3]
    sweep = deg_to_rad(settings.sweep_degrees)

    vertices: VertexBuffer = []
    push_vertex(vertices, apex, color0)

    for i in range(settings.triangles + 1):
        s = i / settings.triangles
        angle = -s * sweep
        color = color2 if i % 2 == 0 else color1
        push_vertex(vertices, polar_point(apex, settings.radius, angle), color)

    return vertices
