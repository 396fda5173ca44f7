from dataclasses import dataclass, field
from typing import Any

import pytest

from rasterbench.catalog import ModelCatalog


@dataclass(frozen=True)
class Frame:
    width: int
    height: int


@dataclass
class RecordingProcessor:
    """Stands in for the rasterizer and records every fill call."""

    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def fill_triangle_strip(self, vertices, frame, draw_border, border_color):
        self.calls.append(
            ("strip", (list(vertices), frame, draw_border, border_color))
        )

    def fill_triangle_fan(self, vertices, frame, draw_border, border_color):
        self.calls.append(
            ("fan", (list(vertices), frame, draw_border, border_color))
        )

    def fill_triangles_index(
        self, vertices, indices, num_triangles, frame, draw_border, border_color
    ):
        self.calls.append(
            (
                "index",
                (
                    list(vertices),
                    list(indices),
                    num_triangles,
                    frame,
                    draw_border,
                    border_color,
                ),
            )
        )

    def fill_triangles(
        self, vertices, num_triangles, frame, draw_border, border_color
    ):
        self.calls.append(
            (
                "triangles",
                (list(vertices), num_triangles, frame, draw_border, border_color),
            )
        )


@pytest.fixture
def frame():
    """A 200x200 surface; generators only read its size."""
    return Frame(200, 200)


@pytest.fixture
def processor():
    return RecordingProcessor()


@pytest.fixture
def catalog(processor):
    return ModelCatalog(processor)
