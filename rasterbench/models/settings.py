# rasterbench/models/settings.py
from __future__ import annotations

from dataclasses import dataclass, field

from rasterbench.color import BLUE, GREEN, RED, YELLOW, Color

DEFAULT_PALETTE: tuple[Color, Color, Color] = (RED, GREEN, BLUE)


def _require_positive(owner: object, name: str, value: int) -> None:
    if value < 1:
        raise ValueError(
            f"{type(owner).__name__}.{name} must be >= 1, got {value}"
        )


def _require_palette(owner: object, palette: tuple[Color, ...]) -> None:
    if len(palette) != 3:
        raise ValueError(
            f"{type(owner).__name__}.palette needs exactly 3 colors, "
            f"got {len(palette)}"
        )


@dataclass(frozen=True, slots=True)
class StripSettings:
    """Torus drawn as one open triangle strip around the frame center."""

    inner_radius: float = 40.0
    outer_radius: float = 80.0
    segments: int = 18  # two triangles each
    palette: tuple[Color, ...] = DEFAULT_PALETTE

    def __post_init__(self) -> None:
        _require_positive(self, "segments", self.segments)
        _require_palette(self, self.palette)


@dataclass(frozen=True, slots=True)
class FanSettings:
    """
    Fan anchored near the bottom-left corner, a quarter circle by default.

    The apex sits at (apex_x, frame height - apex_inset). palette[0] colors
    the apex, rim vertices alternate palette[2] (even) and palette[1] (odd).
    """

    apex_x: float = 10.0
    apex_inset: float = 10.0
    radius: float = 150.0
    sweep_degrees: float = 90.0  # from +x toward -y (up on screen)
    triangles: int = 5
    palette: tuple[Color, ...] = DEFAULT_PALETTE

    def __post_init__(self) -> None:
        _require_positive(self, "triangles", self.triangles)
        _require_palette(self, self.palette)


@dataclass(frozen=True, slots=True)
class GridSettings:
    """
    Rectangular grid colored by bilinear blending of four corners.

    corners are (c00, c10, c01, c11), placed at normalized grid
    coordinates (0,0), (1,0), (0,1), (1,1).
    """

    x: float = 10.0
    y: float = 10.0
    width: float = 180.0
    height: float = 100.0
    x_steps: int = 10
    y_steps: int = 5
    corners: tuple[Color, Color, Color, Color] = (RED, GREEN, BLUE, YELLOW)

    def __post_init__(self) -> None:
        _require_positive(self, "x_steps", self.x_steps)
        _require_positive(self, "y_steps", self.y_steps)
        if len(self.corners) != 4:
            raise ValueError(
                f"GridSettings.corners needs exactly 4 colors, "
                f"got {len(self.corners)}"
            )

    @property
    def x_step(self) -> float:
        return self.width / self.x_steps

    @property
    def y_step(self) -> float:
        return self.height / self.y_steps


# Single quad, two triangles.
FLAT_GRID = GridSettings(x_steps=1, y_steps=1)


@dataclass(frozen=True, slots=True)
class CatalogSettings:
    """One settings object per registered model."""

    strip: StripSettings = field(default_factory=StripSettings)
    fan: FanSettings = field(default_factory=FanSettings)
    mesh_index: GridSettings = field(default_factory=GridSettings)
    mesh_triangles: GridSettings = FLAT_GRID
