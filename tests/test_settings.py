import pytest

from rasterbench.color import RED
from rasterbench.models.settings import (
    FLAT_GRID,
    CatalogSettings,
    FanSettings,
    GridSettings,
    StripSettings,
)


@pytest.mark.parametrize(
    "factory, field",
    [
        (lambda: StripSettings(segments=0), "segments"),
        (lambda: FanSettings(triangles=0), "triangles"),
        (lambda: GridSettings(x_steps=0), "x_steps"),
        (lambda: GridSettings(y_steps=-1), "y_steps"),
    ],
)
def test_resolution_must_be_positive(factory, field):
    with pytest.raises(ValueError, match=field):
        factory()


@pytest.mark.parametrize("size", [1, 2, 4])
def test_palette_needs_exactly_three_colors(size):
    palette = (RED,) * size
    with pytest.raises(ValueError, match="exactly 3 colors"):
        StripSettings(palette=palette)
    with pytest.raises(ValueError, match="exactly 3 colors"):
        FanSettings(palette=palette)


def test_grid_needs_four_corners():
    with pytest.raises(ValueError, match="corners"):
        GridSettings(corners=(RED, RED, RED))


def test_settings_are_frozen():
    settings = StripSettings()
    with pytest.raises(AttributeError):
        settings.segments = 4  # type: ignore[misc]


def test_catalog_defaults():
    settings = CatalogSettings()
    assert settings.mesh_index.x_steps == 10
    assert settings.mesh_index.y_steps == 5
    assert settings.mesh_triangles.x_steps == 1
    assert settings.mesh_triangles.y_steps == 1
    assert settings.strip.segments == 18
    assert settings.fan.triangles == 5


def test_flat_grid_is_shared_default():
    assert FLAT_GRID == GridSettings(x_steps=1, y_steps=1)
    assert CatalogSettings().mesh_triangles is FLAT_GRID
