# rasterbench/gl/preview.py
"""
Interactive model viewer.

Keys:
    - LEFT / RIGHT: previous / next model
    - B: toggle triangle borders
    - ESC: quit
"""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from rasterbench.catalog import ModelCatalog
from rasterbench.color import Color
from rasterbench.gl.context import Window
from rasterbench.gl.framebuffer import GLFrameBuffer
from rasterbench.gl.processor import GLGeometricProcessor
from rasterbench.models.settings import CatalogSettings

BACKGROUND = Color(129, 128, 128)


@dataclass(slots=True)
class PreviewState:
    models: list[str]
    index: int = 0
    draw_border: bool = False

    @property
    def model(self) -> str:
        return self.models[self.index]

    def step(self, delta: int) -> None:
        self.index = (self.index + delta) % len(self.models)


def run_preview(
    width: int,
    height: int,
    border_color: Color,
    settings: CatalogSettings = CatalogSettings(),
    start_model: str | None = None,
) -> None:
    window = Window(width, height)
    ctx = window.ctx

    processor = GLGeometricProcessor(ctx)
    catalog = ModelCatalog(processor, settings)
    frame = GLFrameBuffer(ctx, width, height)

    state = PreviewState(models=catalog.get_models())
    if start_model in state.models:
        state.index = state.models.index(start_model)

    clock = pygame.time.Clock()
    running = True
    dirty = True

    print("[rasterbench] LEFT/RIGHT: switch model, B: border, ESC: quit")

    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_RIGHT:
                    state.step(1)
                    dirty = True
                elif event.key == pygame.K_LEFT:
                    state.step(-1)
                    dirty = True
                elif event.key == pygame.K_b:
                    state.draw_border = not state.draw_border
                    dirty = True

            if dirty:
                frame.clear(BACKGROUND)
                catalog.draw_model(
                    state.model, frame, state.draw_border, border_color
                )
                window.set_title(f"rasterbench - {state.model}")
                print(
                    f"[rasterbench] {state.model} "
                    f"(border {'on' if state.draw_border else 'off'})"
                )
                dirty = False

            ctx.copy_framebuffer(ctx.screen, frame.handle)
            window.present()
            clock.tick(30)
    finally:
        frame.release()
        processor.release()
        window.destroy()
