# rasterbench/gl/framebuffer.py
import moderngl
import numpy as np
from numpy.typing import NDArray

from rasterbench.color import Color


class GLFrameBuffer:
    """
    Offscreen RGB render target.

    Pixel coordinates have their origin at the top-left corner; `read`
    returns rows top to bottom.
    """

    def __init__(self, ctx: moderngl.Context, width: int, height: int):
        self._ctx = ctx
        self._width = width
        self._height = height

        self.texture = ctx.texture((width, height), components=3)
        self.handle = ctx.framebuffer(color_attachments=[self.texture])

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def ctx(self) -> moderngl.Context:
        return self._ctx

    def use(self) -> None:
        self.handle.use()
        self._ctx.viewport = (0, 0, self._width, self._height)

    def clear(self, color: Color) -> None:
        r, g, b = color.as_float()
        self.handle.clear(r, g, b, 1.0)

    def read(self) -> NDArray[np.uint8]:
        """(height, width, 3) uint8 copy of the current contents."""
        raw = self.handle.read(components=3, alignment=1)
        pixels = np.frombuffer(raw, dtype=np.uint8).reshape(
            self._height, self._width, 3
        )
        # GL rows start at the bottom.
        return np.flipud(pixels).copy()

    def release(self) -> None:
        self.handle.release()
        self.texture.release()
