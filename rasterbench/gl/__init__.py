# rasterbench/gl/__init__.py
from rasterbench.gl.capture import save_png
from rasterbench.gl.context import Window, create_offscreen_context
from rasterbench.gl.framebuffer import GLFrameBuffer
from rasterbench.gl.processor import GLGeometricProcessor

__all__ = [
    "GLFrameBuffer",
    "GLGeometricProcessor",
    "Window",
    "create_offscreen_context",
    "save_png",
]
