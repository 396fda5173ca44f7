# rasterbench/gl/capture.py
from pathlib import Path

from PIL import Image

from rasterbench.gl.framebuffer import GLFrameBuffer


def save_png(frame: GLFrameBuffer, path: Path) -> Path:
    """Write the framebuffer contents to `path` as an RGB PNG."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(frame.read()).save(path, format="PNG")
    return path
