# rasterbench/gl/context.py
import moderngl
import pygame

GL_REQUIRE = 330


def create_offscreen_context() -> moderngl.Context:
    """Headless OpenGL context for rendering into GLFrameBuffer objects."""
    try:
        return moderngl.create_context(standalone=True, require=GL_REQUIRE)
    except Exception as e:
        raise RuntimeError(f"could not create an OpenGL context: {e}") from e


class Window:
    """
    Manages the OS Window and OpenGL Context for the preview.
    """

    def __init__(self, width: int, height: int, title: str = "rasterbench"):
        if not pygame.get_init():
            pygame.init()

        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
        )
        pygame.display.gl_set_attribute(pygame.GL_DOUBLEBUFFER, 1)

        self._screen = pygame.display.set_mode(
            (width, height), pygame.OPENGL | pygame.DOUBLEBUF
        )
        pygame.display.set_caption(title)

        self.ctx = moderngl.create_context(require=GL_REQUIRE)

        version = self.ctx.version_code
        print(
            f"[rasterbench] OpenGL context created: "
            f"{str(version)[0]}.{str(version)[1:]}"
        )

    def set_title(self, title: str) -> None:
        pygame.display.set_caption(title)

    def present(self) -> None:
        pygame.display.flip()

    def destroy(self) -> None:
        self.ctx.release()
        pygame.quit()
