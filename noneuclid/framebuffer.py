"""Off-screen render targets used to draw the view through a portal."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from noneuclid.camera import Camera
from noneuclid.settings import FBO_SIZE


class Renderer(Protocol):
    def render(self, cam: Camera, cur_fbo: int, skip_portal: Any) -> None: ...


def _pyglet_gl():
    from pyglet import gl

    return gl


class FrameBuffer:
    """A square colour texture with a depth buffer, created on first use."""

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        size: int = FBO_SIZE,
        gl: Any = None,
    ) -> None:
        self.renderer = renderer
        self.size = size
        self._gl = gl
        self._created = False
        self._tex_id = 0
        self._fbo = 0
        self._render_buf = 0

    def _api(self):
        return self._gl if self._gl is not None else _pyglet_gl()

    @staticmethod
    def _gen(gl, fn) -> int:
        handle = gl.GLuint()
        fn(1, handle)
        return handle.value

    def _ensure_created(self, gl) -> None:
        if self._created:
            return
        self._created = True

        self._tex_id = self._gen(gl, gl.glGenTextures)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._tex_id)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, gl.GL_RGB, self.size, self.size, 0,
            gl.GL_RGB, gl.GL_UNSIGNED_BYTE, None,
        )

        self._fbo = self._gen(gl, gl.glGenFramebuffers)
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, self._fbo)
        gl.glFramebufferTexture2D(
            gl.GL_FRAMEBUFFER, gl.GL_COLOR_ATTACHMENT0, gl.GL_TEXTURE_2D, self._tex_id, 0
        )

        self._render_buf = self._gen(gl, gl.glGenRenderbuffers)
        gl.glBindRenderbuffer(gl.GL_RENDERBUFFER, self._render_buf)
        gl.glRenderbufferStorage(gl.GL_RENDERBUFFER, gl.GL_DEPTH_COMPONENT16, self.size, self.size)
        gl.glFramebufferRenderbuffer(
            gl.GL_FRAMEBUFFER, gl.GL_DEPTH_ATTACHMENT, gl.GL_RENDERBUFFER, self._render_buf
        )

        status = gl.glCheckFramebufferStatus(gl.GL_FRAMEBUFFER)
        if status != gl.GL_FRAMEBUFFER_COMPLETE:
            return
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, 0)

    def render(self, cam: Camera, cur_fbo: int, skip_portal: Any) -> None:
        """Draw the scene from ``cam`` into this buffer, then rebind ``cur_fbo``."""
        if self.renderer is None:
            raise RuntimeError("frame buffer has no renderer")
        gl = self._api()
        self._ensure_created(gl)
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, self._fbo)
        gl.glViewport(0, 0, self.size, self.size)
        self.renderer.render(cam, self._fbo, skip_portal)
        gl.glBindFramebuffer(gl.GL_FRAMEBUFFER, cur_fbo)

    def use(self) -> None:
        """Bind the colour texture."""
        gl = self._api()
        self._ensure_created(gl)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self._tex_id)