"""Full-screen sky drawn behind everything else."""

from __future__ import annotations

from typing import Any, Optional

from noneuclid.camera import Camera
from noneuclid.mesh import Mesh
from noneuclid.resources import acquire_mesh, acquire_shader
from noneuclid.shader import Shader


class Sky:
    """A screen quad whose shader reconstructs view rays from the camera."""

    def __init__(
        self,
        mesh: Optional[Mesh] = None,
        shader: Optional[Shader] = None,
        gl: Any = None,
    ) -> None:
        self.mesh = mesh if mesh is not None else acquire_mesh("quad.obj")
        self.shader = shader if shader is not None else acquire_shader("sky")
        self._gl = gl

    def draw(self, cam: Camera) -> None:
        """Draw without writing depth, passing the inverse projection and view."""
        gl = self._gl
        if gl is None:
            from pyglet import gl
        gl.glDepthMask(gl.GL_FALSE)
        mvp = cam.projection.inverse()
        mv = cam.world_view.inverse()
        self.shader.use()
        self.shader.set_mvp(mvp, mv)
        self.mesh.draw()
        gl.glDepthMask(gl.GL_TRUE)