"""Base class for everything placed in a scene."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from noneuclid.camera import Camera
from noneuclid.mesh import Mesh
from noneuclid.shader import Shader
from noneuclid.texture import Texture
from noneuclid.vector import Matrix4, Vector3

if TYPE_CHECKING:
    from noneuclid.physical import Physical


class SceneObject:
    """A positioned, rotated and scaled object with optional mesh, shader and texture."""

    def __init__(self) -> None:
        self.pos = Vector3.zero()
        self.euler = Vector3.zero()
        self.scale = Vector3.ones()
        # Physical scale, changed only by passing through scaling portals
        self.p_scale = 1.0
        self.mesh: Optional[Mesh] = None
        self.texture: Optional[Texture] = None
        self.shader: Optional[Shader] = None

    def reset(self) -> None:
        self.pos = Vector3.zero()
        self.euler = Vector3.zero()
        self.scale = Vector3.ones()
        self.p_scale = 1.0

    def draw(self, cam: Camera, cur_fbo: int) -> None:
        if self.shader is None or self.mesh is None:
            return
        mv = self.world_to_local().transposed()
        mvp = cam.matrix() @ self.local_to_world()
        self.shader.use()
        if self.texture is not None:
            self.texture.use()
        self.shader.set_mvp(mvp, mv)
        self.mesh.draw()

    def update(self) -> None:
        """Advance one fixed time step; static objects do nothing."""

    def on_hit(self, other: SceneObject, push: Vector3) -> None:
        """React to ``other`` being pushed out of this object."""

    def as_physical(self) -> Optional[Physical]:
        return None

    def local_to_world(self) -> Matrix4:
        e = self.euler
        return (
            Matrix4.trans(self.pos)
            @ Matrix4.rot_y(e.y)
            @ Matrix4.rot_x(e.x)
            @ Matrix4.rot_z(e.z)
            @ Matrix4.scale(self.scale * self.p_scale)
        )

    def world_to_local(self) -> Matrix4:
        e = self.euler
        return (
            Matrix4.scale(1.0 / (self.scale * self.p_scale))
            @ Matrix4.rot_z(-e.z)
            @ Matrix4.rot_x(-e.x)
            @ Matrix4.rot_y(-e.y)
            @ Matrix4.trans(-self.pos)
        )

    def forward(self) -> Vector3:
        e = self.euler
        return -(Matrix4.rot_z(e.z) @ Matrix4.rot_x(e.x) @ Matrix4.rot_y(e.y)).z_axis()