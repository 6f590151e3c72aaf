"""Perspective camera with oblique near-plane clipping."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field

from noneuclid.settings import FOV, PI
from noneuclid.vector import Matrix4, Vector3, Vector4


@dataclass
class Camera:
    """A view transform plus a projection for a viewport of a given size."""

    projection: Matrix4 = field(default_factory=Matrix4.identity)
    world_view: Matrix4 = field(default_factory=Matrix4.identity)
    width: int = 256
    height: int = 256
    near: float = 0.0
    far: float = 0.0

    def set_size(self, w: int, h: int, near: float, far: float) -> None:
        """Resize the viewport and rebuild the perspective projection."""
        self.width = w
        self.height = h
        self.near = near
        self.far = far

        e = 1.0 / math.tan(FOV * PI / 360.0)
        a = float(h) / float(w)
        d = near - far
        self.projection = Matrix4((
            e * a, 0.0, 0.0, 0.0,
            0.0, e, 0.0, 0.0,
            0.0, 0.0, (near + far) / d, (2.0 * near * far) / d,
            0.0, 0.0, -1.0, 0.0,
        ))

    def set_position_orientation(self, pos: Vector3, rot_x: float, rot_y: float) -> None:
        self.world_view = Matrix4.rot_x(rot_x) @ Matrix4.rot_y(rot_y) @ Matrix4.trans(-pos)

    def inverse_projection(self) -> Matrix4:
        """Closed-form inverse of the perspective projection."""
        p = self.projection
        a, b, c, d, e = p[0], p[5], p[10], p[11], p[14]
        values = [0.0] * 16
        values[0] = 1.0 / a
        values[5] = 1.0 / b
        values[11] = 1.0 / e
        values[14] = 1.0 / d
        values[15] = -c / (d * e)
        return Matrix4(tuple(values))

    def matrix(self) -> Matrix4:
        """Combined world-to-clip transform."""
        return self.projection @ self.world_view

    def use_viewport(self) -> None:
        from pyglet import gl

        gl.glViewport(0, 0, self.width, self.height)

    def clip_oblique(self, pos: Vector3, normal: Vector3) -> None:
        """Replace the near plane with the plane through ``pos`` facing ``normal``."""
        cpos = (self.world_view @ Vector4(pos.x, pos.y, pos.z, 1.0)).xyz()
        cnormal = (self.world_view @ Vector4(normal.x, normal.y, normal.z, 0.0)).xyz()
        cplane = Vector4(cnormal.x, cnormal.y, cnormal.z, -cpos.dot(cnormal))

        q = self.projection.inverse() @ Vector4(
            1.0 if cplane.x < 0.0 else -1.0,
            1.0 if cplane.y < 0.0 else -1.0,
            1.0,
            1.0,
        )
        c = cplane * (2.0 / cplane.dot(q))

        values = list(self.projection.m)
        values[8] = c.x - values[12]
        values[9] = c.y - values[13]
        values[10] = c.z - values[14]
        values[11] = c.w - values[15]
        self.projection = Matrix4(tuple(values))

    def copy(self) -> Camera:
        return dataclasses.replace(self)