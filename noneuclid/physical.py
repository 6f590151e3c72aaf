"""Objects that move, fall, collide and pass through portals."""

from __future__ import annotations

import dataclasses
import math

from noneuclid.portal import Portal
from noneuclid.scene_object import SceneObject
from noneuclid.settings import DT, GRAVITY, NEAR_MIN
from noneuclid.sphere import Sphere
from noneuclid.vector import Vector3


class Physical(SceneObject):
    """A scene object with velocity, gravity, friction and hit spheres."""

    def __init__(self) -> None:
        self.hit_spheres: list[Sphere] = []
        super().__init__()
        self.reset()

    def reset(self) -> None:
        super().reset()
        self.velocity = Vector3.zero()
        self.gravity = Vector3(0.0, GRAVITY, 0.0)
        self.bounce = 0.0
        self.friction = 0.0
        self.high_friction = 0.0
        self.drag = 0.0
        self.prev_pos = Vector3.zero()

    def update(self) -> None:
        self.prev_pos = self.pos
        self.velocity = self.velocity + self.gravity * self.p_scale * DT
        self.velocity = self.velocity * (1.0 - self.drag)
        self.pos = self.pos + self.velocity * DT

    def on_collide(self, other: SceneObject, push: Vector3) -> None:
        """Move out of a collision and remove the velocity into the surface."""
        self.pos = self.pos + push

        # Ignore push if delta is too small
        if push.mag_sq() < 1e-8 * self.p_scale:
            return

        kinetic_friction = self.friction
        if self.high_friction > 0.0:
            vel_ratio = self.velocity.mag() / (self.high_friction * self.p_scale)
            kinetic_friction = min(
                self.friction * (vel_ratio + 5.0) / (vel_ratio + 1.0), 1.0
            )

        push_proj = push * (self.velocity.dot(push) / push.dot(push))
        self.velocity = (self.velocity - push_proj) * (1.0 - kinetic_friction) - push_proj * self.bounce

    def set_position(self, pos: Vector3) -> None:
        self.pos = pos
        self.prev_pos = pos

    def try_portal(self, portal: Portal) -> bool:
        """Teleport through ``portal`` if the last step crossed it."""
        bump = portal.get_bump(self.prev_pos) * (2.0 * NEAR_MIN * self.p_scale)
        warp = portal.intersects(self.prev_pos, self.pos, bump)
        if warp is None:
            return False

        self.pos = warp.delta_inv.mul_point(self.pos - bump * 2.0)
        self.velocity = warp.delta_inv.mul_direction(self.velocity)
        self.prev_pos = self.pos

        forward = Vector3(-math.sin(self.euler.y), 0.0, -math.cos(self.euler.y))
        new_dir = warp.delta_inv.mul_direction(forward)
        self.euler = dataclasses.replace(self.euler, y=-math.atan2(new_dir.x, -new_dir.z))

        self.p_scale *= warp.delta_inv.x_axis().mag()
        return True

    def as_physical(self) -> Physical:
        return self