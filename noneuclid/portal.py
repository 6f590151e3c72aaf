"""Portals: linked doorways that warp space from one place to another."""

from __future__ import annotations

from typing import Optional, Protocol

from noneuclid.camera import Camera
from noneuclid.framebuffer import FrameBuffer
from noneuclid.resources import acquire_mesh, acquire_shader
from noneuclid.settings import FBO_SIZE, MAX_RECURSION, clamp
from noneuclid.scene_object import SceneObject
from noneuclid.vector import Matrix4, Vector3


class PortalRenderer(Protocol):
    """What a portal needs from the engine that draws it."""

    rec_level: int

    def nearest_portal_dist(self) -> float: ...

    def render(self, cam: Camera, cur_fbo: int, skip_portal: Optional[Portal]) -> None: ...


class Warp:
    """One side of a portal and the transform that carries space through it."""

    def __init__(self, from_portal: Portal) -> None:
        self.from_portal = from_portal
        self.to_portal: Optional[Portal] = None
        self.delta = Matrix4.identity()
        self.delta_inv = Matrix4.identity()


class Portal(SceneObject):
    """A double-sided quad whose faces show and lead to other portals."""

    def __init__(self) -> None:
        super().__init__()
        self.mesh = acquire_mesh("double_quad.obj")
        self.shader = acquire_shader("portal")
        self.err_shader = acquire_shader("pink")
        self.front = Warp(self)
        self.back = Warp(self)
        self.renderer: Optional[PortalRenderer] = None
        self._frame_bufs = [FrameBuffer() for _ in range(max(1, MAX_RECURSION - 1))]

    def draw(self, cam: Camera, cur_fbo: int) -> None:
        """Render the view through this portal and draw it onto the quad."""
        if self.euler.x != 0.0 or self.euler.z != 0.0:
            raise ValueError("portals may only be rotated about the y axis")
        renderer = self.renderer
        if renderer is None:
            raise RuntimeError("portal has no renderer")

        level = renderer.rec_level
        if level <= 0:
            self.draw_pink(cam)
            return

        normal = self.forward()
        cam_pos = cam.world_view.inverse().translation()
        front_direction = (cam_pos - self.pos).dot(normal) > 0
        warp = self.front if front_direction else self.back
        if front_direction:
            normal = -normal

        # Extra clipping to prevent artifacts
        extra_clip = min(renderer.nearest_portal_dist() * 0.5, 0.1)

        portal_cam = cam.copy()
        portal_cam.clip_oblique(self.pos - normal * extra_clip, -normal)
        portal_cam.world_view = portal_cam.world_view @ warp.delta
        portal_cam.width = FBO_SIZE
        portal_cam.height = FBO_SIZE

        frame_buf = self._frame_bufs[level - 1]
        frame_buf.renderer = renderer
        frame_buf.render(portal_cam, cur_fbo, warp.to_portal)
        cam.use_viewport()

        mv = self.local_to_world()
        mvp = cam.matrix() @ mv
        self.shader.use()
        frame_buf.use()
        self.shader.set_mvp(mvp, mv)
        self.mesh.draw()

    def draw_pink(self, cam: Camera) -> None:
        """Draw a flat colour marking the end of the render chain."""
        mv = self.local_to_world()
        mvp = cam.matrix() @ mv
        self.err_shader.use()
        self.err_shader.set_mvp(mvp, mv)
        self.mesh.draw()

    def get_bump(self, a: Vector3) -> Vector3:
        """Portal normal pointing towards the side ``a`` is on."""
        n = self.forward()
        return n * (1.0 if (a - self.pos).dot(n) > 0 else -1.0)

    def intersects(self, a: Vector3, b: Vector3, bump: Vector3) -> Optional[Warp]:
        """The warp crossed by the segment from ``a`` to ``b``, or None."""
        n = self.forward()
        p = self.pos + bump
        da = n.dot(a - p)
        db = n.dot(b - p)
        if da * db > 0.0:
            return None
        if da == db:
            return None
        m = self.local_to_world()
        d = a + (b - a) * (da / (da - db)) - p
        x = m.x_axis()
        if abs(d.dot(x)) >= x.dot(x):
            return None
        y = m.y_axis()
        if abs(d.dot(y)) >= y.dot(y):
            return None
        return self.front if da > 0.0 else self.back

    def dist_to(self, pt: Vector3) -> float:
        """Distance from ``pt`` to the portal's rectangle."""
        local_to_world = self.local_to_world()
        v = pt - local_to_world.translation()
        x = local_to_world.x_axis()
        y = local_to_world.y_axis()
        px = clamp(v.dot(x) / x.mag_sq(), -1.0, 1.0)
        py = clamp(v.dot(y) / y.mag_sq(), -1.0, 1.0)
        closest = x * px + y * py
        return (v - closest).mag()

    @staticmethod
    def connect(a: Portal, b: Portal) -> None:
        """Link two portals both ways: a's front to b's back and b's front to a's back."""
        Portal.connect_warps(a.front, b.back)
        Portal.connect_warps(b.front, a.back)

    @staticmethod
    def connect_warps(a: Warp, b: Warp) -> None:
        """Link two warps so each leads into the other's portal."""
        a.to_portal = b.from_portal
        b.to_portal = a.from_portal
        a.delta = a.from_portal.local_to_world() @ b.from_portal.world_to_local()
        b.delta = b.from_portal.local_to_world() @ a.from_portal.world_to_local()
        a.delta_inv = b.delta
        b.delta_inv = a.delta