import math

import pytest

from noneuclid.camera import Camera
from noneuclid.portal import Portal, Warp
from noneuclid.vector import Matrix4, Vector3


class _Recorder:
    def __init__(self):
        self.calls = []

    def use(self):
        self.calls.append(("use",))

    def set_mvp(self, mvp, mv):
        self.calls.append(("set_mvp", mvp, mv))

    def draw(self):
        self.calls.append(("draw",))


class _Renderer:
    def __init__(self, level):
        self.rec_level = level

    def nearest_portal_dist(self):
        return 1.0

    def render(self, cam, cur_fbo, skip_portal):
        raise AssertionError("should not render")


def _pair():
    a = Portal()
    b = Portal()
    b.pos = Vector3(10.0, 0.0, 0.0)
    Portal.connect(a, b)
    return a, b


def test_warp_starts_unlinked_with_identity():
    p = Portal()
    warp = Warp(p)
    assert warp.from_portal is p
    assert warp.to_portal is None
    assert warp.delta == Matrix4.identity()
    assert warp.delta_inv == Matrix4.identity()


def test_connect_links_portals():
    a, b = _pair()
    assert a.front.to_portal is b
    assert b.back.to_portal is a
    assert b.front.to_portal is a
    assert a.back.to_portal is b


def test_connect_deltas_are_inverse():
    a, b = _pair()
    product = a.front.delta @ a.front.delta_inv
    assert product.m == pytest.approx(Matrix4.identity().m, abs=1e-9)
    assert a.front.delta_inv == b.back.delta


def test_connect_delta_maps_other_portal_onto_self():
    a, b = _pair()
    mapped = a.front.delta.mul_point(b.pos)
    assert tuple(mapped) == pytest.approx(tuple(a.pos), abs=1e-9)


def test_get_bump_points_to_side_of_point():
    p = Portal()
    assert p.get_bump(Vector3(0.0, 0.0, -5.0)) == p.forward()
    assert p.get_bump(Vector3(0.0, 0.0, 5.0)) == -p.forward()


def test_intersects_crossing_segment():
    p = Portal()
    warp = p.intersects(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, -1.0), Vector3.zero())
    assert warp is p.back
    warp = p.intersects(Vector3(0.0, 0.0, -1.0), Vector3(0.0, 0.0, 1.0), Vector3.zero())
    assert warp is p.front


def test_intersects_misses():
    p = Portal()
    assert p.intersects(Vector3(0.0, 0.0, 1.0), Vector3(0.0, 0.0, 2.0), Vector3.zero()) is None
    assert p.intersects(Vector3(5.0, 0.0, 1.0), Vector3(5.0, 0.0, -1.0), Vector3.zero()) is None
    assert p.intersects(Vector3(0.0, 5.0, 1.0), Vector3(0.0, 5.0, -1.0), Vector3.zero()) is None


def test_dist_to():
    p = Portal()
    assert math.isclose(p.dist_to(Vector3(0.0, 0.0, 3.0)), 3.0)
    assert math.isclose(p.dist_to(Vector3(0.5, 0.5, 0.0)), 0.0, abs_tol=1e-12)
    assert math.isclose(p.dist_to(Vector3(3.0, 0.0, 0.0)), 2.0)


def test_draw_at_end_of_chain_draws_pink():
    p = Portal()
    rec = _Recorder()
    p.err_shader = rec
    p.mesh = rec
    p.renderer = _Renderer(0)
    cam = Camera()
    p.draw(cam, 0)
    mv = p.local_to_world()
    assert rec.calls == [("use",), ("set_mvp", cam.matrix() @ mv, mv), ("draw",)]


def test_draw_rejects_tilted_portal():
    p = Portal()
    p.renderer = _Renderer(0)
    p.euler = Vector3(0.1, 0.0, 0.0)
    with pytest.raises(ValueError):
        p.draw(Camera(), 0)


def test_draw_without_renderer_raises():
    with pytest.raises(RuntimeError):
        Portal().draw(Camera(), 0)