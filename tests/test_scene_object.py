import math

import pytest

from noneuclid.camera import Camera
from noneuclid.scene_object import SceneObject
from noneuclid.vector import Matrix4, Vector3


class Recorder:
    def __init__(self, log, label):
        self.log = log
        self.label = label
        self.matrices = None

    def use(self):
        self.log.append(f"{self.label}.use")

    def set_mvp(self, mvp, mv):
        self.log.append(f"{self.label}.set_mvp")
        self.matrices = (mvp, mv)

    def draw(self):
        self.log.append(f"{self.label}.draw")


def placed_object():
    obj = SceneObject()
    obj.pos = Vector3(1.0, -2.0, 3.5)
    obj.euler = Vector3(0.4, 1.1, -0.3)
    obj.scale = Vector3(2.0, 0.5, 1.5)
    obj.p_scale = 0.8
    return obj


def test_local_and_world_are_inverse():
    obj = placed_object()
    product = obj.local_to_world() @ obj.world_to_local()
    assert product.m == pytest.approx(Matrix4.identity().m, abs=1e-9)


def test_origin_maps_to_position():
    obj = placed_object()
    p = obj.local_to_world().mul_point(Vector3.zero())
    assert tuple(p) == pytest.approx(tuple(obj.pos))


def test_default_forward_is_negative_z():
    assert tuple(SceneObject().forward()) == pytest.approx((0.0, 0.0, -1.0))


def test_forward_is_unit_length():
    assert placed_object().forward().mag() == pytest.approx(1.0)


def test_forward_after_quarter_turn():
    obj = SceneObject()
    obj.euler = Vector3(0.0, math.pi / 2, 0.0)
    assert tuple(obj.forward()) == pytest.approx((-1.0, 0.0, 0.0), abs=1e-12)


def test_reset_restores_defaults():
    obj = placed_object()
    obj.reset()
    assert obj.pos == Vector3.zero()
    assert obj.euler == Vector3.zero()
    assert obj.scale == Vector3.ones()
    assert obj.p_scale == 1.0
    assert obj.local_to_world().m == pytest.approx(Matrix4.identity().m)


def test_as_physical_is_none():
    assert SceneObject().as_physical() is None


def test_draw_without_mesh_does_nothing():
    log = []
    obj = SceneObject()
    obj.shader = Recorder(log, "shader")
    obj.draw(Camera(), 0)
    assert log == []


def test_draw_sequence_and_matrices():
    log = []
    obj = placed_object()
    obj.shader = Recorder(log, "shader")
    obj.texture = Recorder(log, "texture")
    obj.mesh = Recorder(log, "mesh")
    cam = Camera()
    cam.set_size(800, 600, 0.1, 100.0)
    obj.draw(cam, 0)
    assert log == ["shader.use", "texture.use", "shader.set_mvp", "mesh.draw"]
    mvp, mv = obj.shader.matrices
    # mv is the transposed world-to-local transform
    assert (mv.transposed() @ obj.local_to_world()).m == pytest.approx(
        Matrix4.identity().m, abs=1e-9
    )
    assert (cam.projection.inverse() @ mvp).m == pytest.approx(obj.local_to_world().m, abs=1e-9)


def test_draw_without_texture_skips_it():
    log = []
    obj = SceneObject()
    obj.shader = Recorder(log, "shader")
    obj.mesh = Recorder(log, "mesh")
    obj.draw(Camera(), 0)
    assert log == ["shader.use", "shader.set_mvp", "mesh.draw"]