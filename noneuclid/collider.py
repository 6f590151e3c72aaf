"""Rectangular colliders built from right triangles."""

from __future__ import annotations

from typing import Optional

from noneuclid.settings import clamp
from noneuclid.vector import Matrix4, Vector3

_ORTHO_TOLERANCE = 0.001


class Collider:
    """A rectangle spanned by the legs of a right triangle, mirrored about its hypotenuse."""

    __slots__ = ("matrix",)

    def __init__(self, a: Vector3, b: Vector3, c: Vector3) -> None:
        ab = b - a
        bc = c - b
        ca = a - c
        mag_ab = ab.mag_sq()
        mag_bc = bc.mag_sq()
        mag_ca = ca.mag_sq()
        if mag_ab >= mag_bc and mag_ab >= mag_ca:
            self.matrix = self._sorted(bc * 0.5, (a + b) * 0.5, ca * 0.5)
        elif mag_bc >= mag_ab and mag_bc >= mag_ca:
            self.matrix = self._sorted(ca * 0.5, (b + c) * 0.5, ab * 0.5)
        else:
            self.matrix = self._sorted(ab * 0.5, (c + a) * 0.5, bc * 0.5)

    @staticmethod
    def _sorted(da: Vector3, center: Vector3, db: Vector3) -> Matrix4:
        lengths = da.mag() * db.mag()
        if lengths == 0.0 or abs(da.dot(db)) / lengths >= _ORTHO_TOLERANCE:
            raise ValueError("collider triangle must have a right angle")
        return (
            Matrix4.identity()
            .with_translation(center)
            .with_x_axis(da)
            .with_y_axis(db)
        )

    def collide(self, local_to_unit: Matrix4) -> Optional[Vector3]:
        """Return the push that moves a unit sphere out of this rectangle, or None.

        ``local_to_unit`` maps the collider's owner space into the sphere's unit space.
        The push is expressed in that unit space.
        """
        local = local_to_unit @ self.matrix
        v = -local.translation()
        x = local.x_axis()
        y = local.y_axis()

        px = clamp(v.dot(x) / x.mag_sq(), -1.0, 1.0)
        py = clamp(v.dot(y) / y.mag_sq(), -1.0, 1.0)
        closest = x * px + y * py

        delta = v - closest
        if delta.mag_sq() >= 1.0:
            return None
        return delta.normalized() - delta