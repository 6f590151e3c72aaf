"""Spheres used as collision probes."""

from __future__ import annotations

from dataclasses import dataclass, field

from noneuclid.vector import Matrix4, Vector3


@dataclass
class Sphere:
    """A sphere given by its centre and radius."""

    center: Vector3 = field(default_factory=Vector3.zero)
    radius: float = 1.0

    def _check(self) -> None:
        if self.radius <= 0.0:
            raise ValueError("sphere radius must be positive")

    def unit_to_local(self) -> Matrix4:
        """Map the unit sphere at the origin onto this sphere."""
        self._check()
        return Matrix4.trans(self.center) @ Matrix4.scale(self.radius)

    def local_to_unit(self) -> Matrix4:
        """Map this sphere onto the unit sphere at the origin."""
        self._check()
        return Matrix4.scale(1.0 / self.radius) @ Matrix4.trans(-self.center)