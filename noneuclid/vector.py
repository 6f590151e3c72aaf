"""Immutable 3D/4D vectors and 4x4 row-major matrices."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence, Union

_EPSILON = sys.float_info.epsilon
_Number = (int, float)


@dataclass(frozen=True, slots=True)
class Vector3:
    """A three-component vector."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def ones(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def unit_x(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def _combine(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Vector3):
            return Vector3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, _Number):
            return Vector3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._combine(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        return self._combine(other, lambda a, b: b / a)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return f"{self.x:g}, {self.y:g}, {self.z:g}"

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def mag_sq(self) -> float:
        return self.dot(self)

    def mag(self) -> float:
        return math.sqrt(self.mag_sq())

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; a zero vector raises ZeroDivisionError."""
        return self / self.mag()

    def normalized_safe(self) -> Vector3:
        """Unit vector that tolerates a zero-length input."""
        return self / (self.mag() + _EPSILON)

    def angle(self, other: Vector3) -> float:
        cos = self.normalized().dot(other.normalized())
        return math.acos(max(-1.0, min(1.0, cos)))

    def angle_safe(self, other: Vector3) -> float:
        cos = self.normalized_safe().dot(other.normalized_safe())
        return math.acos(max(-1.0, min(1.0, cos)))

    def clipped_mag(self, m: float) -> Vector3:
        """Return this vector scaled down so its length does not exceed ``m``."""
        if m <= 0.0:
            raise ValueError("magnitude limit must be positive")
        r = self.mag_sq() / (m * m)
        if r > 1.0:
            return self / math.sqrt(r)
        return self

    def is_ndc(self) -> bool:
        """True if every component lies strictly inside (-1, 1)."""
        return all(-1.0 < c < 1.0 for c in self)


@dataclass(frozen=True, slots=True)
class Vector4:
    """A four-component (homogeneous) vector."""

    x: float
    y: float
    z: float
    w: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __mul__(self, other):
        if isinstance(other, _Number):
            return Vector4(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, _Number):
            return Vector4(self.x / other, self.y / other, self.z / other, self.w / other)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.x:g}, {self.y:g}, {self.z:g}, {self.w:g}"

    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def xyz_normalized(self) -> Vector3:
        return self.xyz().normalized()

    def homogenized(self) -> Vector3:
        return Vector3(self.x / self.w, self.y / self.w, self.z / self.w)

    def dot(self, other: Vector4) -> float:
        return sum(a * b for a, b in zip(self, other))


_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _det3(a: Sequence[Sequence[float]]) -> float:
    return (
        a[0][0] * (a[1][1] * a[2][2] - a[1][2] * a[2][1])
        - a[0][1] * (a[1][0] * a[2][2] - a[1][2] * a[2][0])
        + a[0][2] * (a[1][0] * a[2][1] - a[1][1] * a[2][0])
    )


@dataclass(frozen=True, slots=True)
class Matrix4:
    """A 4x4 matrix stored as 16 floats in row-major order."""

    m: tuple[float, ...] = field(default=_IDENTITY)

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.m)
        if len(values) != 16:
            raise ValueError(f"Matrix4 needs 16 values, got {len(values)}")
        object.__setattr__(self, "m", values)

    # Constructors

    @classmethod
    def zero(cls) -> Matrix4:
        return cls.filled(0.0)

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(_IDENTITY)

    @classmethod
    def filled(cls, value: float) -> Matrix4:
        return cls((value,) * 16)

    @classmethod
    def rot_x(cls, a: float) -> Matrix4:
        c, s = math.cos(a), math.sin(a)
        return cls((
            1.0, 0.0, 0.0, 0.0,
            0.0, c, -s, 0.0,
            0.0, s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def rot_y(cls, a: float) -> Matrix4:
        c, s = math.cos(a), math.sin(a)
        return cls((
            c, 0.0, s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            -s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def rot_z(cls, a: float) -> Matrix4:
        c, s = math.cos(a), math.sin(a)
        return cls((
            c, -s, 0.0, 0.0,
            s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def trans(cls, t: Vector3) -> Matrix4:
        return cls((
            1.0, 0.0, 0.0, t.x,
            0.0, 1.0, 0.0, t.y,
            0.0, 0.0, 1.0, t.z,
            0.0, 0.0, 0.0, 1.0,
        ))

    @classmethod
    def scale(cls, s: Union[Vector3, float]) -> Matrix4:
        if not isinstance(s, Vector3):
            s = Vector3(s, s, s)
        return cls((
            s.x, 0.0, 0.0, 0.0,
            0.0, s.y, 0.0, 0.0,
            0.0, 0.0, s.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ))

    # Access

    def __getitem__(self, index: int) -> float:
        return self.m[index]

    def _rows(self) -> list[tuple[float, ...]]:
        return [self.m[r * 4:r * 4 + 4] for r in range(4)]

    def _cols(self) -> list[tuple[float, ...]]:
        return [self.m[c::4] for c in range(4)]

    def _replaced(self, changes: dict[int, float]) -> Matrix4:
        return Matrix4(tuple(changes.get(i, v) for i, v in enumerate(self.m)))

    def x_axis(self) -> Vector3:
        return Vector3(self.m[0], self.m[4], self.m[8])

    def y_axis(self) -> Vector3:
        return Vector3(self.m[1], self.m[5], self.m[9])

    def z_axis(self) -> Vector3:
        return Vector3(self.m[2], self.m[6], self.m[10])

    def translation(self) -> Vector3:
        return Vector3(self.m[3], self.m[7], self.m[11])

    def diagonal(self) -> Vector3:
        return Vector3(self.m[0], self.m[5], self.m[10])

    def with_translation(self, t: Vector3) -> Matrix4:
        return self._replaced({3: t.x, 7: t.y, 11: t.z})

    def with_x_axis(self, v: Vector3) -> Matrix4:
        return self._replaced({0: v.x, 4: v.y, 8: v.z})

    def with_y_axis(self, v: Vector3) -> Matrix4:
        return self._replaced({1: v.x, 5: v.y, 9: v.z})

    def with_z_axis(self, v: Vector3) -> Matrix4:
        return self._replaced({2: v.x, 6: v.y, 10: v.z})

    def with_diagonal(self, s: Vector3) -> Matrix4:
        return self._replaced({0: s.x, 5: s.y, 10: s.z})

    # Transformations

    def translated(self, t: Vector3) -> Matrix4:
        m = self.m
        return self._replaced({3: m[3] + t.x, 7: m[7] + t.y, 11: m[11] + t.z})

    def stretched(self, s: Vector3) -> Matrix4:
        m = self.m
        return self._replaced({0: m[0] * s.x, 5: m[5] * s.y, 10: m[10] * s.z})

    def transposed(self) -> Matrix4:
        return Matrix4(tuple(v for col in self._cols() for v in col))

    # Arithmetic

    def __add__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(tuple(a + b for a, b in zip(self.m, other.m)))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix4):
            return Matrix4(tuple(a - b for a, b in zip(self.m, other.m)))
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, _Number):
            return Matrix4(tuple(a * other for a in self.m))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, _Number):
            return self * (1.0 / other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, Matrix4):
            cols = other._cols()
            return Matrix4(tuple(
                sum(a * b for a, b in zip(row, col))
                for row in self._rows()
                for col in cols
            ))
        if isinstance(other, Vector4):
            return Vector4(*(sum(a * b for a, b in zip(row, other)) for row in self._rows()))
        return NotImplemented

    def mul_point(self, b: Vector3) -> Vector3:
        """Transform a point, dividing by the resulting w."""
        x, y, z, w = self @ Vector4(b.x, b.y, b.z, 1.0)
        return Vector3(x, y, z) / w

    def mul_direction(self, b: Vector3) -> Vector3:
        """Transform a direction by the upper-left 3x3 block."""
        m = self.m
        return Vector3(
            m[0] * b.x + m[1] * b.y + m[2] * b.z,
            m[4] * b.x + m[5] * b.y + m[6] * b.z,
            m[8] * b.x + m[9] * b.y + m[10] * b.z,
        )

    def inverse(self) -> Matrix4:
        """Inverse via the adjugate; raises ValueError for a singular matrix."""
        m = self.m

        def cofactor(r: int, c: int) -> float:
            minor = [
                [m[i * 4 + j] for j in range(4) if j != c]
                for i in range(4)
                if i != r
            ]
            sign = -1.0 if (r + c) % 2 else 1.0
            return sign * _det3(minor)

        cof = [[cofactor(r, c) for c in range(4)] for r in range(4)]
        det = sum(a * b for a, b in zip(m[:4], cof[0]))
        if det == 0.0:
            raise ValueError("matrix is singular")
        return Matrix4(tuple(cof[c][r] / det for r in range(4) for c in range(4)))

    def __str__(self) -> str:
        return "\n".join(", ".join(f"{v:g}" for v in row) for row in self._rows())