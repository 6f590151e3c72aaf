"""Triangle meshes read from a Wavefront OBJ dialect with collider records."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from noneuclid.collider import Collider
from noneuclid.vector import Vector3

NUM_VBOS = 3

_Corner = tuple[int, int]


def _ints(text: str, needed: int) -> list[int]:
    try:
        values = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"bad index in {text!r}") from exc
    if len(values) < needed:
        raise ValueError(f"expected {needed} indices in {text!r}")
    return values


def _lookup(palette: Sequence, index: int, what: str):
    if index < 1 or index > len(palette):
        raise ValueError(f"{what} index {index} out of range 1..{len(palette)}")
    return palette[index - 1]


class Mesh:
    """Flat per-vertex arrays ready for upload, plus the mesh's colliders."""

    def __init__(
        self,
        verts: Optional[list[float]] = None,
        uvs: Optional[list[float]] = None,
        normals: Optional[list[float]] = None,
        colliders: Optional[list[Collider]] = None,
        uv_size: int = 2,
    ) -> None:
        self.verts = verts if verts is not None else []
        self.uvs = uvs if uvs is not None else []
        self.normals = normals if normals is not None else []
        self.colliders = colliders if colliders is not None else []
        self.uv_size = uv_size
        self._vao = None
        self._vbos = None

    @property
    def vertex_count(self) -> int:
        return len(self.verts) // 3

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Mesh:
        """Parse OBJ-style lines: ``v``, ``vt``, ``f`` and ``c`` (collider) records."""
        vert_palette: list[Vector3] = []
        uv_palette: list[tuple[float, ...]] = []
        is_3d_tex = False
        mesh = cls()

        for raw in lines:
            line = raw.rstrip("\r\n")
            if line.startswith("v "):
                x, y, z = (float(t) for t in line[2:].split()[:3])
                vert_palette.append(Vector3(x, y, z))
            elif line.startswith("vt "):
                values = [float(t) for t in line[3:].split()[:3]]
                if len(values) < 2:
                    raise ValueError(f"texture coordinate needs two values: {line!r}")
                if len(values) == 3:
                    is_3d_tex = True
                uv_palette.append(tuple(values))
            elif line.startswith("c "):
                if line[2:3] == "*":
                    n = len(vert_palette)
                    indices = [n - 2, n - 1, n]
                else:
                    indices = _ints(line[2:], 3)[:3]
                corners = [_lookup(vert_palette, i, "vertex") for i in indices]
                mesh.colliders.append(Collider(*corners))
            elif line.startswith("f "):
                corners, is_quad = cls._parse_face(line, len(vert_palette), len(uv_palette))
                mesh._add_face(vert_palette, uv_palette, corners[:3])
                if is_quad:
                    mesh._add_face(vert_palette, uv_palette, [corners[2], corners[3], corners[0]])

        mesh.uv_size = 3 if is_3d_tex else 2
        return mesh

    @staticmethod
    def _parse_face(line: str, v_count: int, t_count: int) -> tuple[list[_Corner], bool]:
        slashes = [i for i, ch in enumerate(line) if ch == "/"]
        double_slash = any(b - a == 1 for a, b in zip(slashes, slashes[1:]))
        body = line[2:].replace("/", " ")
        num_slashes = len(slashes)

        if line[2:3] == "*":
            if num_slashes:
                raise ValueError(f"wildcard face cannot carry indices: {line!r}")
            if line[3:4] == "*":
                return [(v_count - k, t_count - k) for k in (3, 2, 1, 0)], True
            return [(v_count - k, t_count - k) for k in (2, 1, 0)], False

        if num_slashes == 0:
            values = _ints(body, 3)
            is_quad = len(values) >= 4
            return [(v, v) for v in values[:4 if is_quad else 3]], is_quad
        if num_slashes in (3, 4):
            count = num_slashes
            values = _ints(body, count * 2)
            return [(values[2 * i], values[2 * i + 1]) for i in range(count)], count == 4
        if num_slashes in (6, 8):
            count = num_slashes // 2
            if double_slash:
                values = _ints(body, count * 2)
                return [(values[2 * i], values[2 * i]) for i in range(count)], count == 4
            values = _ints(body, count * 3)
            return [(values[3 * i], values[3 * i + 1]) for i in range(count)], count == 4
        raise ValueError(f"unsupported face layout: {line!r}")

    def _add_face(
        self,
        vert_palette: Sequence[Vector3],
        uv_palette: Sequence[tuple[float, ...]],
        corners: Sequence[_Corner],
    ) -> None:
        points = [_lookup(vert_palette, v, "vertex") for v, _ in corners]
        if uv_palette:
            coords = [_lookup(uv_palette, t, "texture") for _, t in corners]
        else:
            coords = [(0.0, 0.0)] * 3
        v1, v2, v3 = points
        normal = (v2 - v1).cross(v3 - v1).normalized()
        for point, uv in zip(points, coords):
            self.verts.extend(point)
            self.uvs.extend(uv)
            self.normals.extend(normal)

    @classmethod
    def load(cls, name: str, base_dir: Union[str, Path] = "Meshes") -> Mesh:
        """Read ``base_dir/name``; a missing file gives an empty mesh."""
        path = Path(base_dir) / name
        try:
            with path.open(encoding="utf-8") as handle:
                return cls.from_lines(handle)
        except FileNotFoundError:
            return cls()

    def _upload(self) -> None:
        from pyglet import gl

        vao = gl.GLuint()
        gl.glGenVertexArrays(1, vao)
        gl.glBindVertexArray(vao)
        vbos = (gl.GLuint * NUM_VBOS)()
        gl.glGenBuffers(NUM_VBOS, vbos)
        layouts = ((self.verts, 3), (self.uvs, self.uv_size), (self.normals, 3))
        for index, (data, size) in enumerate(layouts):
            gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbos[index])
            array = (gl.GLfloat * len(data))(*data)
            gl.glBufferData(gl.GL_ARRAY_BUFFER, len(data) * 4, array, gl.GL_STATIC_DRAW)
            gl.glEnableVertexAttribArray(index)
            gl.glVertexAttribPointer(index, size, gl.GL_FLOAT, gl.GL_FALSE, 0, 0)
        self._vao = vao
        self._vbos = vbos

    def draw(self) -> None:
        from pyglet import gl

        if self._vao is None:
            self._upload()
        gl.glBindVertexArray(self._vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, self.vertex_count)

    def release(self) -> None:
        """Free the GPU buffers, if they were created."""
        if self._vao is None:
            return
        from pyglet import gl

        gl.glDeleteBuffers(NUM_VBOS, self._vbos)
        gl.glDeleteVertexArrays(1, self._vao)
        self._vao = None
        self._vbos = None