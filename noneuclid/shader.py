"""GLSL programs built from a vertex and a fragment source file."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from noneuclid.vector import Matrix4


def vertex_attributes(source: str) -> list[str]:
    """Names of the ``in`` declarations that start a line, in order."""
    names: list[str] = []
    ix = 0
    while True:
        ix = source.find("\nin ", ix)
        if ix < 0:
            break
        end = source.find(";", ix)
        if end < 0:
            break
        start = source.rfind(" ", ix, end)
        names.append(source[start + 1:end])
        ix = end
    return names


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def _c_string(gl, text: str):
    raw = text.encode("utf-8") + b"\0"
    return (gl.GLchar * len(raw)).from_buffer_copy(raw)


class Shader:
    """A shader program whose sources are read now and compiled on first use."""

    def __init__(self, name: str, base_dir: Union[str, Path] = "Shaders") -> None:
        self.name = name
        self.vertex_path = Path(base_dir) / f"{name}.vert"
        self.fragment_path = Path(base_dir) / f"{name}.frag"
        self.vertex_source = _read_text(self.vertex_path)
        self.fragment_source = _read_text(self.fragment_path)
        self.attribs = vertex_attributes(self.vertex_source)
        self._prog_id: Optional[int] = None
        self._stages: list[Any] = []
        self._vert_id = 0
        self._frag_id = 0
        self._mvp_id = -1
        self._mv_id = -1

    def _compile(self, source: str, kind: str, path: Path) -> int:
        from pyglet.graphics.shader import Shader as StageShader
        from pyglet.graphics.shader import ShaderException

        try:
            stage = StageShader(source, kind)
        except ShaderException as exc:
            Path(f"{path}.log").write_text(str(exc), encoding="utf-8")
            return 0
        self._stages.append(stage)
        return stage.id

    def _build(self) -> None:
        from pyglet import gl

        self._vert_id = self._compile(self.vertex_source, "vertex", self.vertex_path)
        self._frag_id = self._compile(self.fragment_source, "fragment", self.fragment_path)
        prog = gl.glCreateProgram()
        gl.glAttachShader(prog, self._vert_id)
        gl.glAttachShader(prog, self._frag_id)
        for index, attrib in enumerate(self.attribs):
            gl.glBindAttribLocation(prog, index, _c_string(gl, attrib))
        gl.glLinkProgram(prog)

        linked = gl.GLint(0)
        gl.glGetProgramiv(prog, gl.GL_LINK_STATUS, linked)
        if not linked.value:
            length = gl.GLint(0)
            gl.glGetProgramiv(prog, gl.GL_INFO_LOG_LENGTH, length)
            log = (gl.GLchar * max(length.value, 1))()
            gl.glGetProgramInfoLog(prog, length, length, log)
            Path(f"{self.vertex_path}.link.log").write_bytes(log.raw[:length.value])
            self._prog_id = 0
            return

        self._prog_id = prog
        self._mvp_id = gl.glGetUniformLocation(prog, _c_string(gl, "mvp"))
        self._mv_id = gl.glGetUniformLocation(prog, _c_string(gl, "mv"))

    def use(self) -> None:
        """Make this program current, compiling it first if needed."""
        from pyglet import gl

        if self._prog_id is None:
            self._build()
        gl.glUseProgram(self._prog_id)

    def set_mvp(self, mvp: Optional[Matrix4], mv: Optional[Matrix4]) -> None:
        """Upload the row-major ``mvp`` and ``mv`` uniforms; None leaves one unchanged."""
        from pyglet import gl

        if self._prog_id is None:
            self._build()
        if mvp is not None:
            gl.glUniformMatrix4fv(self._mvp_id, 1, gl.GL_TRUE, (gl.GLfloat * 16)(*mvp.m))
        if mv is not None:
            gl.glUniformMatrix4fv(self._mv_id, 1, gl.GL_TRUE, (gl.GLfloat * 16)(*mv.m))

    def release(self) -> None:
        """Delete the GPU program and shaders, if they were created."""
        if self._prog_id is None:
            return
        from pyglet import gl

        gl.glDetachShader(self._prog_id, self._vert_id)
        gl.glDetachShader(self._prog_id, self._frag_id)
        gl.glDeleteProgram(self._prog_id)
        self._stages.clear()
        self._prog_id = None