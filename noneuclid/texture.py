"""Bitmap textures, optionally split into a grid of array layers."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

HEADER_SIZE = 54
_WIDTH_OFFSET = 18


@dataclass(frozen=True)
class BitmapImage:
    """Decoded 24-bit pixels in BGR order, grouped tile by tile."""

    width: int
    height: int
    rows: int
    cols: int
    pixels: bytes

    @property
    def layers(self) -> int:
        return self.rows * self.cols

    @property
    def is_3d(self) -> bool:
        return self.rows > 1 or self.cols > 1


def _check_grid(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ValueError("texture grid needs at least one row and one column")


def decode_bmp(data: bytes, rows: int = 1, cols: int = 1) -> BitmapImage:
    """Decode an uncompressed 24-bit bitmap into ``rows * cols`` contiguous tiles.

    Each tile's pixels are stored together so the result can be uploaded as
    the layers of a texture array.
    """
    _check_grid(rows, cols)
    if len(data) < HEADER_SIZE:
        raise ValueError("truncated bitmap header")
    width, height = struct.unpack_from("<ii", data, _WIDTH_OFFSET)
    if width <= 0 or height <= 0:
        raise ValueError(f"unsupported bitmap size {width}x{height}")
    if width % cols or height % rows:
        raise ValueError(f"{width}x{height} bitmap does not split into {rows}x{cols} tiles")

    block_w = width // cols
    block_h = height // rows
    padding = (width * 3) % 4
    stride = width * 3 + (4 - padding if padding else 0)
    if len(data) < HEADER_SIZE + stride * height:
        raise ValueError("truncated bitmap pixel data")

    img = bytearray(width * height * 3)
    offset = HEADER_SIZE
    for y in range(height - 1, -1, -1):
        row, ty = divmod(y, block_h)
        for x in range(width):
            col, tx = divmod(x, block_w)
            dst = ((row * cols + col) * block_w * block_h + ty * block_w + tx) * 3
            src = offset + x * 3
            img[dst:dst + 3] = data[src:src + 3]
        offset += stride
    return BitmapImage(width, height, rows, cols, bytes(img))


class Texture:
    """A bitmap loaded from disk and uploaded to the GPU on first use."""

    def __init__(
        self,
        name: str,
        rows: int = 1,
        cols: int = 1,
        base_dir: Union[str, Path] = "Textures",
    ) -> None:
        _check_grid(rows, cols)
        self.name = name
        self.rows = rows
        self.cols = cols
        self.is_3d = rows > 1 or cols > 1
        self.path = Path(base_dir) / name
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            self.image: Optional[BitmapImage] = None
        else:
            self.image = decode_bmp(data, rows, cols)
        self._tex_id: Optional[int] = None

    def _upload(self, gl) -> None:
        image = self.image
        if image is None:
            self._tex_id = 0
            return
        handle = gl.GLuint()
        gl.glGenTextures(1, handle)
        self._tex_id = handle.value
        pixels = (gl.GLubyte * len(image.pixels)).from_buffer_copy(image.pixels)
        if self.is_3d:
            target = gl.GL_TEXTURE_2D_ARRAY
            gl.glBindTexture(target, self._tex_id)
            gl.glTexParameteri(target, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_NEAREST)
            gl.glTexParameteri(target, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
            gl.glTexParameteri(target, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
            gl.glTexParameteri(target, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
            gl.glTexImage3D(
                target, 0, gl.GL_RGB8,
                image.width // self.rows, image.height // self.cols, image.layers,
                0, gl.GL_BGR, gl.GL_UNSIGNED_BYTE, pixels,
            )
            gl.glGenerateMipmap(target)
        else:
            target = gl.GL_TEXTURE_2D
            gl.glBindTexture(target, self._tex_id)
            gl.glTexParameteri(target, gl.GL_TEXTURE_MIN_FILTER, gl.GL_NEAREST)
            gl.glTexParameteri(target, gl.GL_TEXTURE_MAG_FILTER, gl.GL_NEAREST)
            gl.glTexParameteri(target, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
            gl.glTexParameteri(target, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
            gl.glTexImage2D(
                target, 0, gl.GL_RGB8, image.width, image.height,
                0, gl.GL_BGR, gl.GL_UNSIGNED_BYTE, pixels,
            )

    def use(self) -> None:
        """Bind this texture, uploading it first if needed."""
        from pyglet import gl

        if self._tex_id is None:
            self._upload(gl)
        target = gl.GL_TEXTURE_2D_ARRAY if self.is_3d else gl.GL_TEXTURE_2D
        gl.glBindTexture(target, self._tex_id)