"""Shared meshes, shaders and textures, kept while anything uses them."""

from __future__ import annotations

import weakref

from noneuclid.mesh import Mesh
from noneuclid.shader import Shader
from noneuclid.texture import Texture

_meshes: weakref.WeakValueDictionary[str, Mesh] = weakref.WeakValueDictionary()
_shaders: weakref.WeakValueDictionary[str, Shader] = weakref.WeakValueDictionary()
_textures: weakref.WeakValueDictionary[str, Texture] = weakref.WeakValueDictionary()


def acquire_mesh(name: str) -> Mesh:
    """Return the live mesh of this name, loading it if none is alive."""
    mesh = _meshes.get(name)
    if mesh is None:
        mesh = Mesh.load(name)
        _meshes[name] = mesh
    return mesh


def acquire_shader(name: str) -> Shader:
    """Return the live shader of this name, loading it if none is alive."""
    shader = _shaders.get(name)
    if shader is None:
        shader = Shader(name)
        _shaders[name] = shader
    return shader


def acquire_texture(name: str, rows: int = 1, cols: int = 1) -> Texture:
    """Return the live texture of this name, loading it if none is alive.

    Textures are keyed by name alone: the grid of a live texture is kept.
    """
    texture = _textures.get(name)
    if texture is None:
        texture = Texture(name, rows, cols)
        _textures[name] = texture
    return texture