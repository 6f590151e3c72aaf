import gc

from noneuclid.resources import acquire_mesh, acquire_shader, acquire_texture

TRIANGLE = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"


def test_mesh_is_shared(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = acquire_mesh("shared_missing.obj")
    second = acquire_mesh("shared_missing.obj")
    assert first is second


def test_mesh_reloaded_after_release(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    empty = acquire_mesh("later.obj")
    assert empty.vertex_count == 0
    del empty
    gc.collect()
    (tmp_path / "Meshes").mkdir()
    (tmp_path / "Meshes" / "later.obj").write_text(TRIANGLE)
    loaded = acquire_mesh("later.obj")
    assert loaded.vertex_count == 3


def test_mesh_loaded_from_meshes_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Meshes").mkdir()
    (tmp_path / "Meshes" / "tri.obj").write_text(TRIANGLE)
    mesh = acquire_mesh("tri.obj")
    assert mesh.verts == [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]


def test_shader_is_shared(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = acquire_shader("shared_shader")
    assert acquire_shader("shared_shader") is first
    assert acquire_shader("other_shader") is not first


def test_shader_reads_from_shaders_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Shaders").mkdir()
    (tmp_path / "Shaders" / "flat.vert").write_text("#version 150\nin vec3 pos;\n")
    shader = acquire_shader("flat")
    assert shader.attribs == ["pos"]


def test_texture_keyed_by_name_only(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = acquire_texture("grid.bmp", 1, 1)
    second = acquire_texture("grid.bmp", 4, 4)
    assert second is first
    assert second.is_3d is False