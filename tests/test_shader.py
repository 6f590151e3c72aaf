from noneuclid.shader import Shader, vertex_attributes

VERT = (
    "#version 150\n"
    "in vec3 in_pos;\n"
    "in vec2 in_uv;\n"
    "uniform mat4 mvp;\n"
    "in vec3 in_normal;\n"
    "void main() { gl_Position = mvp * vec4(in_pos, 1); }\n"
)


def test_vertex_attributes_in_order():
    assert vertex_attributes(VERT) == ["in_pos", "in_uv", "in_normal"]


def test_vertex_attributes_ignore_indented_and_first_line():
    source = "in vec3 first;\n  in vec3 indented;\nout vec2 uv;\n"
    assert vertex_attributes(source) == []


def test_vertex_attributes_empty_source():
    assert vertex_attributes("") == []


def test_vertex_attributes_with_qualifier():
    source = "#version 150\nin highp vec4 colour;\n"
    assert vertex_attributes(source) == ["colour"]


def test_shader_reads_sources(tmp_path):
    (tmp_path / "basic.vert").write_text(VERT)
    (tmp_path / "basic.frag").write_text("void main() {}\n")
    shader = Shader("basic", base_dir=tmp_path)
    assert shader.vertex_source == VERT
    assert shader.fragment_source == "void main() {}\n"
    assert shader.attribs == ["in_pos", "in_uv", "in_normal"]
    assert shader.vertex_path == tmp_path / "basic.vert"
    assert shader.fragment_path == tmp_path / "basic.frag"


def test_shader_missing_files(tmp_path):
    shader = Shader("absent", base_dir=tmp_path)
    assert shader.vertex_source == ""
    assert shader.fragment_source == ""
    assert shader.attribs == []