import pytest

from nbrtool.shader_loader import ShaderLoadError, load_shader

SHADER_SOURCE = (
    "#version 460 core\n"
    "layout (location = 0) in vec3 a_pos;\n"
    "void main() { gl_Position = vec4(a_pos, 1.0); }\n"
    "#version 460 core\n"
    "out vec4 frag_color;\n"
    "void main() { frag_color = vec4(1.0); }\n"
)


def test_loads_whole_source(tmp_path):
    path = tmp_path / "basic.glsl"
    path.write_text(SHADER_SOURCE, encoding="utf-8")
    assert load_shader(path) == SHADER_SOURCE


def test_accepts_string_path(tmp_path):
    path = tmp_path / "basic.glsl"
    path.write_text(SHADER_SOURCE, encoding="utf-8")
    assert load_shader(str(path)) == SHADER_SOURCE


def test_keeps_line_endings(tmp_path):
    path = tmp_path / "crlf.glsl"
    path.write_bytes(b"void main() {}\r\n// end\r\n")
    assert load_shader(path) == "void main() {}\r\n// end\r\n"


def test_empty_file_gives_empty_source(tmp_path):
    path = tmp_path / "empty.glsl"
    path.write_bytes(b"")
    assert load_shader(path) == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(ShaderLoadError):
        load_shader(tmp_path / "missing.glsl")


def test_directory_raises(tmp_path):
    with pytest.raises(ShaderLoadError):
        load_shader(tmp_path)


def test_undecodable_file_raises(tmp_path):
    path = tmp_path / "bad.glsl"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ShaderLoadError):
        load_shader(path)