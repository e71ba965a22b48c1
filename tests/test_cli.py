import struct

import pytest
from PIL import Image

from nbrtool.cli import main
from nbrtool.nbr_format import NBR_VALID_IDENTIFIER, NBRHeader
from nbrtool.resources import ResourceType

HEADER = struct.Struct("<Bhhh")


def read_header(data):
    return NBRHeader(*HEADER.unpack_from(data, 0))


@pytest.fixture
def red_png(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGB", (2, 3), (255, 0, 0)).save(path)
    return path


def test_texture_conversion_writes_nbr(tmp_path, red_png, capsys):
    out = tmp_path / "out"
    out.mkdir()
    assert main(["-rt", "TEXTURE", str(red_png), str(out)]) == 0

    data = (out / "red.nbr").read_bytes()
    header = read_header(data)
    assert header.is_valid()
    assert data[0] == NBR_VALID_IDENTIFIER
    assert header.resource_type == ResourceType.TEXTURE

    width, height, channels = struct.unpack_from("<IIb", data, HEADER.size)
    assert (width, height, channels) == (2, 3, 3)
    pixels = data[HEADER.size + struct.calcsize("<IIb"):]
    with Image.open(red_png) as image:
        assert pixels == image.convert("RGBA").tobytes()
    assert "Converting" in capsys.readouterr().out


def test_shader_conversion_keeps_source(tmp_path, capsys):
    shader = tmp_path / "basic.glsl"
    text = "#version 460 core\nvoid main() {}\n"
    shader.write_text(text)
    assert main(["--resource-type", "SHADER", str(shader), str(tmp_path)]) == 0

    data = (tmp_path / "basic.nbr").read_bytes()
    assert read_header(data).resource_type == ResourceType.SHADER
    (length,) = struct.unpack_from("<I", data, HEADER.size)
    assert data[HEADER.size + 4:].decode("utf-8") == text
    assert length == len(text.encode("utf-8"))
    assert "Converting shader" in capsys.readouterr().out


def test_cubemap_conversion_stores_every_face(tmp_path):
    faces = tmp_path / "sky"
    faces.mkdir()
    for index in range(6):
        Image.new("RGB", (4, 4), (index, 0, 0)).save(faces / f"face{index}.png")
    out = tmp_path / "out"
    out.mkdir()
    assert main(["-rt", "CUBEMAP", str(faces), str(out)]) == 0

    data = (out / "sky.nbr").read_bytes()
    assert read_header(data).resource_type == ResourceType.CUBEMAP
    width, height, channels, count = struct.unpack_from("<IIbB", data, HEADER.size)
    assert (width, height, channels, count) == (4, 4, 4, 6)
    body = data[HEADER.size + struct.calcsize("<IIbB"):]
    assert len(body) == width * height * channels * count


def test_directory_of_textures(tmp_path, red_png):
    images = tmp_path / "images"
    images.mkdir()
    Image.new("RGBA", (1, 1)).save(images / "a.png")
    Image.new("RGBA", (1, 1)).save(images / "b.png")
    out = tmp_path / "out"
    out.mkdir()
    assert main(["-d", "-rt", "TEXTURE", str(images), str(out)]) == 0
    assert sorted(p.name for p in out.iterdir()) == ["a.nbr", "b.nbr"]


def test_no_arguments_prints_error_and_help(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "No arguments passed" in captured.err
    assert "[Usage]: nbr" in captured.out


def test_help_prints_usage(capsys):
    assert main(["--help"]) == 1
    assert "[Usage]: nbr" in capsys.readouterr().out


def test_unknown_resource_type_reported(capsys):
    assert main(["-rt", "SOUND", "a.wav"]) == 1
    assert "'SOUND'" in capsys.readouterr().err


def test_invalid_image_extension_fails_without_output(tmp_path, capsys):
    bad = tmp_path / "notes.txt"
    bad.write_text("hello")
    out = tmp_path / "out"
    out.mkdir()
    assert main(["-rt", "TEXTURE", str(bad), str(out)]) == 1
    assert "Invalid image file" in capsys.readouterr().err
    assert list(out.iterdir()) == []


def test_model_type_writes_nothing(tmp_path, red_png):
    out = tmp_path / "out"
    out.mkdir()
    assert main(["-rt", "MODEL", str(red_png), str(out)]) == 0
    assert list(out.iterdir()) == []