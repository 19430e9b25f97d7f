import pytest

from sceneforge.files import read_binary_file, read_text_file


def test_text_round_trip(tmp_path):
    path = tmp_path / "shader.vert"
    content = "void main()\n{\n\tgl_Position = vec4(0.0);\n}\n"
    path.write_text(content, encoding="utf-8")
    assert read_text_file(path) == content


def test_text_accepts_string_path(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("hello", encoding="utf-8")
    assert read_text_file(str(path)) == "hello"


def test_binary_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    payload = bytes(range(256))
    path.write_bytes(payload)
    assert read_binary_file(path) == payload


def test_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert read_binary_file(path) == b""
    assert read_text_file(path) == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text_file(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        read_binary_file(tmp_path / "missing.bin")