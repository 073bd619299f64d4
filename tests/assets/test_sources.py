import os

import pytest

from wren.assets.errors import SourceError
from wren.assets.sources import Directory


def test_directory_reads_bytes(tmp_path):
    (tmp_path / "shaders").mkdir()
    (tmp_path / "shaders" / "a.vert").write_bytes(b"void main() {}")

    source = Directory(tmp_path)

    assert source.load("shaders/a.vert") == b"void main() {}"


def test_directory_modified_tracks_mtime(tmp_path):
    f = tmp_path / "a.glsl"
    f.write_text("x")
    os.utime(f, ns=(1_000_000_000, 2_000_000_000))

    source = Directory(tmp_path)
    assert source.modified("a.glsl") == 2_000_000_000

    os.utime(f, ns=(1_000_000_000, 3_000_000_000))
    assert source.modified("a.glsl") == 3_000_000_000


def test_directory_load_with_metadata(tmp_path):
    f = tmp_path / "a.glsl"
    f.write_text("x")
    os.utime(f, ns=(5, 7_000_000_000))

    data, modified = Directory(tmp_path).load_with_metadata("a.glsl")

    assert data == b"x"
    assert modified == 7_000_000_000


def test_directory_missing_file(tmp_path):
    source = Directory(tmp_path)

    with pytest.raises(SourceError) as excinfo:
        source.modified("nope.png")
    assert excinfo.value.path == "nope.png"
    assert isinstance(excinfo.value.__cause__, OSError)

    with pytest.raises(SourceError):
        source.load("nope.png")
