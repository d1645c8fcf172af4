import json

from truncico.cli.main import main


def test_build_writes_layered_json(tmp_path):
    out = tmp_path / "faces.json"
    assert main(["build", "--truncation", "0.3", "--scale", "50", "--out", str(out)]) == 0
    doc = json.loads(out.read_text(encoding="utf-8"))

    assert doc["parameters"]["truncation"] == 0.3
    assert doc["metrics"]["vertex_count"] == 60
    faces = doc["faces"]
    assert len(faces) == 32
    assert [f["kind"] for f in faces] == ["hex"] * 20 + ["pent"] * 12
    assert [f["source"] for f in faces[:20]] == list(range(20))

    first = faces[0]
    assert len(first["points01"]) == len(first["verts"]) == 6
    assert first["size"][0] == first["width"] * 50
    assert first["translate_z"] == first["plane_offset"] * 50


def test_build_to_stdout(capsys):
    assert main(["build", "-s", "0.25"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert len(doc["faces"]) == 32


def test_degenerate_truncation_exits_with_error(tmp_path):
    out = tmp_path / "faces.json"
    assert main(["build", "--truncation", "1.0", "--out", str(out)]) == 1
    assert not out.exists()


def test_info(capsys):
    assert main(["info", "--truncation", "0.5"]) == 0
    text = capsys.readouterr().out
    assert "base: V=12 E=30 F=20" in text
    assert "faces: 32 (pent=12, hex=20)" in text
    assert "unique vertices: 30" in text


def test_preview_writes_png(tmp_path):
    out = tmp_path / "preview.png"
    assert main(["preview", "--out", str(out)]) == 0
    assert out.stat().st_size > 0
