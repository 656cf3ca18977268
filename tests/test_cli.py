from oaspec.cli import main

SPEC = """
openapi: 3.0.3
info:
  title: Pet Store
  version: 1.0.0
components:
  schemas:
    Pet:
      type: object
      properties:
        name:
          type: string
    Error:
      type: string
"""


def test_prints_schemas_in_order(tmp_path, capsys):
    path = tmp_path / "spec.yaml"
    path.write_text(SPEC, encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ""
    assert lines[1].startswith("'Pet': ActualType(")
    assert lines[2] == ""
    assert lines[3].startswith("'Error': ActualType(")
    assert len(lines) == 4


def test_default_file_name(tmp_path, capsys, monkeypatch):
    (tmp_path / "openapi.yaml").write_text(SPEC, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert "'Pet': " in capsys.readouterr().out


def test_no_components_prints_nothing(tmp_path, capsys):
    path = tmp_path / "spec.yaml"
    path.write_text("openapi: 3.0.3\ninfo: {title: T, version: v}\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == ""


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.yaml")]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_invalid_document_fails(tmp_path, capsys):
    path = tmp_path / "spec.yaml"
    path.write_text("openapi: 3.0.3\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "info" in capsys.readouterr().err