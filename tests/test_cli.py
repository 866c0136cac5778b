from __future__ import annotations

import json
from pathlib import Path

from showdex_hydro.cli import main

HEADER = "sdx,1,1.2.6,2024-06-02#"


def test_cli_hydrate_prints_json(capsys) -> None:
    assert main(["hydrate", HEADER + "cs:dark;cd:oa~overlay"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["color_scheme"] == "dark"
    assert data["calcdex"]["open_as"] == "overlay"
    assert data["calcdex"]["default_auto_select"]["auth"] is True


def test_cli_dehydrate_json_file(tmp_path: Path, capsys) -> None:
    src = tmp_path / "settings.json"
    src.write_text(json.dumps({"color_scheme": "dark", "hellodex": {"focus_rooms_room": True}}), encoding="utf-8")

    assert main(["dehydrate", str(src)]) == 0
    out = capsys.readouterr().out.strip()
    assert out.endswith("#cs:dark;hd:fr~y")


def test_cli_header(capsys) -> None:
    assert main(["--indent", "0", "header", HEADER + "cs:dark"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["descriptor"] == "sdx"
    assert data["schema_version"] == 1
    assert data["tokens"] == 1


def test_cli_save_then_load(tmp_path: Path, capsys) -> None:
    src = tmp_path / "settings.json"
    src.write_text(json.dumps({"calcdex": {"nhko_labels": ["a", "b"]}}), encoding="utf-8")

    assert main(["--home", str(tmp_path), "save", str(src)]) == 0
    capsys.readouterr()

    assert main(["--home", str(tmp_path), "load"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["calcdex"]["nhko_labels"] == ["a", "b"]

    assert main(["--home", str(tmp_path), "load", "--raw"]) == 0
    assert capsys.readouterr().out.strip().endswith("cd:nl~a,b")


def test_cli_bad_json_exits_with_error(tmp_path: Path, capsys) -> None:
    src = tmp_path / "broken.json"
    src.write_text("{nope", encoding="utf-8")

    assert main(["dehydrate", str(src)]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_log_file_receives_debug_records(tmp_path: Path, capsys) -> None:
    import logging

    log_path = tmp_path / "logs" / "hydro.log"
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level

    try:
        assert main(["--log-file", str(log_path), "-v", "hydrate", HEADER + "zz:1"]) == 0
        for handler in root.handlers:
            handler.flush()
    finally:
        for handler in list(root.handlers):
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)

    capsys.readouterr()
    assert "Ignoring unknown root setting 'zz'" in log_path.read_text(encoding="utf-8")
