from __future__ import annotations

import json

import pytest

from scripts import render_layout


def _write_catalog(tmp_path) -> str:
    path = tmp_path / "medals.json"
    path.write_text(
        json.dumps(
            {
                "medals": [
                    {"id": "bronze", "type": "pistol"},
                    {
                        "id": "silver",
                        "type": "pistol",
                        "prerequisites": [{"type": "medal", "medalId": "bronze", "yearOffset": 2}],
                    },
                ]
            }
        ),
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture(autouse=True)
def _no_env_catalog(monkeypatch) -> None:
    monkeypatch.delenv("SKILLTREE_MEDAL_CATALOG", raising=False)
    monkeypatch.delenv("SKILLTREE_DEFAULT_LAYOUT", raising=False)


def test_prints_layout_json(tmp_path, capsys) -> None:
    exit_code = render_layout.main(["--catalog", _write_catalog(tmp_path), "--year-width", "100"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["connections"][0]["from"] == "bronze"
    assert payload["connections"][0]["to"] == "silver"
    positions = {node["medal_id"]: node["position"]["x"] for node in payload["nodes"]}
    assert positions == {"bronze": 0, "silver": 200}


def test_unknown_preset_falls_back_to_default(tmp_path, capsys) -> None:
    exit_code = render_layout.main(["--catalog", _write_catalog(tmp_path), "--preset", "spiral"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["meta"]["kind"] == "timeline"


def test_missing_catalog_argument_fails() -> None:
    assert render_layout.main([]) == 1


def test_unreadable_catalog_fails(tmp_path, capsys) -> None:
    assert render_layout.main(["--catalog", str(tmp_path / "missing.json")]) == 1
    assert capsys.readouterr().out == ""


def test_non_positive_option_fails(tmp_path, capsys) -> None:
    assert render_layout.main(["--catalog", _write_catalog(tmp_path), "--year-width", "0"]) == 1
    assert capsys.readouterr().out == ""
