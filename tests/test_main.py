from __future__ import annotations

import pathlib

import pytest

import main as entry


def test_main_prints_reference_line(capsys) -> None:
    assert entry.main([]) == 0
    out = capsys.readouterr().out
    assert out == "Pressure: 99414.171875Pa, Temperature: 23.45C, Humidity: 0.0\n"


@pytest.mark.parametrize(
    "text",
    [
        'calibration: "00 01"\nmeasurement: "00"\n',
        "- a\n- b\n",
        "decoder: [unclosed\n",
        'decoder:\n  calibration: "' + "00 " * 26 + '"\n  measurement: [300, 1, 0, 0, 0, 0, 0, 0]\n',
        "",
    ],
    ids=["short-blocks", "not-a-mapping", "yaml-syntax", "element-above-255", "empty-file"],
)
def test_main_reports_bad_config(tmp_path: pathlib.Path, capsys, text: str) -> None:
    cfg = tmp_path / "decoder.yaml"
    cfg.write_text(text, encoding="utf-8")
    assert entry.main(["--config", str(cfg)]) == 1
    assert capsys.readouterr().out == ""


def test_main_reports_missing_config(tmp_path: pathlib.Path, capsys) -> None:
    assert entry.main(["--config", str(tmp_path / "absent.yaml")]) == 1
    assert capsys.readouterr().out == ""
