from __future__ import annotations

import json
from pathlib import Path

import pytest

from heatmap.errors import (
    HeatmapError,
    InputReadError,
    OutputWriteError,
    ReadingCountError,
    ReadingParseError,
)
from heatmap.models import FeatureStyle
from heatmap.services.classifier import classify
from heatmap.services.features import assemble_features
from heatmap.services.grid import build_grid
from heatmap.services.parser import parse_readings, read_input
from heatmap.services.writer import write_document


def sample_readings() -> list[int]:
    return [(i * 37) % 300 - 20 for i in range(100)]


# --- Parser ---

def test_parse_trims_whitespace() -> None:
    assert parse_readings(" 1,2 ,\n3\t, -4 \n") == [1, 2, 3, -4]


def test_parse_rejects_non_integer_token() -> None:
    with pytest.raises(ReadingParseError) as exc:
        parse_readings("1, 2, abc, 4")
    assert "Reading 3" in str(exc.value)
    assert "abc" in str(exc.value)


def test_parse_accepts_trailing_comma() -> None:
    assert parse_readings("1, 2, 3,") == [1, 2, 3]
    assert parse_readings("1, 2, 3,,\n") == [1, 2, 3]


def test_parse_rejects_empty_token_in_the_middle() -> None:
    with pytest.raises(ReadingParseError) as exc:
        parse_readings("1,,2")
    assert "Reading 2" in str(exc.value)


def test_parse_rejects_floats() -> None:
    with pytest.raises(ReadingParseError):
        parse_readings("1.5, 2")


@pytest.mark.parametrize("token", ["1_000", "0x10", "1e3", "+", "- 5"])
def test_parse_rejects_tokens_int_would_accept_or_mangle(token: str) -> None:
    with pytest.raises(ReadingParseError):
        parse_readings(f"{token}, 2")


def test_parse_accepts_signed_tokens() -> None:
    assert parse_readings("+5, -7, 007") == [5, -7, 7]


def test_parse_rejects_empty_input() -> None:
    with pytest.raises(ReadingParseError):
        parse_readings(",")
    with pytest.raises(ReadingParseError):
        parse_readings("  \n")


def test_read_input_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputReadError):
        read_input(tmp_path / "nope.txt")


def test_read_input_directory(tmp_path: Path) -> None:
    with pytest.raises(InputReadError):
        read_input(tmp_path)


# --- Feature assembly ---

def test_features_carry_fixed_styling() -> None:
    document = assemble_features(build_grid(), sample_readings())
    assert len(document.features) == 100
    for feature in document.to_geojson()["features"]:
        props = feature["properties"]
        assert props["fill"] == props["rgb-string"]
        assert props["fill-opacity"] == 0.75
        assert props["stroke-width"] == 2
        assert props["stroke-opacity"] == 1
        assert feature["type"] == "Feature"
        assert feature["geometry"]["type"] == "Polygon"


def test_parse_then_assemble_matches_direct_classification() -> None:
    readings = sample_readings()
    text = ", ".join(str(v) for v in readings)
    document = assemble_features(build_grid(), parse_readings(text))
    assert document.colors() == [classify(v) for v in readings]


def test_too_few_readings() -> None:
    with pytest.raises(ReadingCountError) as exc:
        assemble_features(build_grid(), list(range(99)))
    assert exc.value.expected == 100
    assert exc.value.actual == 99
    assert isinstance(exc.value, ReadingParseError)


def test_extra_readings_are_ignored() -> None:
    readings = sample_readings() + [0, 0, 0]
    document = assemble_features(build_grid(), readings)
    assert len(document.features) == 100
    assert document.features[-1].reading == readings[99]


def test_custom_style_by_alias() -> None:
    style = FeatureStyle(**{"fill-opacity": 0.5, "stroke-width": 1, "stroke-opacity": 0})
    document = assemble_features(build_grid(), sample_readings(), style=style)
    props = document.to_geojson()["features"][0]["properties"]
    assert props["fill-opacity"] == 0.5
    assert props["stroke-width"] == 1
    assert props["stroke-opacity"] == 0


def test_geometry_matches_cell_ring() -> None:
    cells = build_grid()
    document = assemble_features(cells, sample_readings())
    data = json.loads(document.to_json())
    assert data["type"] == "FeatureCollection"
    assert data["features"][42]["geometry"]["coordinates"] == [cells[42].ring()]


# --- Writer ---

def test_write_document_single_line(tmp_path: Path) -> None:
    document = assemble_features(build_grid(), sample_readings())
    out = write_document(document, tmp_path / "heatmap.geojson")

    text = out.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert text.count("\n") == 1
    assert len(json.loads(text)["features"]) == 100
    assert list(tmp_path.iterdir()) == [out]


def test_write_document_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "heatmap.geojson"
    target.write_text("old", encoding="utf-8")
    write_document(assemble_features(build_grid(), sample_readings()), target)
    assert json.loads(target.read_text(encoding="utf-8"))["type"] == "FeatureCollection"


def test_failed_write_leaves_nothing_behind(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "heatmap.geojson"
    target.write_text("old", encoding="utf-8")

    def boom(src, dst):
        raise PermissionError("read-only")

    monkeypatch.setattr("heatmap.services.writer.os.replace", boom)
    with pytest.raises(OutputWriteError):
        write_document(assemble_features(build_grid(), sample_readings()), target)

    assert target.read_text(encoding="utf-8") == "old"
    assert list(tmp_path.iterdir()) == [target]


def test_write_into_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(OutputWriteError) as exc:
        write_document(assemble_features(build_grid(), sample_readings()), tmp_path / "missing" / "out.geojson")
    assert isinstance(exc.value, HeatmapError)
