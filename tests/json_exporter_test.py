import json
import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from export.JsonExporter import JsonExporter
from geometry.Path import Path
from geometry.PathIterator import WindingRule


@pytest.fixture
def square():
    p = Path(WindingRule.EVEN_ODD)
    p.move_to(0, 0)
    p.line_to(1, 0)
    p.line_to(1, 1)
    p.line_to(0, 1)
    p.close_path()
    return p


def test_path_to_dict(square):
    d = JsonExporter.path_to_dict(square)
    assert d["winding_rule"] == "EVEN_ODD"
    assert [s["type"] for s in d["segments"]] == ["MOVE_TO", "LINE_TO", "LINE_TO", "LINE_TO", "CLOSE"]
    assert d["segments"][2]["coords"] == [1, 1]
    assert d["segments"][4]["coords"] == []


def test_flattened_polylines_are_closed(square):
    d = JsonExporter.flattened_to_dict(square, 0.1)
    assert d["flatness"] == 0.1
    assert d["polylines"] == [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]]


def test_flattened_curve_polyline():
    p = Path()
    p.move_to(0, 0)
    p.quad_to(5, 10, 10, 0)
    polylines = JsonExporter.flattened_to_dict(p, 0.05)["polylines"]
    assert len(polylines) == 1
    assert polylines[0][0] == [0, 0]
    assert polylines[0][-1] == pytest.approx([10, 0])
    assert len(polylines[0]) > 4


def test_export_to_file(tmp_path, square):
    out = tmp_path / "square.json"
    JsonExporter.export(JsonExporter.path_to_dict(square), str(out))
    loaded = json.loads(out.read_text(encoding="utf-8"))
    assert loaded == JsonExporter.path_to_dict(square)


def test_export_to_stdout(capsys, square):
    JsonExporter.export({"value": 1}, "-")
    assert json.loads(capsys.readouterr().out) == {"value": 1}
