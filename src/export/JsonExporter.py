import json
import sys
from dataclasses import dataclass
from typing import Any, Dict, List
from geometry.Path import Path
from geometry.PathIterator import PathIterator, SegmentType


@dataclass
class JsonExporter:

    @staticmethod
    def path_to_dict(path: Path) -> Dict[str, Any]:
        """{ "winding_rule": str, "segments": [ {"type": str, "coords": [...]}, ... ] }"""
        it = path.path_iterator()
        return {
            "winding_rule": it.winding_rule().name,
            "segments": [{"type": seg.type.name, "coords": list(seg.coords)} for seg in it],
        }

    @staticmethod
    def polylines(it: PathIterator) -> List[List[List[float]]]:
        """Split a flattened segment stream into polylines of [x, y] points.

        A CLOSE repeats the subpath's first point so the polyline is closed.
        """
        polylines: List[List[List[float]]] = []
        current: List[List[float]] = []
        for seg in it:
            if seg.type == SegmentType.MOVE_TO:
                if len(current) >= 2:
                    polylines.append(current)
                current = [list(seg.coords)]
            elif seg.type == SegmentType.LINE_TO:
                current.append(list(seg.coords))
            elif seg.type == SegmentType.CLOSE and current:
                if current[-1] != current[0]:
                    current.append(list(current[0]))
                polylines.append(current)
                current = [list(current[0])]
        if len(current) >= 2:
            polylines.append(current)
        return polylines

    @staticmethod
    def flattened_to_dict(path: Path, flatness: float, limit: int = 16) -> Dict[str, Any]:
        """{ "flatness": float, "polylines": [ [[x,y], ...], ... ] }"""
        it = path.flattening_path_iterator(None, flatness * flatness, limit)
        return {
            "flatness": flatness,
            "polylines": JsonExporter.polylines(it),
        }

    @staticmethod
    def export(obj: Any, path: str) -> None:
        """Write obj as JSON to path; "-" writes to stdout."""
        data = json.dumps(obj, ensure_ascii=False,  indent=4, separators=(",", ":"))
        if path == "-":
            sys.stdout.write(data + "\n")
            return
        with open(path, "w", encoding="utf-8") as f:
            f.write(data)
