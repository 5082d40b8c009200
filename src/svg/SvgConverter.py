from typing import Any, List, Optional
from svgelements import (SVG, Arc, Circle, Close, CubicBezier, Ellipse, Line, Matrix, Move,
                         Polygon, Polyline, QuadraticBezier, Rect, SimpleLine)
from svgelements import Path as SvgPath
from geometry.AffineTransform import AffineTransform
from geometry.GeoUtil import GeoUtil
from geometry.Path import Path
from geometry.PathIterator import WindingRule


class SvgConverter:
    """SVG -> geometry Paths, keeping curves as quad/cubic segments."""

    @staticmethod
    def _walk_leaves(node: Any):
        """Yield the drawable leaf elements under node."""
        is_leaf = isinstance(node, (SvgPath, SimpleLine, Rect, Circle, Ellipse, Polyline, Polygon))
        if is_leaf:
            yield node
            return

        if hasattr(node, "__iter__") and not isinstance(node, str):
            for ch in node:
                yield from SvgConverter._walk_leaves(ch)

    @staticmethod
    def _matrix_to_transform(M: Optional[Matrix]) -> AffineTransform:
        # SVG matrix: [a c e; b d f; 0 0 1], column-vector on the right.
        if not isinstance(M, Matrix):
            return AffineTransform.identity()
        return AffineTransform.from_matrix(
            GeoUtil.safe_to_float(getattr(M, "a", 1.0), 1.0),
            GeoUtil.safe_to_float(getattr(M, "b", 0.0)),
            GeoUtil.safe_to_float(getattr(M, "c", 0.0)),
            GeoUtil.safe_to_float(getattr(M, "d", 1.0), 1.0),
            GeoUtil.safe_to_float(getattr(M, "e", 0.0)),
            GeoUtil.safe_to_float(getattr(M, "f", 0.0)))

    @staticmethod
    def _winding_rule(elem: Any) -> WindingRule:
        values = getattr(elem, "values", None) or {}
        if values.get("fill-rule") == "evenodd":
            return WindingRule.EVEN_ODD
        return WindingRule.NON_ZERO

    @staticmethod
    def segments_to_path(segments, rule: WindingRule = WindingRule.NON_ZERO) -> Path:
        """Build a Path from svgelements path segments. Arcs become cubics."""
        path = Path(rule)
        for seg in segments:
            if isinstance(seg, Move):
                path.move_to(seg.end.x, seg.end.y)
                continue

            if not path.types and getattr(seg, "start", None) is not None:
                path.move_to(seg.start.x, seg.start.y)

            if isinstance(seg, Close):
                path.close_path()
            elif isinstance(seg, Line):
                path.line_to(seg.end.x, seg.end.y)
            elif isinstance(seg, QuadraticBezier):
                path.quad_to(seg.control.x, seg.control.y, seg.end.x, seg.end.y)
            elif isinstance(seg, CubicBezier):
                path.curve_to(seg.control1.x, seg.control1.y,
                              seg.control2.x, seg.control2.y, seg.end.x, seg.end.y)
            elif isinstance(seg, Arc):
                for c in seg.as_cubic_curves():
                    path.curve_to(c.control1.x, c.control1.y,
                                  c.control2.x, c.control2.y, c.end.x, c.end.y)
            else:
                raise ValueError(f"Unsupported SVG segment: {type(seg).__name__}")
        return path

    @staticmethod
    def path_from_svg_path(svg_path: SvgPath, transform: Optional[AffineTransform] = None) -> Path:
        path = SvgConverter.segments_to_path(svg_path.segments(transformed=False),
                                             SvgConverter._winding_rule(svg_path))
        if transform is not None:
            path.transform(transform)
        return path

    @staticmethod
    def path_from_d(d: str, transform: Optional[AffineTransform] = None) -> Path:
        """Parse SVG path data (the `d` attribute) into a Path."""
        return SvgConverter.path_from_svg_path(SvgPath(d), transform)

    @staticmethod
    def svg_to_paths(svg_file: str, transform: Optional[AffineTransform] = None) -> List[Path]:
        """One Path per drawable element of the document, element transforms applied."""
        doc = SVG.parse(svg_file)

        paths: List[Path] = []
        for elem in SvgConverter._walk_leaves(doc):
            T = SvgConverter._matrix_to_transform(getattr(elem, "transform", None))
            if transform is not None:
                T = transform @ T

            path = SvgConverter.segments_to_path(elem.segments(transformed=False),
                                                 SvgConverter._winding_rule(elem))
            if not path.types:
                continue
            path.transform(T)
            paths.append(path)
        return paths
