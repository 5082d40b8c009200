import argparse
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt

from export.JsonExporter import JsonExporter
from geometry.AffineTransform import AffineTransform
from geometry.Path import Path
from geometry.Rectangle import Rectangle
from svg.SvgConverter import SvgConverter


def visualize_paths(paths: List[Path], flatness: float, limit: int,
                    points: Sequence[Sequence[float]] = (), rect: Optional[Rectangle] = None):
    """Plot the flattened outlines, query points and query rectangle."""
    fig, ax = plt.subplots(figsize=(8, 6))

    for path in paths:
        for pl in JsonExporter.polylines(path.flattening_path_iterator(None, flatness * flatness, limit)):
            ax.plot([p[0] for p in pl], [p[1] for p in pl], linewidth=1.0)

    for x, y in points:
        inside = any(path.contains(x, y) for path in paths)
        ax.plot([x], [y], "o", color="green" if inside else "red")

    if rect is not None:
        xs = [rect.min_x, rect.max_x, rect.max_x, rect.min_x, rect.min_x]
        ys = [rect.min_y, rect.min_y, rect.max_y, rect.max_y, rect.min_y]
        ax.plot(xs, ys, "--", color="gray")

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_aspect("equal", adjustable="datalim")
    # SVG y axis points down
    ax.invert_yaxis()
    grid_on = [True]
    ax.grid(True)

    def on_key(event):
        if event.key == 'g':
            grid_on[0] = not grid_on[0]
            ax.grid(grid_on[0])
            fig.canvas.draw_idle()

    fig.canvas.mpl_connect('key_press_event', on_key)
    plt.tight_layout()
    plt.show()


def load_paths(args: argparse.Namespace) -> List[Path]:
    transform = AffineTransform.from_svg_transform(args.transform) if args.transform else None
    if args.d is not None:
        return [SvgConverter.path_from_d(args.d, transform)]
    return SvgConverter.svg_to_paths(args.svg, transform)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="SVG paths -> segment summary, containment queries and flattened preview")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--input", dest="svg", help="Input SVG file")
    src.add_argument("--d", help="SVG path data, e.g. 'M0 0 L10 0 L10 10 Z'")
    ap.add_argument("--flatness", type=float, default=0.1, help="Flattening tolerance (default: 0.1)")
    ap.add_argument("--limit", type=int, default=16, help="Maximum curve subdivision depth (default: 16)")
    ap.add_argument("--transform", metavar="SVG_TRANSFORM",
                    help="Extra SVG transform applied to every path, e.g. 'scale(2) rotate(45)'")
    ap.add_argument("--point", nargs=2, type=float, action="append", default=[], metavar=("X", "Y"),
                    help="Report whether (X, Y) is inside any path (repeatable)")
    ap.add_argument("--rect", nargs=4, type=float, metavar=("X", "Y", "W", "H"),
                    help="Report whether the rectangle intersects or is contained by any path")
    ap.add_argument("--no-view", action="store_true", help="Do not open the viewer")
    ap.add_argument("--export-json", metavar="PATH", help="Write segments and flattened polylines to JSON (use '-' for stdout)")
    args = ap.parse_args(argv)

    if args.flatness < 0:
        ap.error("--flatness must not be negative")
    if args.limit < 0:
        ap.error("--limit must not be negative")

    paths = load_paths(args)
    print(f"Loaded paths: {len(paths)}")
    print(f"Total segments: {sum(len(p) for p in paths)}")

    if paths:
        bounds = paths[0].bounds()
        for p in paths[1:]:
            bounds.add_rect(p.bounds())
        print(f"Bounds: min=({bounds.min_x:.3f},{bounds.min_y:.3f}) max=({bounds.max_x:.3f},{bounds.max_y:.3f})")

    flattened = [JsonExporter.flattened_to_dict(p, args.flatness, args.limit) for p in paths]
    total_pts = sum(len(pl) for f in flattened for pl in f["polylines"])
    print(f"Flattened points: {total_pts} (flatness={args.flatness}, limit={args.limit})")

    for x, y in args.point:
        inside = any(p.contains(x, y) for p in paths)
        print(f"Point ({x}, {y}): {'inside' if inside else 'outside'}")

    rect = None
    if args.rect:
        rect = Rectangle(*args.rect)
        hit = any(p.intersects_rect(rect) for p in paths)
        inside = any(p.contains_rect(rect.x, rect.y, rect.width, rect.height) for p in paths)
        print(f"Rect {rect}: {'intersects' if hit else 'disjoint'}, {'contained' if inside else 'not contained'}")

    # Exports
    if args.export_json:
        JsonExporter.export({
            "paths": [JsonExporter.path_to_dict(p) for p in paths],
            "flattened": flattened,
        }, args.export_json)

    if not args.no_view:
        visualize_paths(paths, args.flatness, args.limit, args.point, rect)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
