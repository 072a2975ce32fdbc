"""
Laser-cut generator: entry point.

Usage:
    python -m lasercut generate --out build/          # default 20" walnut, 12x6
    python -m lasercut generate --out build/ --size 24 --material oak --rows 10 --cols 5
    python -m lasercut serve --port 3000
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from lasercut.config import defaults


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lasercut",
        description="Microseasons calendar → laser-cut SVG files",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Write every laser-cut file for one build")
    g.add_argument("--out", required=True, help="Output directory")
    g.add_argument("--size", choices=list(defaults.sizes), default=defaults.size,
                   help="Diagonal in inches")
    g.add_argument("--material", choices=list(defaults.materials), default=defaults.material)
    g.add_argument("--thickness", type=float, default=defaults.thickness,
                   help="Material thickness in mm")
    g.add_argument("--rows", type=int, default=defaults.rows)
    g.add_argument("--cols", type=int, default=defaults.cols)
    g.add_argument("--no-assembly-guide", action="store_true")
    g.add_argument("--no-mounting-holes", action="store_true")
    g.add_argument("--delay", type=float, default=0.0,
                   help="Seconds to wait after each file (default: %(default)s)")

    sv = sub.add_parser("serve", help="Start the web server")
    sv.add_argument("--host", default="127.0.0.1", help="Host to bind")
    sv.add_argument("--port", type=int, default=8000, help="Port to bind")

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "generate":
        from lasercut.export import download_all_laser_cut_files
        from lasercut.pipeline import run_laser_cut
        from lasercut.pipeline.options import LaserCutOptionsError, parse_options

        try:
            options = parse_options({
                "size": args.size,
                "material": args.material,
                "thickness": args.thickness,
                "include_assembly_guide": not args.no_assembly_guide,
                "include_mounting_holes": not args.no_mounting_holes,
                "tile_grid_size": {"rows": args.rows, "cols": args.cols},
            })
            run = run_laser_cut(options)
        except LaserCutOptionsError as e:
            print("Invalid options:", file=sys.stderr)
            for err in e.errors:
                print(f"- {err}", file=sys.stderr)
            return 1

        out_dir = Path(args.out).resolve()
        paths = asyncio.run(download_all_laser_cut_files(run.files, out_dir, delay_s=args.delay))
        for file, path in zip(run.files, paths):
            print(f"{path.name}: {file.description}")
        for w in run.warnings:
            print(f"warning: {w}", file=sys.stderr)
        return 0

    if args.cmd == "serve":
        from lasercut.web.server import main as serve_main
        serve_main(host=args.host, port=args.port)
        return 0

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
