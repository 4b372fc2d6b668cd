# terragen/__main__.py
"""
Command line entry point.

    python -m terragen --seed abc grid --size 32 --ascii
    python -m terragen --config terragen.json grid --dump-json out/grid.json
    python -m terragen --seed 42 sample 0 0 100.5 -3
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from .config import load_config
from .console_utils import console_print, render_ascii
from .errors import NoiseError
from .generator import PerlinNoiseGenerator
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def _seed_arg(value: str):
    """Numbers stay numbers; anything else is a text seed."""
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="terragen", description="Value-noise height map generator")
    parser.add_argument("--config", help="JSON config file (defaults to $TERRAGEN_CONFIG)")
    parser.add_argument("--seed", type=_seed_arg, help="map seed, numeric or text")
    parser.add_argument("--persistence", type=float, help="per-octave amplitude decay")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    parser.add_argument("--log-file", help="also write logs to this file")

    sub = parser.add_subparsers(dest="command", required=True)

    grid = sub.add_parser("grid", help="generate a bounded size x size grid")
    grid.add_argument("--size", type=int, help="grid edge length")
    grid.add_argument("--dump-json", metavar="PATH", help="write the grid as JSON")
    grid.add_argument("--ascii", action="store_true", help="print a shaded preview")
    grid.add_argument("--no-color", action="store_true", help="plain ASCII preview")

    sample = sub.add_parser("sample", help="evaluate continuous noise at world coordinates")
    sample.add_argument("coords", nargs="+", type=float, metavar="X Y",
                        help="pairs of world coordinates")
    return parser


def _options(cfg: dict, args: argparse.Namespace) -> dict:
    options = {}
    seed = args.seed if args.seed is not None else cfg.get("map_seed")
    if seed is not None:
        options[PerlinNoiseGenerator.MAP_SEED] = seed
    persistence = args.persistence if args.persistence is not None else cfg.get("persistence")
    if persistence is not None:
        options[PerlinNoiseGenerator.PERSISTENCE] = persistence
    size = getattr(args, "size", None)
    if size is None:
        size = cfg.get("size")
    if size is not None:
        options[PerlinNoiseGenerator.SIZE] = size
    return options


def run_grid(gen: PerlinNoiseGenerator, cfg: dict, args: argparse.Namespace) -> None:
    terra = gen.generate()
    summary = f"Generated {terra.size}x{terra.size} grid, seed={gen.seed!r}"
    if terra.size:
        summary += f", range [{terra.min():.4f}, {terra.max():.4f}]"
    console_print(summary, "cyan")

    if args.dump_json:
        os.makedirs(os.path.dirname(os.path.abspath(args.dump_json)), exist_ok=True)
        with open(args.dump_json, "w", encoding="utf-8") as f:
            json.dump({
                "map_seed": gen.seed,
                "size": gen.size,
                "persistence": gen.persistence,
                "terra": terra.to_list(),
            }, f, indent=2)
        console_print(f"Wrote {args.dump_json}", "yellow")

    if args.ascii:
        render = cfg.get("render", {})
        for line in render_ascii(list(terra), render.get("glyphs", " .:-=+*#%@"),
                                 render.get("colors", ()), use_color=not args.no_color):
            print(line)


def run_sample(gen: PerlinNoiseGenerator, args: argparse.Namespace) -> None:
    coords = args.coords
    if len(coords) % 2:
        raise SystemExit("sample expects an even number of coordinates (x y pairs)")
    for x, y in zip(coords[::2], coords[1::2]):
        print(f"{x}\t{y}\t{gen.evaluate(x, y)!r}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    just_fix_windows_console()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    cfg = load_config(args.config)
    try:
        gen = PerlinNoiseGenerator(_options(cfg, args))
        if args.command == "grid":
            run_grid(gen, cfg, args)
        else:
            run_sample(gen, args)
    except NoiseError as e:
        logger.error(f"terragen failed: {e}")
        console_print(f"Error: {e}", "red")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
