"""Command that generates a diamond-square heightmap and saves it as a PNG."""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np
from PIL import Image

from terrainkit.diamond_square import DiamondSquare

_MIN_EXPONENT = 2
_MAX_EXPONENT = 12


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terrainkit",
        description="Generate a (2**EXPONENT + 1)-square diamond-square heightmap.",
    )
    parser.add_argument("exponent", nargs="?", type=int, default=_MIN_EXPONENT,
                        help="size exponent, from 2 to 12 (default: 2)")
    parser.add_argument("--persistence", type=float, default=0.5,
                        help="roughness decay; higher gives more jagged terrain")
    parser.add_argument("--seed", type=int, default=-1,
                        help="positive seed for a reproducible map")
    parser.add_argument("--output-dir", type=Path, default=Path("examples"),
                        help="directory the PNG is written to")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Generate a heightmap and write it to ``<output-dir>/<n>x<n>.png``."""
    parser = _parser()
    args = parser.parse_args(argv)
    if not _MIN_EXPONENT <= args.exponent <= _MAX_EXPONENT:
        parser.error(f"exponent must be between {_MIN_EXPONENT} and {_MAX_EXPONENT}")

    n = 2 ** args.exponent + 1
    print(f"Creating map of size {n}")
    heightmap = DiamondSquare().generate(n, decay=args.persistence, seed=args.seed)

    pixels = np.clip(np.rint(heightmap * 255.0), 0, 255).astype(np.uint8)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    path = args.output_dir / f"{n}x{n}.png"
    Image.fromarray(pixels).save(path)
    print(f"Saved image as {path}")
    return 0