from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

import pygame

from .config.schema import RotoConfig
from .config_file import dump_config, flatten_config, load_config
from .demo import PulsingStar
from .logging_setup import setup_logging
from .recording import Roto


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rotoscope", description="Capture a procedural sprite into imagetables")

    g_cap = ap.add_argument_group("Capture")
    g_cap.add_argument("--frames", type=positive_int, default=16, help="Number of frames to capture")
    g_cap.add_argument("--environment", type=str, default="simulator", help="Host environment name")

    g_out = ap.add_argument_group("Export")
    g_out.add_argument("--out", type=str, default=".", help="Output directory")
    g_out.add_argument("--mode", type=str, default="matrix", choices=["sequence", "matrix", "both"])
    g_out.add_argument("--prefix", type=str, default=None, help="File name prefix (default: sprite class name)")
    g_out.add_argument("--columns", type=int, default=None, help="Matrix frames per row (default: ~square)")
    g_out.add_argument("--writer", type=str, default="pygame", choices=["pygame", "pillow"])
    g_out.add_argument("--format", type=str, default="png", help="Image file extension")

    g_demo = ap.add_argument_group("Demo sprite")
    g_demo.add_argument("--size", type=int, default=32)
    g_demo.add_argument("--points", type=int, default=5)
    g_demo.add_argument("--pulse", type=int, default=6, help="Frames per size pulse")

    g_cfg = ap.add_argument_group("Config")
    g_cfg.add_argument("--config", type=str, default=None, help="Config (JSONC) path")
    g_cfg.add_argument("--save_config", type=str, default=None, help="Write config (JSONC) to this path")

    g_log = ap.add_argument_group("Logging")
    g_log.add_argument("--quiet", action="store_true", help="Less console output")
    g_log.add_argument("--verbose", action="store_true", help="Debug output")
    return ap


def apply_config_file(args: argparse.Namespace, argv: Sequence[str]) -> None:
    """Fill args from --config, keeping values given explicitly on the command line."""
    if not args.config:
        return
    flat_cfg = flatten_config(load_config(str(args.config)))
    for k, v in flat_cfg.items():
        if not hasattr(args, k):
            continue
        if ("--" + k) in argv:
            continue
        setattr(args, k, v)


def run_capture(args: argparse.Namespace) -> List[str]:
    """Drive the demo sprite through a capture and export the result."""
    logger = logging.getLogger(__name__)

    config = RotoConfig(
        environment=str(args.environment),
        image_format=str(args.format),
        writer=str(args.writer),
        default_columns=args.columns,
    )
    sprite = PulsingStar(size=args.size, points=args.points, pulse=args.pulse)
    roto = Roto(sprite, config)

    screen = pygame.Surface((sprite.base_size, sprite.base_size), pygame.SRCALPHA)
    roto.start_tracing(int(args.frames))
    while roto.tracing:
        screen.fill((0, 0, 0, 0))
        roto.renderable.draw(screen)
        sprite.update()

    b = roto.bounds
    logger.debug(
        "bounds: w=%d..%d h=%d..%d", b.min_width, b.max_width, b.min_height, b.max_height
    )

    written: List[str] = []
    if args.mode in {"sequence", "both"}:
        written.extend(roto.save_as_sequence(args.out, args.prefix))
    if args.mode in {"matrix", "both"}:
        written.append(roto.save_as_matrix(args.out, args.prefix, args.columns))
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args)
    logger = logging.getLogger(__name__)
    logger.debug("CLI args parsed")

    apply_config_file(args, argv)
    try:
        args.frames = positive_int(args.frames)
    except argparse.ArgumentTypeError as e:
        parser.error(f"frames from {args.config}: {e}")

    if args.save_config:
        with open(args.save_config, "w", encoding="utf-8") as f:
            f.write(dump_config(args))
        logger.info("Config written to %s", args.save_config)

    written = run_capture(args)
    logger.info("Wrote %d file(s)", len(written))
    return 0
