"""CLI main module with subcommands for ratio, map, quad, and inspect.

Usage:
    python -m framer ratio --picture 720 1280 --frame 360 480
    python -m framer map 360 640 --config framer.yaml --norm ndc
    python -m framer quad --config framer.yaml --kind fullscreen --rotation 90 --json
    python -m framer inspect --config framer.yaml
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from ..core.config import FramerConfig, load_config, parse_config
from ..core.engine import Framer, Quad
from ..core.enums import FitMode, Normalization, Origin, Rotation
from ..core.errors import ConfigError, FramerError
from ..core.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _load(args: argparse.Namespace) -> tuple[Framer, FramerConfig]:
    """Build the engine from ``--config`` or explicit size options."""
    if args.config is not None:
        cfg = load_config(args.config)
        logger.info("Loaded config", {"path": str(args.config)})
    else:
        if args.picture is None or args.frame is None:
            raise ConfigError("Either --config or both --picture and --frame are required")
        cfg = parse_config({"picture": args.picture, "frame": args.frame})
    # Explicit options win over the config file
    overrides = {}
    if args.origin is not None:
        overrides["origin"] = Origin(args.origin)
    if args.mode is not None:
        overrides["mode"] = FitMode(args.mode)
    if overrides:
        cfg = cfg.model_copy(update=overrides)
    return Framer.from_config(cfg), cfg


def _quad_payload(quad: Quad) -> dict[str, list[float]]:
    return {
        "vertices": [round(float(v), 6) for v in quad.vertices],
        "texcoords": [round(float(t), 6) for t in quad.texcoords],
    }


def _print_quad(name: str, quad: Quad) -> None:
    print(f"{name}:")
    print("-" * 40)
    labels = ("top-left", "top-right", "bottom-left", "bottom-right")
    for i, label in enumerate(labels):
        vx, vy = quad.vertices[2 * i], quad.vertices[2 * i + 1]
        tx, ty = quad.texcoords[2 * i], quad.texcoords[2 * i + 1]
        print(f"  {label:13} pos=({vx: .4f}, {vy: .4f})  tex=({tx:.4f}, {ty:.4f})")


def cmd_ratio(args: argparse.Namespace) -> int:
    """Print the cached frame/picture ratio."""
    framer, _ = _load(args)
    print(f"{framer.ratio:.6g}")
    return 0


def cmd_map(args: argparse.Namespace) -> int:
    """Map a single point between spaces."""
    framer, _ = _load(args)
    norm = Normalization(args.norm)
    if args.inverse:
        p = framer.frame_to_pic((args.x, args.y), norm)
    else:
        p = framer.pic_to_frame((args.x, args.y), norm)
    print(f"{p.x:.6g} {p.y:.6g}")
    return 0


def cmd_quad(args: argparse.Namespace) -> int:
    """Print the vertices and texture coordinates of a quad."""
    framer, cfg = _load(args)
    rot = Rotation.from_degrees(args.rotation) if args.rotation is not None else cfg.quad.rotation
    mirror = args.mirror or cfg.quad.mirror

    if args.kind == "dynamic":
        quad = framer.dynamic_quad(rot, mirror)
    else:
        quad = framer.fullscreen_quad(rot, mirror)

    if args.json:
        print(json.dumps(_quad_payload(quad), indent=2))
    else:
        _print_quad(f"{args.kind} quad", quad)
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    """Print a summary of the engine and both quads."""
    framer, cfg = _load(args)
    lo, hi = framer.visible_picture_rect()

    print("Framer Summary:")
    print("-" * 40)
    print(f"  Picture:  {framer.picture_size.width:g} x {framer.picture_size.height:g}")
    print(f"  Frame:    {framer.frame_size.width:g} x {framer.frame_size.height:g}")
    print(f"  Origin:   {framer.origin.value}")
    print(f"  Mode:     {framer.mode.value}")
    print(f"  Ratio:    {framer.ratio:.6g}")
    print(f"  Visible:  ({lo.x:g}, {lo.y:g}) .. ({hi.x:g}, {hi.y:g})")
    print()

    _print_quad("Dynamic quad", framer.dynamic_quad(cfg.quad.rotation, cfg.quad.mirror))
    print()
    _print_quad("Fullscreen quad", framer.fullscreen_quad(cfg.quad.rotation, cfg.quad.mirror))
    return 0


def _add_engine_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML/JSON config file",
    )
    parser.add_argument(
        "--picture",
        nargs=2,
        type=float,
        metavar=("W", "H"),
        help="Picture size (ignored when --config is given)",
    )
    parser.add_argument(
        "--frame",
        nargs=2,
        type=float,
        metavar=("W", "H"),
        help="Frame size (ignored when --config is given)",
    )
    parser.add_argument(
        "--origin",
        choices=[o.value for o in Origin],
        default=None,
        help="Origin convention (default: bottom_left)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in FitMode],
        default=None,
        help="Fit mode (default: aspect_fit)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="framer",
        description="Picture/frame coordinate transform CLI",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write JSON lines log to this file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    parser_ratio = subparsers.add_parser("ratio", help="Print the frame/picture scale ratio")
    _add_engine_options(parser_ratio)
    parser_ratio.set_defaults(func=cmd_ratio)

    parser_map = subparsers.add_parser("map", help="Map a point between spaces")
    parser_map.add_argument("x", type=float, help="X coordinate")
    parser_map.add_argument("y", type=float, help="Y coordinate")
    parser_map.add_argument(
        "--inverse",
        action="store_true",
        help="Map frame -> picture instead of picture -> frame",
    )
    parser_map.add_argument(
        "--norm",
        choices=[n.value for n in Normalization],
        default=Normalization.NONE.value,
        help="Normalization of the result (default: none)",
    )
    _add_engine_options(parser_map)
    parser_map.set_defaults(func=cmd_map)

    parser_quad = subparsers.add_parser("quad", help="Print quad vertices and texcoords")
    parser_quad.add_argument(
        "--kind",
        choices=["dynamic", "fullscreen"],
        default="dynamic",
        help="Quad convention (default: dynamic)",
    )
    parser_quad.add_argument(
        "--rotation",
        type=int,
        choices=[0, 90, 180, 270],
        default=None,
        help="Clockwise rotation in degrees",
    )
    parser_quad.add_argument("--mirror", action="store_true", help="Mirror horizontally")
    parser_quad.add_argument("--json", action="store_true", help="Emit JSON")
    _add_engine_options(parser_quad)
    parser_quad.set_defaults(func=cmd_quad)

    parser_inspect = subparsers.add_parser("inspect", help="Print an engine summary")
    _add_engine_options(parser_inspect)
    parser_inspect.set_defaults(func=cmd_inspect)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, "DEBUG" if args.verbose else "WARNING")
    try:
        return int(args.func(args) or 0)
    except (FramerError, OSError) as e:
        logger.error("Command failed", {"command": args.command, "error": type(e).__name__})
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
