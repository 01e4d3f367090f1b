"""Command-line entry point and logging setup.

    sfcm ordine caos --seed 42 --canvas 16_9 --debug
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from sfcm.canvas import CANVAS_PRESETS, DEFAULT_SIZE, resolve_canvas_size, validate_custom_size
from sfcm.config import settings
from sfcm.engine.generator import generate_from_request
from sfcm.models.requests import GenerateRequest, GenerationOptions

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or settings.sfcm_log_level).upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sfcm",
        description="Generate a deterministic vector symbol from keywords (JSON on stdout)",
    )
    parser.add_argument("keywords", nargs="+", help="1-10 keywords")
    parser.add_argument("--seed", default="0", help="Global seed string")
    parser.add_argument(
        "--canvas",
        default="square",
        choices=[*CANVAS_PRESETS, "custom"],
        help="Canvas size preset",
    )
    parser.add_argument("--width", type=float, help="Custom canvas width (with --canvas custom)")
    parser.add_argument("--height", type=float, help="Custom canvas height (with --canvas custom)")
    parser.add_argument("--length-scale", type=float, default=1.0)
    parser.add_argument("--curvature-scale", type=float, default=1.0)
    parser.add_argument("--cluster-count", type=int, default=3)
    parser.add_argument("--cluster-spread", type=float, default=30.0)
    parser.add_argument("--force-orientation", action="store_true")
    parser.add_argument("--origin-bridges", action="store_true")
    parser.add_argument("--debug", action="store_true", help="Include debug telemetry")
    parser.add_argument("--log-level", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.canvas == "custom" and not validate_custom_size(args.width, args.height):
        logger.warning(
            "Invalid custom canvas %sx%s, using %dx%d", args.width, args.height, *DEFAULT_SIZE
        )
        width, height = DEFAULT_SIZE
    else:
        width, height = resolve_canvas_size(args.canvas, args.width, args.height)

    try:
        request = GenerateRequest(
            keywords=args.keywords,
            seed=args.seed,
            canvas_width=width,
            canvas_height=height,
            options=GenerationOptions(
                length_scale=args.length_scale,
                curvature_scale=args.curvature_scale,
                cluster_count=args.cluster_count,
                cluster_spread=args.cluster_spread,
                force_orientation=args.force_orientation,
                origin_bridges=args.origin_bridges,
            ),
            include_debug=args.debug,
        )
    except ValidationError as e:
        print(f"sfcm: invalid input: {e}", file=sys.stderr)
        return 2

    result = generate_from_request(request)
    # stdout depends on the inputs only
    payload = result.model_dump(
        mode="json", by_alias=True, exclude_none=True, exclude={"processing_time_ms"}
    )
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    logger.info("Generated %d connections in %.1fms", len(result.connections), result.processing_time_ms)
    return 0


if __name__ == "__main__":
    sys.exit(main())
