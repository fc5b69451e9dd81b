"""Command line host: invert a photo file with automatic or manual levels."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_JPEG_QUALITY, SLIDER_SCALE
from .core.backends import available_backends, select_backend
from .core.contrast_controller import ColorPoint, ContrastController, Mode
from .core.editing_session import EditingSession
from .errors import PhotoInverterError
from .io.image_io import load_image
from .utils.jsonio import write_json
from .utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="photo-inverter",
        description="Invert a photo and stretch its levels between a black and white point.",
    )
    parser.add_argument("input", type=Path, help="image to invert")
    parser.add_argument("output", type=Path, help="destination file (JPEG unless the suffix says otherwise)")
    parser.add_argument(
        "--black",
        type=float,
        help=f"manual black point on a 0-{SLIDER_SCALE} scale (requires --white)",
    )
    parser.add_argument(
        "--white",
        type=float,
        help=f"manual white point on a 0-{SLIDER_SCALE} scale (requires --black)",
    )
    parser.add_argument("--backend", help="transform backend: " + ", ".join(available_backends()))
    parser.add_argument("--quality", type=int, default=DEFAULT_JPEG_QUALITY, help="JPEG quality")
    parser.add_argument(
        "--write-adjustments",
        type=Path,
        metavar="PATH",
        help="also write the adjustment metadata record as JSON",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger(verbose=args.verbose)

    if (args.black is None) != (args.white is None):
        parser.error("--black and --white must be given together")

    try:
        controller = ContrastController(backend=select_backend(args.backend))
        if args.black is not None:
            controller.set_mode(Mode.MANUAL)
            point = ColorPoint.from_slider(args.black, args.white)
            controller.set_point(point.black, point.white)

        session = EditingSession(controller)
        session.start(load_image(args.input))
        output = session.finish(args.output, quality=args.quality)
        if args.write_adjustments is not None:
            write_json(args.write_adjustments, output.adjustment_data.to_dict())
    except PhotoInverterError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("Unable to write adjustment record: %s", exc)
        return 1

    point = controller.point
    logger.info(
        "Inverted %s (%s, black=%.1f white=%.1f)",
        args.input,
        controller.mode.value,
        *point.to_slider(),
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
