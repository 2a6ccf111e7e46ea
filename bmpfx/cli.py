from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Any, Dict, List, Optional

from .catalog import FilterRegistry, FilterSpec
from .errors import BmpfxError
from .job import ImageJobBuilder, ProcessSettings

logger = logging.getLogger("bmpfx")

# Catalog parameter name -> argparse destination.
PARAM_OPTIONS = {
    "scaling_factor": ("factor", "--factor"),
    "turns": ("turns", "--turns"),
    "x_scale": ("x_scale", "--x-scale"),
    "y_scale": ("y_scale", "--y-scale"),
}


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("must be an integer >= 1")
    return number


def finite_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError("must be a finite number")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmpfx", description="Apply pixel filters to uncompressed 24-bit BMP images."
    )
    parser.add_argument("input", nargs="?", help="Input image (.bmp, or .png/.jpg/.gif via Pillow)")
    parser.add_argument("output", nargs="?", help="Output image (.bmp or .png)")
    parser.add_argument("-f", "--filter", help="Filter name or menu number (see --list-filters)")
    parser.add_argument("--factor", type=finite_float, help="Scaling factor for clarendon/lighten/darken (e.g. 0.3)")
    parser.add_argument("--turns", type=int, help="Number of 90 degree clockwise rotations")
    parser.add_argument("--x-scale", type=positive_int, help="Horizontal enlarge factor")
    parser.add_argument("--y-scale", type=positive_int, help="Vertical enlarge factor")
    parser.add_argument("--clamp", action="store_true", help="Clamp scaled channels into 0-255")
    parser.add_argument("--list-filters", action="store_true", help="List available filters and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )


def list_filters() -> int:
    registry = FilterRegistry.load()
    for spec in registry.filters:
        params = ", ".join(PARAM_OPTIONS[param.name][1] for param in spec.params)
        suffix = f" ({params})" if params else ""
        print(f"{spec.number:>2}) {spec.name}: {spec.label}{suffix}")
    return 0


def collect_params(spec: FilterSpec, args: argparse.Namespace) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    for param in spec.params:
        dest, flag = PARAM_OPTIONS[param.name]
        value = getattr(args, dest)
        if value is None:
            raise ValueError(f"Filter '{spec.name}' requires {flag}")
        params[param.name] = value
    return params


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    if args.list_filters:
        return list_filters()
    if not args.input or not args.output:
        print("Missing input or output path. Use --help for usage.", file=sys.stderr)
        return 2
    if not args.filter:
        print("Missing --filter. Use --list-filters to see the choices.", file=sys.stderr)
        return 2
    try:
        spec = FilterRegistry.load().get(args.filter)
        params = collect_params(spec, args)
        ImageJobBuilder.validate_output_path(args.output)
    except (BmpfxError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    builder = ImageJobBuilder(spec, ProcessSettings(clamp=args.clamp))
    try:
        builder.run(args.input, args.output, params)
    except (BmpfxError, OSError, ValueError) as exc:
        logger.debug("Processing failed", exc_info=True)
        print(str(exc), file=sys.stderr)
        return 1
    print(f"Successfully applied {spec.label.lower()}: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
