"""
Geohash Encoder — Interactive CLI
=================================
Thin wrapper around the flexgeohash library.

Usage:
    flexgeohash                        # interactive mode
    flexgeohash 35.681 139.767         # encode a coordinate
    flexgeohash xn76urx                # decode a geohash
    flexgeohash xn76urx neighbors      # list the surrounding cells

Defaults are read from environment variables:
    FLEXGEOHASH_PRECISION   Characters per geohash (default 12)
    FLEXGEOHASH_ENCODING    base2, base4, base8, base16 or base32
    FLEXGEOHASH_DEBUG       Set to anything to log debug output to stderr
"""

import logging
import os
import sys
from typing import Optional

from flexgeohash import codec
from flexgeohash.encoding import Encoding
from flexgeohash.exceptions import GeohashError
from flexgeohash.models import LatLng
from flexgeohash.neighbors import ALL_DIRECTIONS

logger = logging.getLogger(__name__)

_BANNER = """\
╔══════════════════════════════════════╗
║           Geohash Encoder            ║
║  Coordinates ⇄ Geohash ⇄ Region      ║
╚══════════════════════════════════════╝
Enter 'LAT LNG' to encode or a geohash to decode.
Type 'q' to quit.
"""


def _settings() -> tuple[int, Encoding]:
    """Read precision and encoding from the environment."""
    encoding = Encoding.parse(
        os.environ.get("FLEXGEOHASH_ENCODING", codec.DEFAULT_ENCODING)
    )
    raw_precision = os.environ.get("FLEXGEOHASH_PRECISION")
    if raw_precision is None:
        precision = min(codec.DEFAULT_PRECISION, encoding.max_precision)
    else:
        precision = int(raw_precision)
    return precision, encoding


def _parse_coordinate(parts: list[str]) -> Optional[LatLng]:
    """Return a LatLng if *parts* are two numbers, else None."""
    if len(parts) != 2:
        return None
    try:
        return LatLng(float(parts[0]), float(parts[1]))
    except ValueError:
        return None


def _print_region(text: str, encoding: Encoding) -> None:
    for key, val in codec.decode(text, encoding).to_dict().items():
        if isinstance(val, dict):
            val = f"{val['latitude']}, {val['longitude']}"
        print(f"{key:>10}: {val}")


def _print_neighbors(text: str, encoding: Encoding) -> None:
    cells = codec.neighbors(text, encoding=encoding)
    for direction, cell in zip(ALL_DIRECTIONS, cells):
        print(f"{direction.value:>10}: {cell}")


def _handle(parts: list[str], precision: int, encoding: Encoding) -> None:
    coordinate = _parse_coordinate(parts)
    if coordinate is not None:
        print(codec.encode(coordinate, precision, encoding))
    elif len(parts) == 2 and parts[1].lower() == "neighbors":
        _print_neighbors(parts[0], encoding)
    elif len(parts) == 1:
        _print_region(parts[0], encoding)
    else:
        raise ValueError(f"Cannot interpret input: {' '.join(parts)!r}")


def _run_interactive(precision: int, encoding: Encoding) -> None:
    print(_BANNER)

    while True:
        try:
            raw = input(f"\n[{encoding}, {precision}] > ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            continue

        try:
            _handle(raw.replace(",", " ").split(), precision, encoding)
        except GeohashError as exc:
            print(f"  ✗ {exc}")
        except ValueError as exc:
            print(f"  ✗ Error: {exc}")


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point — supports both CLI args and interactive mode."""
    args = sys.argv[1:] if argv is None else argv

    if os.environ.get("FLEXGEOHASH_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        precision, encoding = _settings()
    except (GeohashError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(
            "Check the FLEXGEOHASH_PRECISION and FLEXGEOHASH_ENCODING "
            "environment variables.",
            file=sys.stderr,
        )
        sys.exit(2)
    logger.debug("Using precision %d, %s", precision, encoding)

    if not args:
        _run_interactive(precision, encoding)
        return

    try:
        _handle(args, precision, encoding)
    except (GeohashError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
