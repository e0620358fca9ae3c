import argparse
import logging
import sys

from tqdm import tqdm

from geo_coordinates.config import ConfigError, load_settings
from geo_coordinates.coordinates import Coordinate, CoordinateParseError, PointPair, RawText
from geo_coordinates.notation import CoordinateFormat

logger = logging.getLogger("geo_coordinates")


def setup_logging(verbose=False):
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def print_examples():
    """Print usage examples."""
    print("""
Geographic Coordinate Converter
===============================

Usage:
  geo-coordinates <coordinates>... [options]

Examples:
  # Decimal degrees to degrees, minutes and seconds
  geo-coordinates "49.202442, 16.615052" -f dms            # 49°12'8.791"N 16°36'54.187"E

  # Degrees, minutes and seconds to decimal degrees
  geo-coordinates "49°12'8.8\\"N 16°36'54.2\\"E"             # 49.202444, 16.615056
  geo-coordinates "49°12'08.8\\" 16°36'54.2\\""              # latitude first without N/S/E/W

  # Latitude and longitude as separate values
  geo-coordinates -lat "49°12'08.8\\"N" -long "16°36'54.2\\"E"

  # Values starting with '-' go after --
  geo-coordinates -f dms -- "-33.8688, 151.2093"

  # One coordinate per line from stdin, as JSON
  cat points.txt | geo-coordinates - --json --progress

Options:
  --format, -f      dd or dms (default from coordinates_config.toml: dd)
  --decimals, -n    Decimal places (default: 6 for dd, 3 for dms seconds)
  --latitude, -lat  Latitude as its own value
  --longitude, -long Longitude as its own value
  --json            Print {"latitude": ..., "longitude": ...}
  --strict          Fail on malformed input instead of using 0.0
  --progress        Show a progress bar
  --config          Path to a TOML config file
  --verbose, -v     Debug logging
""")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="geo-coordinates",
        description="Convert geographic coordinates between DD and DMS notation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('values', nargs='*', help="Coordinates to convert, '-' reads lines from stdin")
    parser.add_argument("--latitude", "-lat", dest="latitude", type=str, help="Latitude as its own value")
    parser.add_argument("--longitude", "-long", dest="longitude", type=str, help="Longitude as its own value")
    parser.add_argument('--format', '-f', choices=['dd', 'dms'], help='Output format (default from config: dd)')
    parser.add_argument('--decimals', '-n', type=int, help='Decimal places (default: 6 for dd, 3 for dms)')
    parser.add_argument('--json', action='store_true', help='Print JSON objects instead of text')
    parser.add_argument('--strict', action='store_true', help='Fail on malformed input (default: False)')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar (default: False)')
    parser.add_argument('--config', type=str, help='Path to a TOML config file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def resolve_cli_input(args):
    inputs = []
    if args.latitude is not None or args.longitude is not None:
        inputs.append(PointPair(args.latitude, args.longitude))

    for value in args.values:
        if value == "-":
            inputs.extend(RawText(line.strip()) for line in sys.stdin if line.strip())
        else:
            inputs.append(RawText(value))

    if not inputs:
        print("Error: no coordinates given.\n")
        print_examples()
        sys.exit(1)

    return inputs


def convert(inputs, kind=CoordinateFormat.DD, decimals=None, strict=False, as_json=False, progress=False):
    """
    Convert and print each input on its own line.

    Returns:
        Number of inputs that failed to parse (only possible when strict)
    """
    failures = 0
    for source in tqdm(inputs, desc="Converting", unit="coord", disable=not progress):
        try:
            coordinate = Coordinate.from_input(source, strict=strict)
        except CoordinateParseError as e:
            failures += 1
            tqdm.write(f"✗ Error: {e}", file=sys.stderr)
            continue

        if as_json:
            tqdm.write(coordinate.to_json())
        else:
            tqdm.write(coordinate.format(kind, decimals))
    return failures


def main(argv=None):
    argv = sys.argv[1:] if argv is None else list(argv)
    if not argv:
        print_examples()
        return 0

    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        return 1

    kind = CoordinateFormat.from_name(args.format) if args.format else settings.format
    decimals = args.decimals if args.decimals is not None else settings.decimals_for(kind)
    inputs = resolve_cli_input(args)

    logger.debug("Converting %d coordinate(s) to %s", len(inputs), kind.value)
    failures = convert(
        inputs,
        kind=kind,
        decimals=decimals,
        strict=args.strict or settings.strict,
        as_json=args.json,
        progress=args.progress,
    )
    if failures:
        logger.debug("%d of %d coordinate(s) failed", failures, len(inputs))
        return 1
    return 0
