"""Application entry point."""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version

from netctl2iwd.constants import DEFAULT_OUTPUT_DIR
from netctl2iwd.services.converter import convert_directory, convert_files


def _package_version() -> str:
    try:
        return version("netctl2iwd")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="netctl2iwd",
        description="Convert netctl wireless profiles into iwd network files.",
    )
    parser.add_argument("input", nargs="*", help="Profile files to process")
    parser.add_argument(
        "-i", "--input-dir", dest="input_dir", help="Directory of profiles to process"
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Directory to write iwd network files to (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {_package_version()}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if bool(args.input) == bool(args.input_dir):
        parser.error("provide exactly one of: profile files or --input-dir")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if args.input_dir:
        try:
            convert_directory(args.input_dir, args.output_dir)
        except OSError as exc:
            logging.error("Unable to read %s: %s", args.input_dir, exc.strerror or exc)
            return exc.errno or 1
    else:
        convert_files(args.input, args.output_dir)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
