"""Command-line interface: check, round-trip and validate ``.xodr`` files."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import ReadOptions, WriteOptions
from .errors import ParseError, WriteError
from .opendrive import parseFile
from .validation import validate
from .writer import toString, writeFile

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opendrive-stream",
        description="Read, re-write and check ASAM OpenDRIVE files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    parser.add_argument("--max-depth", type=int, default=ReadOptions.maxDepth, help="Maximum element nesting depth")
    parser.add_argument("--strict-profiles", action="store_true", help="Reject profiles whose s values are not ascending")

    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Parse files and report the first error in each")
    check_parser.add_argument("inputs", nargs="+", help="Input .xodr files")

    roundtrip_parser = subparsers.add_parser("roundtrip", help="Parse a file and write it back")
    roundtrip_parser.add_argument("input", help="Input .xodr file")
    roundtrip_parser.add_argument("-o", "--output", help="Output path (default: stdout)")
    roundtrip_parser.add_argument("--compact", action="store_true", help="Do not indent the output")

    validate_parser = subparsers.add_parser("validate", help="Parse a file and list semantic issues")
    validate_parser.add_argument("input", help="Input .xodr file")
    return parser


def _check(args, options: ReadOptions) -> int:
    failures = 0
    for path in args.inputs:
        try:
            document = parseFile(path, options)
        except (ParseError, OSError) as exc:
            failures += 1
            print(f"{path}: {getattr(exc, 'code', 'E_IO')}: {exc}", file=sys.stderr)
            continue
        print(f"{path}: ok ({len(document.roads)} roads, {len(document.junctions)} junctions)")
    return 1 if failures else 0


def _roundtrip(args, options: ReadOptions) -> int:
    document = parseFile(args.input, options)
    write_options = WriteOptions(indent=None if args.compact else "  ")
    if args.output:
        writeFile(document, args.output, write_options)
        logger.info("wrote %s", args.output)
    else:
        sys.stdout.write(toString(document, write_options))
    return 0


def _validate(args, options: ReadOptions) -> int:
    issues = validate(parseFile(args.input, options))
    for issue in issues:
        print(issue)
    logger.info("%s: %d issues", args.input, len(issues))
    return 1 if issues else 0


COMMANDS = {
    "check": _check,
    "roundtrip": _roundtrip,
    "validate": _validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    options = ReadOptions(maxDepth=args.max_depth, strictProfiles=args.strict_profiles)
    try:
        return COMMANDS[args.command](args, options)
    except (ParseError, WriteError) as exc:
        print(f"{exc.code}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"E_IO: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
