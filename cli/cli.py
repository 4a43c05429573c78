#!/usr/bin/env python3
"""Command-line interface for populating a deck and dumping the result."""

import argparse
import random
import sys
import traceback
from pathlib import Path
import logging

import pytz

# Ensure project root is on the import path when executing from the CLI folder
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from devtools.map_dump import DEFAULT_TIMEZONE, dump_level
from flags import FlagCategory, FlagRegistry, Flags
from levelgen.level_generator import LevelGenerator
from levelgen.state import LevelState
from levelgen.validator import LevelValidator
from version import __version_display__
from world.map_loader import load_map_file


def describe_flags() -> str:
    """List the generation flags by category for the --help epilog."""
    lines = ["generation flags (--flag KEY=VALUE):"]
    for category, definitions in sorted(FlagRegistry.get_flags_by_category().items()):
        if category == FlagCategory.HIDDEN:
            continue
        lines.append(f"  {category.display_name}:")
        for definition in definitions:
            lines.append(f"    {definition.key} (default: {definition.get_default()})")
            lines.append(f"        {definition.help_text}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Populate a pre-carved station deck and write a map dump.",
        epilog=describe_flags(),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        "--map-file",
        required=True,
        help="Path to the ASCII map describing the deck layout.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the placement. A random seed is chosen and printed if omitted.")
    parser.add_argument(
        "--level",
        type=int,
        default=1,
        help="Deck number (1 and up). Deeper decks get more gates (default: 1).")
    parser.add_argument(
        "--flag",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a generation flag, e.g. --flag place_hazards=false. Repeatable.")
    parser.add_argument(
        "--output-file",
        help="Write the map dump here instead of printing it.")
    parser.add_argument(
        "--timezone",
        default=DEFAULT_TIMEZONE,
        help=f"Time zone for the dump timestamp (default: {DEFAULT_TIMEZONE}).")
    parser.add_argument('-log',
        '--loglevel',
        default='warning',
        help='Provide logging level. Example --loglevel debug, default=warning')
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version_display__}")
    return parser


def build_flags(assignments) -> Flags:
    flags = Flags()
    try:
        flags.apply_assignments(assignments)
    except KeyError as exc:
        raise ValueError(exc.args[0]) from exc
    except TypeError as exc:
        raise ValueError(str(exc)) from exc
    return flags


def run_generator(map_file: Path, seed: int, level: int, flags: Flags) -> LevelState:
    if level < 1:
        raise ValueError(f"Level must be 1 or higher, got {level}")
    grid = load_map_file(map_file)
    problem = grid.Validate()
    if problem:
        raise ValueError(f"{map_file}: {problem}")
    return LevelGenerator(grid, seed, level, flags).Generate()


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=args.loglevel.upper())

        seed = args.seed if args.seed is not None else random.randint(0, 9999999999)
        flags = build_flags(args.flag)
        logging.info(f"Flags: {flags.to_file_string()}")
        pytz.timezone(args.timezone)

        state = run_generator(Path(args.map_file), seed, args.level, flags)
        dump = dump_level(state, args.timezone)
        if args.output_file:
            output_path = Path(args.output_file)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(dump, encoding="utf-8")
        else:
            sys.stdout.write(dump)
    except pytz.UnknownTimeZoneError as exc:
        parser.error(f"Unknown time zone: {exc}")
    except (ValueError, FileNotFoundError) as exc:
        parser.error(str(exc))
    except Exception as exc:  # pragma: no cover
        print(f"Error: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1

    validator = LevelValidator(state)
    if not validator.IsLevelValid():
        for problem in validator.GetProblems():
            print(f"Invalid level: {problem}", file=sys.stderr)
        return 1

    if args.output_file:
        print(f"Level {args.level} (seed {seed}) written to {args.output_file}")
    else:
        print(f"Level {args.level} generated with seed {seed}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
