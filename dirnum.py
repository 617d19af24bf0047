#!/usr/bin/env python3
"""
dirnum.py

Check that the images in a directory are numbered in order

Usage:
    python dirnum.py <directory> [--quiet] [--unused] [--fix]
                     [--no-renumber] [--dry-run] [--yes]

Behavior:
    - Lists the files in <directory> (Thumbs.db is ignored).
    - With --fix, renames common typos first (0012_1.jpg -> 0012-1.jpg, 0012.JPG -> 0012.jpg).
    - Prints every file whose name breaks the numbering scheme, unless --quiet.
    - Proposes renames that renumber minor versions, normalize zero padding and
      close gaps in the major numbers, then asks before renaming anything.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from file_ops import apply_renames, read_file_names, rename_file
from name_codec import suggest_fix
from renumber import compute_renames
from validation import validate_file_names


def prompt(question: str) -> bool:
    """Ask a y/n question until one of the two is answered. EOFError propagates."""
    while True:
        answer = input(f"{question} (y/n): ").strip().lower()
        if answer == "y":
            return True
        if answer == "n":
            return False


def auto_fix(directory: Path, names: Sequence[str]) -> List[str]:
    """Rename fixable typos in place and return the resulting names."""
    fixed: List[str] = []
    for name in names:
        new_name = suggest_fix(name)
        if new_name and rename_file(directory, name, new_name):
            fixed.append(new_name)
        else:
            fixed.append(name)
    return fixed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirnum",
        description="Check that image files are numbered major[-minor][-tag].ext without gaps",
    )
    parser.add_argument("directory", help="The directory to analyze")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print validation errors")
    parser.add_argument("--unused", action="store_true",
                        help="Print the major numbers missing from the sequence")
    parser.add_argument("--fix", action="store_true",
                        help="Rename simple typos in file names before checking")
    parser.add_argument("--renumber", action=argparse.BooleanOptionalAction, default=True,
                        help="Propose renames that fill gaps in the major numbers (default: on)")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show proposed renames without asking or renaming")
    parser.add_argument("--yes", action="store_true",
                        help="Rename without asking for confirmation")
    return parser


def run(
    directory: str | Path,
    *,
    quiet: bool = False,
    show_unused: bool = False,
    fix: bool = False,
    renumber: bool = True,
    dry_run: bool = False,
    assume_yes: bool = False,
) -> int:
    """Validate *directory* and optionally renumber it. Returns the number of files renamed."""
    directory = Path(directory)
    names = read_file_names(directory)
    if fix:
        names = auto_fix(directory, names)

    errors, unused = validate_file_names(names)
    if not quiet:
        print(errors.format_report())

    if show_unused:
        print(f"Unused major numbers: {unused}")

    if not renumber:
        return 0

    renames = compute_renames(names, unused)
    if not renames:
        print("\nNo renames needed.")
        return 0

    print("\nProposed renames:")
    for old_name, new_name in renames:
        print(f"{old_name} => {new_name}")

    if dry_run:
        print("\nDry-run completed. No files were renamed.")
        return 0
    if not assume_yes and not prompt("Rename files?"):
        return 0
    return apply_renames(directory, renames)['renamed']


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        run(
            args.directory,
            quiet=args.quiet,
            show_unused=args.unused,
            fix=args.fix,
            renumber=args.renumber,
            dry_run=args.dry_run,
            assume_yes=args.yes,
        )
    except EOFError:
        print("\n❌ Error: no answer given")
        sys.exit(1)
    except OSError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
