#!/usr/bin/env python3
"""
file_ops.py

Directory listing and in-place renames for dirnum

Exposes:
    read_file_names(directory) -> list[str]
    rename_file(directory, old_name, new_name) -> bool
    apply_renames(directory, renames) -> {'renamed': int, 'failed': int}

Renames never overwrite an existing file and are applied one at a time; a
failure is reported and the remaining entries still run.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

# OS-generated thumbnail cache
IGNORE_RE = re.compile(r"^Thumbs\.db$")


def read_file_names(directory: str | Path) -> List[str]:
    """Names of the regular files in *directory*. Raises OSError if it can't be read."""
    with os.scandir(directory) as it:
        names = [e.name for e in it if e.is_file() and not IGNORE_RE.match(e.name)]
    names.sort()
    return names


def rename_file(directory: str | Path, old_name: str, new_name: str) -> bool:
    src = Path(directory) / old_name
    dst = Path(directory) / new_name
    if dst.exists():
        print(f"⚠️  Skipping (target exists): {dst}")
        return False
    try:
        os.replace(src, dst)
    except OSError as e:
        print(f"❌ Failed to rename {old_name} -> {new_name}: {e}")
        return False
    print(f"Renamed: {old_name} -> {new_name}")
    return True


def apply_renames(directory: str | Path, renames: Iterable[Tuple[str, str]]) -> Dict[str, int]:
    renamed = 0
    failed = 0
    for old_name, new_name in renames:
        if rename_file(directory, old_name, new_name):
            renamed += 1
        else:
            failed += 1
    print(f"\n🎯 Renamed: {renamed} | Failed: {failed}")
    return {'renamed': renamed, 'failed': failed}
