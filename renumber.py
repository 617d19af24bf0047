#!/usr/bin/env python3
"""
renumber.py

Plan the renames that make a numbered directory canonical

Exposes:
    compute_renames(names, unused) -> list[RenameEntry]

Stages (each returns a new list, inputs are never modified):
    normalize_widths         one major width for all files, one minor width per major
    renumber_minor_versions  minors become 0..k-1 per major, a lone file gets none
    fill_major_gaps          move the highest majors down into the lowest gaps
    changed_names            old/new pairs for every file whose name changed

Widths are only ever widened. If filling gaps would allow fewer digits the
extra digit is kept; running the tool again drops it.

Input names must not collide on (major, minor); validation reports those first.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, NamedTuple, Sequence

from name_codec import FileDescriptor, MalformedName, parse_name, render_name, sort_key


class RenameEntry(NamedTuple):
    old_name: str
    new_name: str


def parse_file_names(names: Iterable[str]) -> List[FileDescriptor]:
    """Parse and sort *names*, skipping any that don't follow the scheme."""
    files: List[FileDescriptor] = []
    for name in names:
        try:
            files.append(parse_name(name))
        except MalformedName:
            # already reported by validation
            continue
    files.sort(key=sort_key)
    return files


def normalize_widths(files: Sequence[FileDescriptor]) -> List[FileDescriptor]:
    major_digits = 0
    minor_digits: Dict[int, int] = {}
    for f in files:
        major_digits = max(major_digits, f.major_digits)
        minor_digits[f.major] = max(minor_digits.get(f.major, 0), f.minor_digits)
    return [
        replace(f, major_digits=major_digits, minor_digits=minor_digits[f.major])
        for f in files
    ]


def renumber_minor_versions(files: Sequence[FileDescriptor]) -> List[FileDescriptor]:
    """
    Renumber minors of sorted *files*: a major with a single file loses its
    minor, otherwise the group is numbered 0, 1, 2, ... in its current order.
    Digit widths are normalized first, from the original minor values.
    """
    files = normalize_widths(files)
    out: List[FileDescriptor] = []
    for i, f in enumerate(files):
        if i > 0 and files[i - 1].major == f.major:
            minor = out[-1].minor + 1
        elif i + 1 < len(files) and files[i + 1].major == f.major:
            minor = 0
        else:
            minor = None
        out.append(replace(f, minor=minor))
    return out


def fill_major_gaps(files: Sequence[FileDescriptor], unused: Sequence[int]) -> List[FileDescriptor]:
    """
    Move the highest major groups of sorted *files* into the lowest *unused*
    numbers. A group always moves as a whole.

    Walking back from the end, the i-th unused number is taken by the i-th
    group from the top, unless it is larger than that group's major; from
    there on the sequence is already contiguous. The moved groups keep their
    relative order.
    """
    files = list(files)
    boundary = len(files)  # files[boundary:] move
    moving = 0
    for slot in unused:
        if boundary == 0:
            break
        tail_major = files[boundary - 1].major
        if slot > tail_major:
            break
        while boundary > 0 and files[boundary - 1].major == tail_major:
            boundary -= 1
        moving += 1

    slots = iter(unused[:moving])
    i = boundary
    while i < len(files):
        old_major = files[i].major
        new_major = next(slots)
        while i < len(files) and files[i].major == old_major:
            files[i] = replace(files[i], major=new_major)
            i += 1
    return files


def changed_names(files: Iterable[FileDescriptor]) -> List[RenameEntry]:
    renames: List[RenameEntry] = []
    for f in files:
        new_name = render_name(f)
        if new_name != f.original_name:
            renames.append(RenameEntry(f.original_name, new_name))
    return renames


def compute_renames(names: Iterable[str], unused: Sequence[int]) -> List[RenameEntry]:
    """Renames that renumber minors, normalize padding and close major gaps."""
    files = parse_file_names(names)
    if not files:
        return []
    files = renumber_minor_versions(files)
    files = fill_major_gaps(files, unused)
    return changed_names(files)
