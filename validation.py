#!/usr/bin/env python3
"""
validation.py

Check a directory's file names against the numbering scheme

Exposes:
    validate_file_names(names) -> (ValidationErrors, unused_majors)
    index_slots(descriptors) -> (slots, collisions)

Rules:
    - every name parses (see name_codec)
    - no two files share a (major, minor) slot
    - major numbers run 0, 1, 2, ... without gaps
    - a lone file for a major number carries no minor number
    - grouped files are numbered 0, 1, 2, ... without gaps

Errors are collected, never raised; each one is filed under the file name it
concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from name_codec import FileDescriptor, MalformedName, parse_name

MALFORMED = "malformed"
OVERRIDDEN_MAJOR = "overridden-major"
DUPLICATE_MAJOR_MINOR = "duplicate-major-minor"
MAJOR_GAP = "major-gap"
MINOR_MUST_START_AT_ZERO = "minor-must-start-at-zero"
MINOR_GAP = "minor-gap"
MINOR_ON_SINGLE_FILE = "minor-on-single-file"

Slot = Tuple[int, Optional[int]]


@dataclass(frozen=True)
class ValidationIssue:
    kind: str
    message: str

    def __str__(self) -> str:
        return self.message


class ValidationErrors(dict):
    """File name -> issues found for that file, in the order they were found."""

    def add(self, name: str, kind: str, message: str) -> None:
        self.setdefault(name, []).append(ValidationIssue(kind, message))

    def kinds(self, name: str) -> List[str]:
        return [issue.kind for issue in self.get(name, [])]

    def format_report(self) -> str:
        if not self:
            return "No errors found"
        lines = []
        for name in sorted(self):
            for issue in self[name]:
                lines.append(f'"{name}": {issue}')
        return "\n".join(lines)


def index_slots(
    descriptors: Iterable[FileDescriptor],
) -> Tuple[Dict[Slot, str], List[Tuple[Slot, str, str]]]:
    """
    Build the (major, minor) -> file name index in one pass.
    The first file to claim a slot keeps it; every later claimant is returned
    in *collisions* as (slot, owner, newcomer).
    """
    slots: Dict[Slot, str] = {}
    collisions: List[Tuple[Slot, str, str]] = []
    for d in descriptors:
        key = (d.major, d.minor)
        owner = slots.get(key)
        if owner is not None:
            collisions.append((key, owner, d.original_name))
            continue
        slots[key] = d.original_name
    return slots, collisions


def _minor_order(minor: Optional[int]) -> int:
    return -1 if minor is None else minor


def _check_majors(majors: List[int]) -> Tuple[Dict[int, str], List[int]]:
    """Return {major: message} for every jump in *majors* plus the skipped numbers."""
    problems: Dict[int, str] = {}
    unused: List[int] = []
    prev = -1
    for n in majors:
        if n != prev + 1:
            problems[n] = f"Numbering jumped from {prev} to {n}"
            unused.extend(range(prev + 1, n))
        prev = n
    return problems, unused


def _check_minors(minors: List[Optional[int]]) -> Dict[Optional[int], Tuple[str, str]]:
    """Return {minor: (kind, message)} for one major number's sorted minor values."""
    problems: Dict[Optional[int], Tuple[str, str]] = {}
    if len(minors) == 1:
        if minors[0] is not None:
            problems[minors[0]] = (
                MINOR_ON_SINGLE_FILE,
                f"Minor version {minors[0]} on single file",
            )
        return problems

    first = True
    prev: Optional[int] = None
    for n in minors:
        if first:
            if n != 0:
                problems[n] = (MINOR_MUST_START_AT_ZERO, "Minor version numbering must start with 0")
        elif prev is None:
            # a file without a minor can't share its major with numbered ones
            problems[n] = (MINOR_MUST_START_AT_ZERO, "Minor version numbering must start with 0")
        elif n != prev + 1:
            problems[n] = (MINOR_GAP, f"Minor numbering jumped from {prev} to {n}")
        first = False
        prev = n
    return problems


def validate_file_names(names: Iterable[str]) -> Tuple[ValidationErrors, List[int]]:
    """Validate *names*; returns the errors and the sorted unused major numbers."""
    errors = ValidationErrors()
    parsed: List[FileDescriptor] = []
    for name in names:
        try:
            parsed.append(parse_name(name))
        except MalformedName as e:
            errors.add(name, MALFORMED, str(e))

    slots, collisions = index_slots(parsed)
    for (major, minor), owner, newcomer in collisions:
        if minor is None:
            kind = OVERRIDDEN_MAJOR
            text = f'Overridden Major Number {major} for files: "{owner}", "{newcomer}"'
        else:
            kind = DUPLICATE_MAJOR_MINOR
            text = f'Duplicate Major/Minor {major}-{minor} for files: "{owner}", "{newcomer}"'
        errors.add(newcomer, kind, text)
        errors.add(owner, kind, text)

    by_major: Dict[int, List[Optional[int]]] = {}
    for major, minor in sorted(slots, key=lambda k: (k[0], _minor_order(k[1]))):
        by_major.setdefault(major, []).append(minor)

    major_problems, unused = _check_majors(sorted(by_major))
    for major, text in major_problems.items():
        # report on the first file of the group
        name = slots[(major, by_major[major][0])]
        errors.add(name, MAJOR_GAP, f"{text}: {name}")

    for major, minors in by_major.items():
        for minor, (kind, text) in _check_minors(minors).items():
            name = slots[(major, minor)]
            errors.add(name, kind, f"{text}: {name}")

    return errors, sorted(unused)
