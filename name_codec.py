#!/usr/bin/env python3
"""
name_codec.py

Parse and render sequentially numbered image file names

Exposes:
    parse_name(name) -> FileDescriptor          (raises MalformedName)
    render_name(descriptor) -> str
    sort_key(descriptor) -> tuple
    suggest_fix(name) -> str | None

Naming scheme:
    0000.jpg, 0001.jpg, ...        one file per major number
    0003-0.jpg, 0003-1.jpg, ...    minor versions for grouped files
    0004-note.jpg, 0003-2-note.jpg text tag on a file name
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

IMAGE_EXTENSIONS = ("jpg", "png", "gif")

# major, -minor, -tag, extension
FILE_NAME_RE = re.compile(
    r"^([0-9]+)(-[0-9]+)?(-[A-Za-z][A-Za-z0-9]+)?\.(" + "|".join(IMAGE_EXTENSIONS) + r")$"
)

# (pattern, replacement) pairs for common typos, e.g. 0012_1.jpg or 0012.JPG
AUTO_FIXES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"^([0-9]{4})_([0-9]+)\.(jpg|png|gif)$"), r"\1-\2.\3"),
    (re.compile(r"^([0-9]{4})\.JPG$"), r"\1.jpg"),
    (re.compile(r"^([0-9]{4})-([0-9]+)\.JPG$"), r"\1-\2.jpg"),
]


class MalformedName(ValueError):
    """Raised when a file name does not follow the major[-minor][-tag].ext scheme."""

    def __init__(self, name: str):
        super().__init__(f"Bad filename: {name}")
        self.name = name


@dataclass(frozen=True)
class FileDescriptor:
    major: int
    minor: Optional[int]
    major_digits: int
    minor_digits: int
    tag: str
    extension: str
    original_name: str


def parse_name(name: str) -> FileDescriptor:
    m = FILE_NAME_RE.fullmatch(name)
    if not m:
        raise MalformedName(name)
    major_text, minor_part, tag, ext = m.groups()
    major = int(major_text)
    minor = int(minor_part[1:]) if minor_part else None
    return FileDescriptor(
        major=major,
        minor=minor,
        # natural width of the value; padding is recomputed on render
        major_digits=len(str(major)),
        minor_digits=len(str(minor)) if minor is not None else 0,
        tag=tag or "",
        extension=ext,
        original_name=name,
    )


def _pad(n: int, width: int) -> str:
    return str(n).zfill(width)


def render_name(f: FileDescriptor) -> str:
    """Canonical file name for *f*; padding widths never drop digits."""
    parts = [_pad(f.major, f.major_digits)]
    if f.minor is not None:
        parts.append("-" + _pad(f.minor, f.minor_digits))
    # the tag already carries its leading dash
    parts.append(f.tag)
    return "".join(parts) + "." + f.extension


def sort_key(f: FileDescriptor) -> Tuple[int, int]:
    """Order by major, then minor; a missing minor sorts before minor 0."""
    return (f.major, -1 if f.minor is None else f.minor)


def suggest_fix(name: str) -> Optional[str]:
    """Return the corrected name for a known typo, or None if *name* isn't fixable."""
    for pattern, replacement in AUTO_FIXES:
        if pattern.fullmatch(name):
            return pattern.sub(replacement, name)
    return None
