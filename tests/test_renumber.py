import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from renumber import (
    RenameEntry,
    compute_renames,
    fill_major_gaps,
    normalize_widths,
    parse_file_names,
    renumber_minor_versions,
)
from validation import validate_file_names


def _apply(names, renames):
    mapping = dict(renames)
    return [mapping.get(n, n) for n in names]


def test_no_files():
    assert compute_renames([], []) == []


def test_single_file_moves_to_gap():
    assert compute_renames(["1.jpg"], [0]) == [RenameEntry("1.jpg", "0.jpg")]


def test_single_file_moves_to_lowest_gap():
    assert compute_renames(["5.jpg"], [0, 1, 2, 3, 4]) == [RenameEntry("5.jpg", "0.jpg")]


def test_rename_fill_gaps():
    files = ["1.jpg", "2-Foo.jpg", "5-0-Foo.jpg", "5-1.jpg", "5-2.jpg", "6.jpg"]
    assert compute_renames(files, [0, 3, 4]) == [
        RenameEntry("5-0-Foo.jpg", "0-0-Foo.jpg"),
        RenameEntry("5-1.jpg", "0-1.jpg"),
        RenameEntry("5-2.jpg", "0-2.jpg"),
        RenameEntry("6.jpg", "3.jpg"),
    ]


def test_rename_major_version_digits():
    files = [f"{i}.jpg" for i in range(11)]
    expected = [RenameEntry(f"{i}.jpg", f"0{i}.jpg") for i in range(10)]
    assert compute_renames(files, []) == expected


def test_rename_minor_version_digits():
    files = ["0.jpg", "1-0.jpg", "2-1.jpg", "2-3.jpg"] + [f"3-{i}.jpg" for i in range(11)]
    expected = [
        RenameEntry("1-0.jpg", "1.jpg"),
        RenameEntry("2-1.jpg", "2-0.jpg"),
        RenameEntry("2-3.jpg", "2-1.jpg"),
    ] + [RenameEntry(f"3-{i}.jpg", f"3-0{i}.jpg") for i in range(10)]
    assert sorted(compute_renames(files, [])) == sorted(expected)


def test_padding_follows_the_largest_number():
    assert compute_renames(["0000.jpg", "0001.jpg", "2.jpg"], []) == [
        RenameEntry("0000.jpg", "0.jpg"),
        RenameEntry("0001.jpg", "1.jpg"),
    ]


def test_extra_digit_dropped_on_next_run():
    assert compute_renames(["10.jpg"], list(range(10))) == [RenameEntry("10.jpg", "00.jpg")]
    assert compute_renames(["00.jpg"], []) == [RenameEntry("00.jpg", "0.jpg")]


def test_moved_groups_keep_their_order():
    assert compute_renames(["3.jpg", "4.jpg"], [0, 1, 2]) == [
        RenameEntry("3.jpg", "0.jpg"),
        RenameEntry("4.jpg", "1.jpg"),
    ]


def test_leftover_gaps_are_not_used():
    # 9 fills 1; 2..8 stay unused in this pass
    files = ["0.jpg", "9.jpg"]
    assert compute_renames(files, list(range(1, 9))) == [RenameEntry("9.jpg", "1.jpg")]


def test_malformed_names_are_skipped():
    assert compute_renames(["foo.jpg", "1.jpg"], [0]) == [RenameEntry("1.jpg", "0.jpg")]


def test_output_is_stable_on_second_run():
    files = ["1.jpg", "2-Foo.jpg", "5-0-Foo.jpg", "5-1.jpg", "5-3.jpg", "7-4.jpg", "9.png"]
    _, unused = validate_file_names(files)
    renamed = _apply(files, compute_renames(files, unused))

    errors, unused = validate_file_names(renamed)
    assert errors == {}
    assert unused == []
    assert compute_renames(renamed, unused) == []


def test_stages_do_not_modify_their_input():
    files = parse_file_names(["2-1.jpg", "2-3.jpg", "10.jpg"])
    snapshot = list(files)
    renumbered = renumber_minor_versions(files)
    assert files == snapshot
    moved = fill_major_gaps(renumbered, [0, 1])
    assert [f.major for f in renumbered] == [2, 2, 10]
    assert [f.major for f in moved] == [0, 0, 1]


def test_normalize_widths_per_major():
    files = normalize_widths(parse_file_names(["1-0.jpg", "1-10.jpg", "2-0.jpg", "2-1.jpg", "100.jpg"]))
    assert {f.major_digits for f in files} == {3}
    assert [(f.major, f.minor_digits) for f in files] == [(1, 2), (1, 2), (2, 1), (2, 1), (100, 0)]


def test_fill_major_gaps_moves_whole_groups():
    files = renumber_minor_versions(parse_file_names(["0.jpg", "3-0.jpg", "3-1.jpg", "3-2.jpg"]))
    moved = fill_major_gaps(files, [1, 2])
    assert [(f.major, f.minor) for f in moved] == [(0, None), (1, 0), (1, 1), (1, 2)]
