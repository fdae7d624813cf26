# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from hunksplit.core.data.change_block import ChangeBlock
from hunksplit.core.data.line_changes import Addition, Context, Removal
from hunksplit.core.data.line_range import LineRange
from hunksplit.core.reconstruct.replay import replay, selected_indices
from hunksplit.core.utils.text import split_lines

ORIGINAL = "a\nb\nc\n"

BLOCK = ChangeBlock(
    id=0,
    file_path="f.py",
    old_start=1,
    old_len=3,
    new_start=1,
    new_len=4,
    lines=(Context("a"), Removal("b"), Addition("B1"), Addition("B2"), Context("c")),
)

REMOVE_B = LineRange(0, 1, 1, "-", ("b",), start_old_line=2)
ADD_B1 = LineRange(0, 2, 2, "+", ("B1",), start_new_line=2)
ADD_B2 = LineRange(0, 3, 3, "+", ("B2",), start_new_line=3)


def test_split_lines_keeps_endings():
    assert split_lines("") == []
    assert split_lines("a\nb") == ["a\n", "b"]
    assert split_lines("a\r\n\n") == ["a\r\n", "\n"]


def test_selected_indices_groups_by_block():
    ranges = [REMOVE_B, ADD_B1, LineRange(7, 0, 2, "+", ("x", "y", "z"))]
    assert selected_indices(ranges) == {0: {1, 2}, 7: {0, 1, 2}}


def test_no_selection_reproduces_original():
    assert replay(ORIGINAL, [BLOCK], []) == ORIGINAL


def test_full_selection_produces_new_content():
    assert replay(ORIGINAL, [BLOCK], [REMOVE_B, ADD_B1, ADD_B2]) == "a\nB1\nB2\nc\n"


def test_partial_selections():
    assert replay(ORIGINAL, [BLOCK], [REMOVE_B, ADD_B1]) == "a\nB1\nc\n"
    # an addition without its removal keeps the original line
    assert replay(ORIGINAL, [BLOCK], [ADD_B2]) == "a\nb\nB2\nc\n"
    assert replay(ORIGINAL, [BLOCK], [REMOVE_B]) == "a\nc\n"


def test_lines_outside_blocks_are_copied():
    original = "".join(f"{i}\n" for i in range(1, 11))
    block = ChangeBlock(
        id=3,
        file_path="n.txt",
        old_start=4,
        old_len=1,
        new_start=4,
        new_len=1,
        lines=(Removal("4"), Addition("four")),
    )
    selected = [
        LineRange(3, 0, 0, "-", ("4",), start_old_line=4),
        LineRange(3, 1, 1, "+", ("four",), start_new_line=4),
    ]

    assert replay(original, [block], selected) == original.replace("4\n", "four\n")


def test_pure_insertion_goes_after_named_line():
    block = ChangeBlock(
        id=0,
        file_path="i.txt",
        old_start=2,
        old_len=0,
        new_start=3,
        new_len=1,
        lines=(Addition("X"),),
    )
    selected = [LineRange(0, 0, 0, "+", ("X",), start_new_line=3)]

    assert replay("1\n2\n3\n", [block], selected) == "1\n2\nX\n3\n"


def test_multiple_blocks_in_one_file():
    first = ChangeBlock(0, "m.txt", 1, 1, 1, 1, (Removal("1"), Addition("one")))
    second = ChangeBlock(1, "m.txt", 3, 1, 3, 2, (Context("3"), Addition("3.5")))
    original = "1\n2\n3\n4\n"

    only_second = [LineRange(1, 1, 1, "+", ("3.5",), start_new_line=4)]
    both = only_second + [
        LineRange(0, 0, 0, "-", ("1",), start_old_line=1),
        LineRange(0, 1, 1, "+", ("one",), start_new_line=1),
    ]

    assert replay(original, [first, second], only_second) == "1\n2\n3\n3.5\n4\n"
    assert replay(original, [first, second], both) == "one\n2\n3\n3.5\n4\n"


def test_missing_final_newline_round_trips():
    block = ChangeBlock(
        id=0,
        file_path="n.txt",
        old_start=1,
        old_len=2,
        new_start=1,
        new_len=3,
        lines=(
            Context("a"),
            Removal("b", no_newline=True),
            Addition("b"),
            Addition("c", no_newline=True),
        ),
    )
    replace_b = [
        LineRange(0, 1, 1, "-", ("b",), start_old_line=2),
        LineRange(0, 2, 2, "+", ("b",), start_new_line=2),
    ]
    add_c = [LineRange(0, 3, 3, "+", ("c",), start_new_line=3)]

    assert replay("a\nb", [block], replace_b + add_c) == "a\nb\nc"
    assert replay("a\nb", [block], replace_b) == "a\nb\n"
    # a line placed after the unterminated one gives it a newline
    assert replay("a\nb", [block], add_c) == "a\nb\nc"


def test_new_file_from_empty_original():
    block = ChangeBlock(
        id=0,
        file_path="F",
        old_start=0,
        old_len=0,
        new_start=1,
        new_len=3,
        lines=(Addition("A"), Addition("B"), Addition("C")),
    )

    assert replay("", [block], [LineRange(0, 0, 0, "+", ("A",), start_new_line=1)]) == "A\n"
    assert replay("", [block], []) == ""


def test_no_blocks_returns_original_unchanged():
    assert replay("keep\r\nme", [], [ADD_B1]) == "keep\r\nme"
