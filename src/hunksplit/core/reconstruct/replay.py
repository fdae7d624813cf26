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

from collections.abc import Iterable, Sequence

from hunksplit.core.data.change_block import ChangeBlock
from hunksplit.core.data.line_changes import Addition, Removal
from hunksplit.core.data.line_range import LineRange
from hunksplit.core.utils.text import split_lines


def selected_indices(ranges: Iterable[LineRange]) -> dict[int, set[int]]:
    """Block id -> line indices covered by the given ranges."""
    selected: dict[int, set[int]] = {}
    for line_range in ranges:
        selected.setdefault(line_range.block_id, set()).update(line_range.indices())
    return selected


def _push(result: list[str], line: str) -> None:
    # a line without newline can only stay last; anything after it needs one
    if result and not result[-1].endswith("\n"):
        result[-1] += "\n"
    result.append(line)


def replay(
    original_content: str,
    blocks: Sequence[ChangeBlock],
    selected_ranges: Iterable[LineRange],
) -> str:
    """
    Rebuild a file from its original content and a selection of changed lines.

    Selected additions are written, selected removals drop their original
    line, and every other line of the original is kept. The result depends
    only on the arguments, so "state after group N" is replay with the ranges
    of groups 1..N.
    """
    if not blocks:
        return original_content

    selected = selected_indices(selected_ranges)
    original_lines = split_lines(original_content)
    result: list[str] = []
    cursor = 0

    for block in blocks:
        while cursor < block.lines_before and cursor < len(original_lines):
            _push(result, original_lines[cursor])
            cursor += 1

        chosen = selected.get(block.id, set())
        for index, line in enumerate(block.lines):
            if isinstance(line, Addition):
                if index in chosen:
                    _push(result, line.as_text())
            elif isinstance(line, Removal):
                if index not in chosen and cursor < len(original_lines):
                    _push(result, original_lines[cursor])
                cursor += 1
            else:
                if cursor < len(original_lines):
                    _push(result, original_lines[cursor])
                cursor += 1

    while cursor < len(original_lines):
        _push(result, original_lines[cursor])
        cursor += 1

    return "".join(result)
