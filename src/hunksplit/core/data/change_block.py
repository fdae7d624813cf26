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

from dataclasses import dataclass, field

from hunksplit.core.data.line_changes import DiffLine, is_change


@dataclass(frozen=True)
class ChangeBlock:
    """
    A single hunk of a file diff.

    Responsibilities:
    - Keeps the header positions of the hunk in the old and new file
    - Keeps every context, added and removed line in diff order
    - Never changes once parsed; line indices are positions in `lines`
    """

    # unique across the whole diff, assigned by the parser in diff order
    id: int
    file_path: str
    old_start: int
    old_len: int
    new_start: int
    new_len: int
    lines: tuple[DiffLine, ...] = field(default_factory=tuple)
    # trailing text of the header line, usually the enclosing function
    section: str = ""

    @property
    def lines_before(self) -> int:
        """
        Number of original lines that precede this block.

        For a pure insertion git names the line after which the new lines go,
        otherwise it names the first line the block covers.
        """
        if self.old_len == 0:
            return self.old_start
        return max(0, self.old_start - 1)

    @property
    def changed_line_count(self) -> int:
        return sum(1 for line in self.lines if is_change(line))

    def changed_indices(self) -> list[int]:
        return [i for i, line in enumerate(self.lines) if is_change(line)]
