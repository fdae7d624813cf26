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

from hunksplit.core.data.line_changes import ChangeKind


@dataclass(frozen=True)
class LineRange:
    """
    A maximal run of consecutive same-type lines of one block that belong to
    the same group. Indices are inclusive positions in the block's lines.
    """

    block_id: int
    start_index: int
    end_index: int
    kind: ChangeKind
    lines: tuple[str, ...]
    # 1-indexed line in the old file where a removal run begins
    start_old_line: int | None = None
    # 1-indexed line in the new file where an addition run begins
    start_new_line: int | None = None

    @property
    def line_count(self) -> int:
        return self.end_index - self.start_index + 1

    @property
    def span_key(self) -> tuple[int, int, int]:
        return (self.block_id, self.start_index, self.end_index)

    def indices(self) -> range:
        return range(self.start_index, self.end_index + 1)


@dataclass
class FileChanges:
    file_path: str
    ranges: list[LineRange] = field(default_factory=list)


@dataclass
class CommitChanges:
    """
    Every range assigned to one group, per file, in diff file order.
    """

    commit_id: str
    message: str
    description: str = ""
    file_changes: list[FileChanges] = field(default_factory=list)

    def ranges_for(self, file_path: str) -> list[LineRange]:
        for file_change in self.file_changes:
            if file_change.file_path == file_path:
                return file_change.ranges
        return []

    @property
    def line_count(self) -> int:
        return sum(
            len(r.lines) for change in self.file_changes for r in change.ranges
        )


@dataclass(frozen=True)
class PartitionValidation:
    valid: bool
    errors: tuple[str, ...] = ()
