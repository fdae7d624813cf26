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

from hunksplit.core.data.change_block import ChangeBlock


@dataclass(frozen=True)
class FileDiff:
    """
    All change blocks of one file, in the order they appear in the diff.

    `path` is where the file lives after the change. For a deleted file that
    is its last path.
    """

    path: str
    # the file did not exist before the change
    is_new_file: bool = False
    blocks: tuple[ChangeBlock, ...] = field(default_factory=tuple)
    # set only for renames; original content is read from here
    old_path: str | None = None
    # the file no longer exists after the change
    is_deleted: bool = False

    @property
    def source_path(self) -> str:
        return self.old_path or self.path

    @property
    def is_rename(self) -> bool:
        return self.old_path is not None and self.old_path != self.path

    @property
    def changed_line_count(self) -> int:
        return sum(block.changed_line_count for block in self.blocks)


def total_changed_lines(files: list[FileDiff]) -> int:
    return sum(file.changed_line_count for file in files)
