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

from dataclasses import dataclass


@dataclass(frozen=True)
class AssembledPatch:
    """
    The patch of one group, covering every file the group touches.
    """

    commit_id: str
    message: str
    description: str
    patch: str

    @property
    def full_message(self) -> str:
        if self.description:
            return f"{self.message}\n\n{self.description}"
        return self.message

    @property
    def is_empty(self) -> bool:
        return not self.patch.strip()


@dataclass(frozen=True)
class PatchCheck:
    valid: bool
    error: str | None = None
