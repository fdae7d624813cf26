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

from typing import Protocol


class FileReader(Protocol):
    """An interface for reading file content at a revision."""

    def read(self, revision: str, path: str) -> str | None:
        """
        Reads the content of a file.

        Args:
            revision: Any revision the backing store understands, e.g. "abc123~1".
            path: The path of the file inside the repository.

        Returns:
            The file content as a string, or None if it doesn't exist at
            that revision.
        """
        ...
