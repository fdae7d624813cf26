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

from abc import ABC, abstractmethod

DEVNULL = "/dev/null"
NO_NEWLINE_MARKER = "\\ No newline at end of file"


class DiffGenerator(ABC):
    """
    Turns two full states of one file into a textual patch fragment.
    """

    @abstractmethod
    def generate(
        self,
        path: str,
        before: str,
        after: str,
        is_new_file: bool,
        old_path: str | None = None,
        is_deleted: bool = False,
    ) -> str:
        """
        Return a git style patch fragment taking `path` from `before` to
        `after`, or an empty string when the two are equal and nothing is
        renamed.

        When is_new_file is True the fragment announces the file as created.
        When old_path differs from path the fragment renames old_path to path,
        even if the content is unchanged. When is_deleted is True the
        fragment removes the file.
        """

    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """
        Sanitize a filename for use in git patch headers.

        - Normalizes Windows separators.
        - Removes surrounding whitespace and trailing tabs.
        """
        return filename.replace("\\", "/").rstrip("\t").strip()
