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

from hunksplit.core.git_interface.interface import GitInterface


class GitFileReader:
    def __init__(self, git: GitInterface):
        self.git = git

    def read(self, revision: str, path: str) -> str | None:
        """
        Returns the file content at `revision` using git cat-file, or None if
        the file does not exist there.
        """
        # rel_path should be in posix format for git
        rel_path_git = path.replace("\\", "/").strip()
        return self.git.run_git_text_out(["cat-file", "-p", f"{revision}:{rel_path_git}"])


class MappingFileReader:
    """Serves file content from memory, keyed by (revision, path)."""

    def __init__(self, contents: dict[tuple[str, str], str]):
        self.contents = contents

    def read(self, revision: str, path: str) -> str | None:
        return self.contents.get((revision, path))
