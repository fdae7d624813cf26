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

import difflib

from hunksplit.core.diff_generation.diff_generator import (
    DEVNULL,
    NO_NEWLINE_MARKER,
    DiffGenerator,
)
from hunksplit.core.utils.text import split_lines


class UnifiedDiffGenerator(DiffGenerator):
    """
    Produces `git apply` compatible fragments with difflib.

    Hunk headers are computed from the two full file states, so they are
    always valid for the state the fragment is applied to.
    """

    def __init__(self, context_lines: int = 3, file_mode: str = "100644"):
        if context_lines < 0:
            raise ValueError("context_lines must be >= 0")
        self.context_lines = context_lines
        self.file_mode = file_mode

    def generate(
        self,
        path: str,
        before: str,
        after: str,
        is_new_file: bool,
        old_path: str | None = None,
        is_deleted: bool = False,
    ) -> str:
        path = self.sanitize_filename(path)
        old_path = self.sanitize_filename(old_path) if old_path else path
        is_rename = old_path != path

        if before == after and not is_rename:
            return ""

        out = [f"diff --git a/{old_path} b/{path}\n"]
        if is_new_file:
            out.append(f"new file mode {self.file_mode}\n")
        elif is_deleted:
            out.append(f"deleted file mode {self.file_mode}\n")

        if is_rename:
            if before == after:
                out.append("similarity index 100%\n")
            out.append(f"rename from {old_path}\n")
            out.append(f"rename to {path}\n")

        if before == after:
            return "".join(out)

        old_label = DEVNULL if is_new_file else f"a/{old_path}"
        new_label = DEVNULL if is_deleted else f"b/{path}"

        body = difflib.unified_diff(
            split_lines(before),
            split_lines(after),
            fromfile=old_label,
            tofile=new_label,
            n=self.context_lines,
        )

        for line in body:
            if line.endswith("\n"):
                out.append(line)
            else:
                out.append(line + "\n" + NO_NEWLINE_MARKER + "\n")

        return "".join(out)
