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

"""
Parsing of git's unified diff output into FileDiff / ChangeBlock objects.

Only what splitting needs is kept: paths, whether a file is new, and every
block with its lines. Modes, index lines and similarity scores are skipped.
Lines are split on "\\n" only so a "\\r" at the end of a content line stays
part of the content.
"""

import re
from dataclasses import replace

from loguru import logger

from hunksplit.core.data.change_block import ChangeBlock
from hunksplit.core.data.file_diff import FileDiff
from hunksplit.core.data.line_changes import Addition, Context, DiffLine, Removal
from hunksplit.core.exceptions import DiffParseError, malformed_hunk_header

_DIFF_HEADER_RE = re.compile(r"^diff --git a/(?P<old>.+?) b/(?P<new>.+)$")
_HUNK_HEADER_RE = re.compile(
    r"^@@ -(?P<old_start>\d+)(?:,(?P<old_len>\d+))?"
    r" \+(?P<new_start>\d+)(?:,(?P<new_len>\d+))?"
    r" @@ ?(?P<section>.*)$"
)
DEVNULL = "/dev/null"


class _FileSection:
    def __init__(self, old_path: str | None, new_path: str | None):
        self.old_path = old_path
        self.new_path = new_path
        self.is_new_file = False
        self.is_deleted = False
        self.is_binary = False
        self.blocks: list[ChangeBlock] = []

    @property
    def path(self) -> str:
        if self.is_deleted or not self.new_path:
            return self.old_path or ""
        return self.new_path

    @property
    def renamed_from(self) -> str | None:
        if self.is_new_file or self.is_deleted:
            return None
        if self.old_path and self.new_path and self.old_path != self.new_path:
            return self.old_path
        return None

    def to_file_diff(self) -> FileDiff:
        return FileDiff(
            path=self.path,
            is_new_file=self.is_new_file,
            blocks=tuple(replace(block, file_path=self.path) for block in self.blocks),
            old_path=self.renamed_from,
            is_deleted=self.is_deleted,
        )


def _strip_prefix(path: str, prefix: str) -> str:
    path = path.rstrip("\t")
    if path.startswith(prefix):
        return path[len(prefix) :]
    return path


def _parse_block(
    lines: list[str], start: int, block_id: int, file_path: str
) -> tuple[ChangeBlock, int]:
    header = lines[start]
    match = _HUNK_HEADER_RE.match(header)
    if not match:
        raise malformed_hunk_header(header)

    old_start = int(match.group("old_start"))
    old_len = int(match.group("old_len")) if match.group("old_len") is not None else 1
    new_start = int(match.group("new_start"))
    new_len = int(match.group("new_len")) if match.group("new_len") is not None else 1

    body: list[DiffLine] = []
    old_left, new_left = old_len, new_len
    i = start + 1

    while old_left > 0 or new_left > 0:
        if i >= len(lines):
            raise DiffParseError(
                f"Truncated block in {file_path}: {header}",
                f"{old_left} original and {new_left} new line(s) missing",
            )
        line = lines[i]
        i += 1

        if line.startswith("\\"):
            if body:
                body[-1] = replace(body[-1], no_newline=True)
            continue

        # some tools strip the single space of an empty context line
        if line == "" or line.startswith(" "):
            body.append(Context(line[1:]))
            old_left -= 1
            new_left -= 1
        elif line.startswith("+"):
            body.append(Addition(line[1:]))
            new_left -= 1
        elif line.startswith("-"):
            body.append(Removal(line[1:]))
            old_left -= 1
        else:
            raise DiffParseError(
                f"Unexpected line in block of {file_path}: {line!r}",
                f"Block header: {header}",
            )

        if old_left < 0 or new_left < 0:
            raise DiffParseError(
                f"Block body of {file_path} does not match its header",
                f"Block header: {header}",
            )

    # the marker may follow the last line of the block
    if i < len(lines) and lines[i].startswith("\\"):
        if body:
            body[-1] = replace(body[-1], no_newline=True)
        i += 1

    block = ChangeBlock(
        id=block_id,
        file_path=file_path,
        old_start=old_start,
        old_len=old_len,
        new_start=new_start,
        new_len=new_len,
        lines=tuple(body),
        section=match.group("section").strip(),
    )
    return block, i


def parse_unified_diff(raw_diff: str) -> list[FileDiff]:
    """
    Parse `git diff` / `git show` output into one FileDiff per file section.

    Anything before the first `diff --git` line (such as commit headers of
    `git show`) is ignored. Binary sections produce a FileDiff without
    blocks. Block ids are assigned from 0 in diff order across all files.

    Raises:
        DiffParseError: a block header is malformed or a block body does not
            match the line counts of its header.
    """
    lines = raw_diff.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    files: list[FileDiff] = []
    next_block_id = 0
    i = 0

    while i < len(lines) and not lines[i].startswith("diff --git "):
        i += 1

    while i < len(lines):
        header_match = _DIFF_HEADER_RE.match(lines[i])
        section = (
            _FileSection(header_match.group("old"), header_match.group("new"))
            if header_match
            else _FileSection(None, None)
        )
        i += 1

        while i < len(lines) and not lines[i].startswith(("diff --git ", "@@")):
            line = lines[i]
            if line.startswith("new file mode"):
                section.is_new_file = True
            elif line.startswith("deleted file mode"):
                section.is_deleted = True
            elif line.startswith("rename from "):
                section.old_path = line[len("rename from ") :]
            elif line.startswith("rename to "):
                section.new_path = line[len("rename to ") :]
            elif line.startswith("Binary files ") or line.startswith("GIT binary patch"):
                section.is_binary = True
            elif line.startswith("--- "):
                old = line[4:].rstrip("\t")
                if old == DEVNULL:
                    section.is_new_file = True
                else:
                    section.old_path = _strip_prefix(old, "a/")
            elif line.startswith("+++ "):
                new = line[4:].rstrip("\t")
                if new == DEVNULL:
                    section.is_deleted = True
                else:
                    section.new_path = _strip_prefix(new, "b/")
            i += 1

        if section.is_binary:
            logger.debug("Skipping binary section for {path}", path=section.path)
            while i < len(lines) and not lines[i].startswith("diff --git "):
                i += 1

        while i < len(lines) and lines[i].startswith("@@"):
            block, i = _parse_block(lines, i, next_block_id, section.path)
            section.blocks.append(block)
            next_block_id += 1

        # stray text between sections, e.g. trailing notes of git show
        while i < len(lines) and not lines[i].startswith("diff --git "):
            i += 1

        if not section.path:
            logger.warning("Skipping diff section without a file path")
            continue

        files.append(section.to_file_diff())

    logger.debug(
        "Parsed diff: files={files} blocks={blocks}",
        files=len(files),
        blocks=next_block_id,
    )
    return files
