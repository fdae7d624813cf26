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

from loguru import logger

from hunksplit.core.data.assembled_patch import AssembledPatch
from hunksplit.core.data.file_diff import FileDiff
from hunksplit.core.data.line_range import CommitChanges, LineRange
from hunksplit.core.diff_generation.diff_generator import DiffGenerator
from hunksplit.core.diff_generation.unified_diff_generator import UnifiedDiffGenerator
from hunksplit.core.file_reader.protocol import FileReader
from hunksplit.core.reconstruct.replay import replay


class PatchAssembler:
    """
    Builds one patch per group from the partition of a diff.

    For each group it recomputes the full state of every touched file twice,
    from the ORIGINAL content: once with the ranges of all earlier groups and
    once including the group's own ranges. The patch is the diff between the
    two, so hunk headers never depend on line numbers of the original diff.

    A renamed file is renamed by the first group that touches it. A rename
    without content changes goes to the first group that has a patch. A
    deleted file is deleted by the group that removes its last line.
    """

    def __init__(
        self,
        file_reader: FileReader,
        base_revision: str,
        diff_generator: DiffGenerator | None = None,
    ):
        self.file_reader = file_reader
        self.base_revision = base_revision
        self.diff_generator = diff_generator or UnifiedDiffGenerator()

    def load_original_contents(self, files: list[FileDiff]) -> dict[str, str]:
        """Original content of each file keyed by its new path; renames are read from the old path."""
        contents: dict[str, str] = {}
        for file in files:
            if file.path in contents:
                continue
            if file.is_new_file or not file.blocks:
                contents[file.path] = ""
                continue

            content = self.file_reader.read(self.base_revision, file.source_path)
            if content is None:
                logger.warning(
                    "No content for {path} at {rev}; treating it as empty",
                    path=file.source_path,
                    rev=self.base_revision,
                )
            contents[file.path] = content or ""
        return contents

    def assemble(
        self, files: list[FileDiff], commit_changes: list[CommitChanges]
    ) -> list[AssembledPatch]:
        files_by_path: dict[str, FileDiff] = {}
        for file in files:
            files_by_path.setdefault(file.path, file)

        originals = self.load_original_contents(files)
        cumulative: dict[str, list[LineRange]] = {}
        introduced: set[str] = set()
        renamed: set[str] = set()
        parts_per_commit: list[list[str]] = []

        for commit in commit_changes:
            patch_parts: list[str] = []

            for file_change in commit.file_changes:
                path = file_change.file_path
                file = files_by_path.get(path)
                if file is None:
                    logger.warning(
                        "Group {group} references unknown file {path}; skipping",
                        group=commit.commit_id,
                        path=path,
                    )
                    continue

                original = originals[path]
                previous = cumulative.get(path, [])
                current = previous + file_change.ranges
                cumulative[path] = current

                before = replay(original, file.blocks, previous)
                after = replay(original, file.blocks, current)

                is_creation = (
                    file.is_new_file
                    and path not in introduced
                    and before == ""
                    and after != ""
                )
                old_path = (
                    file.old_path if file.is_rename and path not in renamed else None
                )
                is_deletion = file.is_deleted and before != "" and after == ""

                fragment = self.diff_generator.generate(
                    path,
                    before,
                    after,
                    is_creation,
                    old_path=old_path,
                    is_deleted=is_deletion,
                )
                if not fragment:
                    logger.debug(
                        "Group {group} makes no net change to {path}",
                        group=commit.commit_id,
                        path=path,
                    )
                    continue

                patch_parts.append(fragment)
                if is_creation:
                    introduced.add(path)
                if old_path is not None:
                    renamed.add(path)

            parts_per_commit.append(patch_parts)

        self._attach_pure_renames(files, renamed, parts_per_commit)

        results: list[AssembledPatch] = []
        for commit, patch_parts in zip(commit_changes, parts_per_commit, strict=True):
            results.append(
                AssembledPatch(
                    commit_id=commit.commit_id,
                    message=commit.message,
                    description=commit.description,
                    patch="".join(patch_parts),
                )
            )
            logger.debug(
                "Assembled patch for {group}: files={files} bytes={size}",
                group=commit.commit_id,
                files=len(patch_parts),
                size=len(results[-1].patch),
            )

        return results

    def _attach_pure_renames(
        self,
        files: list[FileDiff],
        renamed: set[str],
        parts_per_commit: list[list[str]],
    ) -> None:
        pending = [f for f in files if f.is_rename and f.path not in renamed]
        if not pending:
            return
        if not parts_per_commit:
            logger.warning(
                "No group to carry {count} rename(s); dropping them",
                count=len(pending),
            )
            return

        target = next((parts for parts in parts_per_commit if parts), parts_per_commit[0])
        for file in pending:
            target.append(
                self.diff_generator.generate(
                    file.path, "", "", False, old_path=file.old_path
                )
            )
            renamed.add(file.path)
            logger.debug(
                "Rename {old} -> {new} has no content changes; attached to a group",
                old=file.old_path,
                new=file.path,
            )
