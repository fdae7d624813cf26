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
from typing import Literal

from loguru import logger

from hunksplit.core.data.change_block import ChangeBlock
from hunksplit.core.data.classification import Classification
from hunksplit.core.data.commit_plan import CommitPlan
from hunksplit.core.data.file_diff import FileDiff, total_changed_lines
from hunksplit.core.data.line_changes import Addition, ChangeKind, Removal
from hunksplit.core.data.line_range import (
    CommitChanges,
    FileChanges,
    LineRange,
    PartitionValidation,
)
from hunksplit.core.exceptions import UnclassifiedLineError, empty_plan

UnclassifiedPolicy = Literal["first_group", "error"]


@dataclass
class _OpenRange:
    group_id: str
    kind: ChangeKind
    start_index: int
    start_old_line: int | None
    start_new_line: int | None
    lines: list[str] = field(default_factory=list)

    @property
    def next_index(self) -> int:
        return self.start_index + len(self.lines)

    def close(self, block_id: int) -> LineRange:
        return LineRange(
            block_id=block_id,
            start_index=self.start_index,
            end_index=self.next_index - 1,
            kind=self.kind,
            lines=tuple(self.lines),
            start_old_line=self.start_old_line,
            start_new_line=self.start_new_line,
        )


class _GroupResolver:
    """Looks up the group of a changed line and applies the unclassified policy."""

    def __init__(
        self,
        plan: list[CommitPlan],
        classification: Classification,
        policy: UnclassifiedPolicy,
    ):
        self.known_ids = {commit.id for commit in plan}
        self.fallback_id = plan[0].id if plan else None
        self.classification = classification
        self.policy = policy
        self.unclassified: list[tuple[int, int]] = []

    def resolve(self, block_id: int, line_index: int) -> str | None:
        group_id = self.classification.group_for(block_id, line_index)
        if group_id is not None and group_id in self.known_ids:
            return group_id

        if group_id is not None:
            logger.warning(
                "Line {block}:{index} assigned to unknown group {group}",
                block=block_id,
                index=line_index,
                group=group_id,
            )

        if self.policy == "error" or self.fallback_id is None:
            self.unclassified.append((block_id, line_index))
            return None

        logger.warning(
            "Line {block}:{index} has no group; falling back to {fallback}",
            block=block_id,
            index=line_index,
            fallback=self.fallback_id,
        )
        return self.fallback_id


def _partition_block(
    block: ChangeBlock,
    resolver: _GroupResolver,
) -> list[tuple[str, LineRange]]:
    """Single scan over a block, returning (group id, range) pairs in order."""
    emitted: list[tuple[str, LineRange]] = []
    old_line = block.old_start
    new_line = block.new_start
    current: _OpenRange | None = None

    def flush() -> None:
        nonlocal current
        if current is not None:
            emitted.append((current.group_id, current.close(block.id)))
            current = None

    for index, line in enumerate(block.lines):
        if not isinstance(line, (Addition, Removal)):
            # context separates runs and is never part of one
            flush()
            old_line += 1
            new_line += 1
            continue

        kind: ChangeKind = "+" if isinstance(line, Addition) else "-"
        group_id = resolver.resolve(block.id, index)

        if group_id is None:
            flush()
        elif (
            current is not None
            and current.group_id == group_id
            and current.kind == kind
            and current.next_index == index
        ):
            current.lines.append(line.content)
        else:
            flush()
            current = _OpenRange(
                group_id=group_id,
                kind=kind,
                start_index=index,
                start_old_line=old_line if kind == "-" else None,
                start_new_line=new_line if kind == "+" else None,
                lines=[line.content],
            )

        if kind == "+":
            new_line += 1
        else:
            old_line += 1

    flush()
    return emitted


def partition(
    files: list[FileDiff],
    plan: list[CommitPlan],
    classification: Classification,
    unclassified_policy: UnclassifiedPolicy = "first_group",
) -> list[CommitChanges]:
    """
    Group every classified line into maximal per-block ranges, per group and
    per file.

    The result has one entry per plan group in plan order; within a group,
    files keep the order of `files`.

    Raises:
        ValidationError: the plan is empty while changed lines exist.
        UnclassifiedLineError: lines without a usable group when the policy is
            "error".
    """
    if not plan and total_changed_lines(files) > 0:
        raise empty_plan()

    resolver = _GroupResolver(plan, classification, unclassified_policy)

    # group id -> file path -> ranges, insertion ordered
    buckets: dict[str, dict[str, list[LineRange]]] = {commit.id: {} for commit in plan}

    for file in files:
        for block in file.blocks:
            for group_id, line_range in _partition_block(block, resolver):
                buckets[group_id].setdefault(file.path, []).append(line_range)

    if resolver.unclassified:
        raise UnclassifiedLineError(resolver.unclassified)

    return [
        CommitChanges(
            commit_id=commit.id,
            message=commit.message,
            description=commit.description,
            file_changes=[
                FileChanges(file_path=path, ranges=ranges)
                for path, ranges in buckets[commit.id].items()
                if ranges
            ],
        )
        for commit in plan
    ]


def validate_partition(
    files: list[FileDiff], commit_changes: list[CommitChanges]
) -> PartitionValidation:
    """
    Check that a partition accounts for every changed line exactly once.

    A range repeated verbatim is reported as a duplicate. A different range
    sharing at least one line with an earlier one is reported as an overlap.

    Never raises; the caller decides whether an invalid partition is fatal.
    """
    errors: list[str] = []
    expected = total_changed_lines(files)

    extracted = 0
    seen: set[tuple[int, int, int]] = set()
    covered: set[tuple[int, int]] = set()
    for commit in commit_changes:
        for file_change in commit.file_changes:
            for line_range in file_change.ranges:
                key = line_range.span_key
                block_id, start, end = key
                span = f"{block_id}:{start}-{end}"
                indices = {(block_id, index) for index in line_range.indices()}
                if key in seen:
                    errors.append(f"Duplicate range: {span} in commit {commit.commit_id}")
                elif indices & covered:
                    errors.append(f"Overlapping range: {span} in commit {commit.commit_id}")
                seen.add(key)
                covered |= indices
                extracted += len(line_range.lines)

    if extracted != expected:
        errors.append(
            f"Line count mismatch: extracted {extracted}, expected {expected}"
        )

    return PartitionValidation(valid=not errors, errors=tuple(errors))
