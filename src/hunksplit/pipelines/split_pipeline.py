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

from loguru import logger

from hunksplit.context import SplitContext
from hunksplit.core.classification.models import parse_split_plan
from hunksplit.core.data.assembled_patch import AssembledPatch, PatchCheck
from hunksplit.core.data.classification import Classification
from hunksplit.core.data.commit_plan import CommitPlan
from hunksplit.core.data.file_diff import FileDiff
from hunksplit.core.data.line_range import CommitChanges, PartitionValidation
from hunksplit.core.diff_parser.unified_diff_parser import parse_unified_diff
from hunksplit.core.exceptions import PartitionValidationError
from hunksplit.core.logging.utils import log_commit_changes, time_block
from hunksplit.core.partition.partitioner import partition, validate_partition
from hunksplit.core.reconstruct.assembler import PatchAssembler
from hunksplit.core.reconstruct.patch_check import check_patch


def base_revision_for(commit: str) -> str:
    """Revision holding the content a commit's diff was taken against."""
    return f"{commit}~1"


@dataclass
class SplitResult:
    files: list[FileDiff]
    commit_changes: list[CommitChanges]
    validation: PartitionValidation
    patches: list[AssembledPatch] = field(default_factory=list)
    checks: list[PatchCheck] = field(default_factory=list)

    @property
    def accepted_patches(self) -> list[AssembledPatch]:
        return [p for p, c in zip(self.patches, self.checks, strict=True) if c.valid]

    @property
    def rejected_patches(self) -> list[tuple[AssembledPatch, str]]:
        return [
            (p, c.error or "")
            for p, c in zip(self.patches, self.checks, strict=True)
            if not c.valid
        ]


class SplitPipeline:
    """
    Parse a diff, partition it by classification, and build one checked patch
    per group.
    """

    def __init__(self, context: SplitContext):
        self.context = context

    def run(
        self,
        raw_diff: str,
        plan: list[CommitPlan],
        classification: Classification,
        base_revision: str,
    ) -> SplitResult:
        config = self.context.config

        with time_block("parse_diff"):
            files = parse_unified_diff(raw_diff)

        with time_block("partition"):
            commit_changes = partition(
                files, plan, classification, config.unclassified_policy
            )
        log_commit_changes("partition", commit_changes)

        validation = validate_partition(files, commit_changes)
        if not validation.valid:
            if config.abort_on_invalid_partition:
                raise PartitionValidationError(validation.errors)
            for error in validation.errors:
                logger.warning(f"Partition validation: {error}")

        assembler = PatchAssembler(
            self.context.file_reader, base_revision, self.context.diff_generator
        )
        with time_block("assemble_patches"):
            patches = assembler.assemble(files, commit_changes)

        checks = []
        for patch in patches:
            check = check_patch(patch.patch)
            if not check.valid:
                logger.warning(
                    "Patch for {group} rejected: {error}",
                    group=patch.commit_id,
                    error=check.error,
                )
            checks.append(check)

        result = SplitResult(
            files=files,
            commit_changes=commit_changes,
            validation=validation,
            patches=patches,
            checks=checks,
        )
        logger.info(
            "Split into {accepted} patch(es), {rejected} rejected",
            accepted=len(result.accepted_patches),
            rejected=len(result.rejected_patches),
        )
        return result

    def run_with_answer(
        self, raw_diff: str, classifier_answer: str, base_revision: str
    ) -> SplitResult:
        """Run with the plan and classification taken from a classifier's raw answer."""
        response = parse_split_plan(classifier_answer)
        return self.run(
            raw_diff,
            response.to_plan(),
            response.to_classification(),
            base_revision,
        )
