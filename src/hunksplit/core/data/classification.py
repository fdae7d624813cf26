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

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from hunksplit.core.classification.models import BlockClassification

LineKey = tuple[int, int]


class Classification:
    """
    Assignment of changed lines to groups, keyed by (block id, line index).

    Context lines are never classified. Lookups of unknown keys return None
    so callers decide how to treat gaps.
    """

    def __init__(self, assignments: Mapping[LineKey, str] | None = None):
        self._assignments: dict[LineKey, str] = dict(assignments or {})

    def assign(self, block_id: int, line_index: int, group_id: str) -> None:
        self._assignments[(block_id, line_index)] = group_id

    def group_for(self, block_id: int, line_index: int) -> str | None:
        return self._assignments.get((block_id, line_index))

    def group_ids(self) -> set[str]:
        return set(self._assignments.values())

    def items(self) -> Iterator[tuple[LineKey, str]]:
        return iter(self._assignments.items())

    def __contains__(self, key: object) -> bool:
        return key in self._assignments

    def __len__(self) -> int:
        return len(self._assignments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Classification):
            return NotImplemented
        return self._assignments == other._assignments

    def __repr__(self) -> str:
        return f"Classification({len(self._assignments)} lines)"

    @classmethod
    def from_block_results(
        cls, results: Iterable["BlockClassification"]
    ) -> "Classification":
        """
        Build a classification from per-block answers of the classifier.

        A line listed more than once keeps the first group it was given. Later
        answers for it are logged and dropped, so unlike a plain dict built from
        the same answers, a repeated line never moves to a later group.
        """
        classification = cls()
        for block_result in results:
            for line in block_result.lines:
                key = (block_result.block_id, line.line_index)
                existing = classification._assignments.get(key)
                if existing is not None:
                    if existing != line.commit_id:
                        logger.warning(
                            "Line {key} assigned to multiple groups; keeping {kept}, ignoring {ignored}",
                            key=key,
                            kept=existing,
                            ignored=line.commit_id,
                        )
                    continue
                classification._assignments[key] = line.commit_id
        return classification
