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

import json
import re

from loguru import logger
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from hunksplit.core.data.classification import Classification
from hunksplit.core.data.commit_plan import CommitPlan
from hunksplit.core.exceptions import invalid_classifier_response


class PlannedCommit(BaseModel):
    """One commit proposed by the classifier."""

    id: str
    message: str
    description: str = ""


class LineAssignment(BaseModel):
    line_index: int = Field(ge=0)
    commit_id: str


class BlockClassification(BaseModel):
    """Group assignments for the changed lines of one block."""

    block_id: int
    lines: list[LineAssignment] = Field(default_factory=list)


class SplitPlanResponse(BaseModel):
    """Container for the complete answer of the classifier."""

    reasoning: str | None = None
    commits: list[PlannedCommit]
    classifications: list[BlockClassification] = Field(default_factory=list)

    def to_plan(self) -> list[CommitPlan]:
        return [
            CommitPlan(id=commit.id, message=commit.message, description=commit.description)
            for commit in self.commits
        ]

    def to_classification(self) -> Classification:
        return Classification.from_block_results(self.classifications)


_JSON_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)


def parse_split_plan(text: str) -> SplitPlanResponse:
    """
    Extract and validate the JSON object of a classifier answer.

    Models often wrap the object in prose or a code fence, so the outermost
    braces are located first.

    Raises:
        AIServiceError: no JSON object is found or it does not match the schema.
    """
    match = _JSON_OBJECT_RE.search(text or "")
    if not match:
        raise invalid_classifier_response("no JSON object found")

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise invalid_classifier_response(f"invalid JSON ({e.msg})") from e

    try:
        response = SplitPlanResponse.model_validate(data)
    except PydanticValidationError as e:
        raise invalid_classifier_response(f"{e.error_count()} schema error(s)") from e

    logger.debug(
        "Classifier answer: commits={commits} blocks={blocks}",
        commits=len(response.commits),
        blocks=len(response.classifications),
    )
    return response
