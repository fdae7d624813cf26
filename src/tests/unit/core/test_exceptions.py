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

from hunksplit.core.exceptions import (
    AIServiceError,
    DiffParseError,
    GitError,
    HunkSplitError,
    PartitionError,
    PartitionValidationError,
    UnclassifiedLineError,
    ValidationError,
    empty_plan,
    git_not_found,
    invalid_classifier_response,
    malformed_hunk_header,
)


def test_error_carries_message_and_details():
    error = HunkSplitError("main", "more")

    assert str(error) == "main"
    assert error.message == "main"
    assert error.details == "more"


def test_unclassified_line_error_lists_lines():
    lines = [(0, i) for i in range(12)]

    error = UnclassifiedLineError(lines)

    assert isinstance(error, PartitionError)
    assert error.lines == lines
    assert error.message == "12 changed line(s) have no group assignment"
    assert error.details.endswith("0:9, ...")


def test_partition_validation_error_keeps_errors():
    error = PartitionValidationError(("a", "b"))

    assert isinstance(error, PartitionError)
    assert error.errors == ["a", "b"]
    assert error.details == "a\nb"


def test_helpers_build_the_right_types():
    assert isinstance(git_not_found(), GitError)
    assert isinstance(empty_plan(), ValidationError)
    assert isinstance(malformed_hunk_header("@@ x @@"), DiffParseError)
    assert "@@ x @@" in malformed_hunk_header("@@ x @@").message
    assert isinstance(invalid_classifier_response("bad"), AIServiceError)
    assert all(
        isinstance(e, HunkSplitError)
        for e in (git_not_found(), empty_plan(), invalid_classifier_response("x"))
    )
