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
Exception hierarchy for hunksplit.

Every error raised on purpose by the package derives from HunkSplitError so
callers can separate expected failures from bugs.
"""


class HunkSplitError(Exception):
    """
    Base exception for all hunksplit errors.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a HunkSplitError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class GitError(HunkSplitError):
    """
    Errors related to git operations.
    """

    pass


class ValidationError(HunkSplitError):
    """
    Input validation errors, such as an empty commit plan.
    """

    pass


class ConfigurationError(HunkSplitError):
    """
    Raised when configuration files or values are invalid.
    """

    pass


class AIServiceError(HunkSplitError):
    """
    Raised when the classifier's answer cannot be used.
    """

    pass


class DiffParseError(HunkSplitError):
    """
    Raised when a unified diff cannot be parsed.
    """

    pass


class PartitionError(HunkSplitError):
    """
    Errors while assigning changed lines to groups.
    """

    pass


class UnclassifiedLineError(PartitionError):
    """Raised when changed lines have no usable group and fallback is disabled."""

    def __init__(self, lines: list[tuple[int, int]]):
        self.lines = lines
        preview = ", ".join(f"{block}:{index}" for block, index in lines[:10])
        if len(lines) > 10:
            preview += ", ..."
        super().__init__(
            f"{len(lines)} changed line(s) have no group assignment",
            f"Unclassified (block:line) entries: {preview}",
        )


class PartitionValidationError(PartitionError):
    """Raised when a partition does not cover every changed line exactly once."""

    def __init__(self, errors: list[str] | tuple[str, ...]):
        self.errors = list(errors)
        super().__init__(
            f"Partition is invalid ({len(self.errors)} error(s))",
            "\n".join(self.errors),
        )


# Convenience functions for creating common errors
def git_not_found() -> GitError:
    """Create a GitError for when git is not available."""
    return GitError(
        "Git is not installed or not in PATH",
        "Please install git and ensure it's available in your PATH environment variable",
    )


def empty_plan() -> ValidationError:
    return ValidationError(
        "Commit plan has no groups",
        "At least one group is required to assign changed lines to",
    )


def malformed_hunk_header(header: str) -> DiffParseError:
    return DiffParseError(
        f"Malformed hunk header: {header!r}",
        "Expected a header of the form '@@ -start[,len] +start[,len] @@'",
    )


def invalid_classifier_response(reason: str) -> AIServiceError:
    return AIServiceError(
        f"Classifier response is not usable: {reason}",
        "The response must contain a JSON object with 'commits' and 'classifications'",
    )
