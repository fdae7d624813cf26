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

from dataclasses import dataclass
from typing import Literal

ChangeKind = Literal["+", "-"]


@dataclass(frozen=True)
class DiffLine:
    content: str
    # set when git printed "\ No newline at end of file" right after this line
    no_newline: bool = False

    def as_text(self) -> str:
        """The line as it appears in a file, including its line ending."""
        return self.content if self.no_newline else self.content + "\n"


@dataclass(frozen=True)
class Context(DiffLine):
    """An unchanged line shown around the changes of a block."""


@dataclass(frozen=True)
class Addition(DiffLine):
    """Represents a single added line of code."""


@dataclass(frozen=True)
class Removal(DiffLine):
    """Represents a single removed line of code."""


def is_change(line: DiffLine) -> bool:
    return isinstance(line, (Addition, Removal))
