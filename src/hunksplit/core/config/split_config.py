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

from typing import Literal

from pydantic import BaseModel, Field


class SplitConfig(BaseModel):
    # what to do with changed lines the classifier left out
    unclassified_policy: Literal["first_group", "error"] = "first_group"
    # unchanged lines around each change in generated patches
    context_lines: int = Field(default=3, ge=0)
    abort_on_invalid_partition: bool = False
    verbose: bool = False
