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

from hunksplit.core.data.assembled_patch import PatchCheck


def check_patch(patch: str) -> PatchCheck:
    """
    Syntactic floor for a generated patch. Whether it applies is up to the
    apply step.
    """
    if not patch or not patch.strip():
        return PatchCheck(valid=False, error="Empty patch")

    if "diff --git" not in patch:
        return PatchCheck(valid=False, error="Missing diff header")

    # a pure rename carries no hunks
    if "@@" not in patch and "\nrename from " not in patch:
        return PatchCheck(valid=False, error="Missing hunk header")

    return PatchCheck(valid=True)
