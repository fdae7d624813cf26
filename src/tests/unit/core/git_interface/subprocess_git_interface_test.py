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

import subprocess
from unittest.mock import patch

import pytest

from hunksplit.core.exceptions import GitError
from hunksplit.core.git_interface.SubprocessGitInterface import SubprocessGitInterface


def test_run_git_text_decodes_output(tmp_path):
    completed = subprocess.CompletedProcess(
        args=["git", "status"], returncode=0, stdout=b"line\r\n", stderr=b""
    )
    git = SubprocessGitInterface(tmp_path)

    with patch("subprocess.run", return_value=completed) as mock_run:
        result = git.run_git_text(["status"], input_text="data")

    assert result.stdout == "line\r\n"
    assert result.returncode == 0
    mock_run.assert_called_once_with(
        ["git", "status"],
        input=b"data",
        capture_output=True,
        check=True,
        env=None,
        cwd=str(tmp_path),
    )


def test_failed_command_returns_none(tmp_path):
    error = subprocess.CalledProcessError(128, ["git", "cat-file"], stderr=b"fatal: bad object")
    git = SubprocessGitInterface(tmp_path)

    with patch("subprocess.run", side_effect=error):
        assert git.run_git_text(["cat-file", "-p", "x:y"]) is None
        assert git.run_git_text_out(["cat-file", "-p", "x:y"]) is None


def test_missing_git_binary_raises(tmp_path):
    git = SubprocessGitInterface(tmp_path)

    with patch("subprocess.run", side_effect=FileNotFoundError("git")):
        with pytest.raises(GitError, match="Git is not installed"):
            git.run_git_text_out(["status"])


def test_cwd_override(tmp_path):
    completed = subprocess.CompletedProcess(args=["git"], returncode=0, stdout=b"", stderr=b"")
    other = tmp_path / "other"

    with patch("subprocess.run", return_value=completed) as mock_run:
        SubprocessGitInterface(tmp_path).run_git_text_out(["status"], cwd=other)

    assert mock_run.call_args.kwargs["cwd"] == str(other)
