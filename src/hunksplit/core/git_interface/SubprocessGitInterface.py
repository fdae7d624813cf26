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
from pathlib import Path

from loguru import logger

from hunksplit.core.exceptions import git_not_found
from hunksplit.core.git_interface.interface import GitInterface

_LOG_PREVIEW = 2000


def _preview(text: str) -> str:
    if len(text) > _LOG_PREVIEW:
        return text[:_LOG_PREVIEW] + "...(truncated)"
    return text


class SubprocessGitInterface(GitInterface):
    def __init__(self, repo_path: str | Path | None = None) -> None:
        self.repo_path = Path(repo_path) if repo_path is not None else Path.cwd()

    def run_git_text_out(
        self,
        args: list[str],
        input_text: str | None = None,
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> str | None:
        result = self.run_git_text(args, input_text, env, cwd)
        return result.stdout if result else None

    def run_git_text(
        self,
        args: list[str],
        input_text: str | None = None,
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> subprocess.CompletedProcess[str] | None:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = ["git"] + args
        logger.debug(f"Running git text command: {' '.join(cmd)} cwd={effective_cwd}")
        try:
            # decoded by hand: text mode would rewrite "\r\n" in file content
            result = subprocess.run(
                cmd,
                input=input_text.encode("utf-8") if input_text is not None else None,
                capture_output=True,
                check=True,
                env=env,
                cwd=effective_cwd,
            )
        except FileNotFoundError as e:
            raise git_not_found() from e
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode("utf-8", errors="replace") if e.stderr else ""
            logger.warning(
                f"Git text command failed: {' '.join(cmd)} code={e.returncode} stderr={stderr.strip()}"
            )
            return None

        stdout = result.stdout.decode("utf-8", errors="replace")
        stderr = result.stderr.decode("utf-8", errors="replace")
        if stdout:
            logger.debug(f"git stdout (text): {_preview(stdout)}")
        if stderr:
            logger.debug(f"git stderr (text): {_preview(stderr)}")
        logger.debug(f"git returncode: {result.returncode}")

        return subprocess.CompletedProcess(
            args=result.args,
            returncode=result.returncode,
            stdout=stdout,
            stderr=stderr,
        )
