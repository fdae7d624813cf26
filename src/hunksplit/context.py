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
from pathlib import Path

from loguru import logger

from hunksplit.constants import ENV_APP_PREFIX, GLOBAL_CONFIG_FILE, LOCAL_CONFIG_FILE
from hunksplit.core.config.config_loader import ConfigLoader
from hunksplit.core.config.split_config import SplitConfig
from hunksplit.core.diff_generation.diff_generator import DiffGenerator
from hunksplit.core.diff_generation.unified_diff_generator import UnifiedDiffGenerator
from hunksplit.core.file_reader.git_file_reader import GitFileReader
from hunksplit.core.file_reader.protocol import FileReader
from hunksplit.core.git_interface.interface import GitInterface
from hunksplit.core.git_interface.SubprocessGitInterface import (
    SubprocessGitInterface,
)


def load_split_config(custom_config_path: Path | None = None, **input_args) -> SplitConfig:
    config, used_sources, used_defaults = ConfigLoader.get_full_config(
        SplitConfig,
        input_args,
        LOCAL_CONFIG_FILE,
        ENV_APP_PREFIX,
        GLOBAL_CONFIG_FILE,
        custom_config_path,
    )
    logger.debug(f"Used {used_sources} to build config (defaults used: {used_defaults})")
    return config


@dataclass(frozen=True)
class SplitContext:
    config: SplitConfig
    file_reader: FileReader
    diff_generator: DiffGenerator
    repo_path: Path | None = None
    git_interface: GitInterface | None = None

    @classmethod
    def from_config(cls, config: SplitConfig, repo_path: Path) -> "SplitContext":
        git_interface = SubprocessGitInterface(repo_path)
        return cls(
            config=config,
            file_reader=GitFileReader(git_interface),
            diff_generator=UnifiedDiffGenerator(context_lines=config.context_lines),
            repo_path=repo_path,
            git_interface=git_interface,
        )

    @classmethod
    def with_reader(
        cls, file_reader: FileReader, config: SplitConfig | None = None
    ) -> "SplitContext":
        """A context that reads original content from `file_reader` instead of git."""
        config = config or SplitConfig()
        return cls(
            config=config,
            file_reader=file_reader,
            diff_generator=UnifiedDiffGenerator(context_lines=config.context_lines),
        )
