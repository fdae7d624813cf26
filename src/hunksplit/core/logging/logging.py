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

from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from hunksplit.constants import LOG_DIR


def setup_logger(
    command_name: str,
    console: Console | None = None,
    debug: bool = False,
    log_dir: Path = LOG_DIR,
) -> Path:
    """
    Route loguru output to a rich console and a per-run log file.

    Args:
        command_name: Name of the command being executed, used in the file name
        console: Rich console for output, a new one when omitted
        debug: Show debug messages on the console too
        log_dir: Directory for log files

    Returns:
        Path to the log file
    """
    console = console or Console(stderr=True)
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = log_dir / f"{command_name}_{timestamp}.log"

    # Clear existing sinks so we don't double-log across runs
    logger.remove()

    def console_sink(message):
        console.print(message.record["message"].rstrip("\n"), markup=False)

    logger.add(console_sink, level="DEBUG" if debug else "INFO", format="{message}")
    logger.add(logfile, level="DEBUG", rotation="5 MB", retention="7 days")

    logger.debug(f"Initialized logger for {command_name} -> {logfile}")
    return logfile
