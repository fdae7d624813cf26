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

import os
import tomllib
from pathlib import Path

from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hunksplit.core.exceptions import ConfigurationError

# (source name, values), highest priority first
ConfigLayer = tuple[str, dict]


class ConfigLoader:
    """
    Layers split settings from the command call, TOML files and the
    environment, then validates the result against a pydantic model.

    Priority, highest first: input args, custom TOML, local TOML, environment
    variables, global TOML. Fields no layer sets keep their model default.
    """

    @staticmethod
    def get_full_config(
        config_model: type[BaseModel],
        input_args: dict,
        local_config_path: Path,
        env_app_prefix: str,
        global_config_path: Path,
        custom_config_path: Path | None = None,
    ):
        """
        Returns the validated model, the names of the layers that set at
        least one field, and whether any field fell back to its default.

        Raises:
            ConfigurationError: a merged value does not validate.
        """
        layers: list[ConfigLayer] = [
            ("Input Args", {k: v for k, v in input_args.items() if v is not None})
        ]
        if custom_config_path is not None:
            layers.append(("Custom Config", ConfigLoader.load_toml(custom_config_path)))
        layers += [
            ("Local Config", ConfigLoader.load_toml(local_config_path)),
            ("Environment Variables", ConfigLoader.load_env(env_app_prefix)),
            ("Global Config", ConfigLoader.load_toml(global_config_path)),
        ]

        fields = set(config_model.model_fields)
        merged, used_sources = ConfigLoader.merge_layers(layers, fields)

        try:
            config = config_model.model_validate(merged)
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid configuration value", str(e)) from e

        return config, used_sources, merged.keys() != fields

    @staticmethod
    def merge_layers(
        layers: list[ConfigLayer], fields: set[str]
    ) -> tuple[dict, list[str]]:
        """First layer to set a field wins. Keys the model does not know are logged and dropped."""
        merged: dict = {}
        used_sources: list[str] = []

        for name, values in layers:
            logger.debug("Config layer {name}: {values}", name=name, values=values)

            unknown = sorted(values.keys() - fields)
            if unknown:
                logger.warning(
                    "Ignoring unknown setting(s) {keys} from {name}",
                    keys=", ".join(unknown),
                    name=name,
                )

            fresh = {k: v for k, v in values.items() if k in fields and k not in merged}
            if fresh:
                merged.update(fresh)
                used_sources.append(name)

        return merged, used_sources

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Settings from a TOML file; a missing or unparsable file gives none."""
        if not path.exists():
            logger.debug(f"No config file at {path}")
            return {}

        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Ignoring unparsable config file {path}: {e}")
            return {}

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """Settings from `<PREFIX>NAME` environment variables, keyed by lowercased NAME."""
        prefix = app_prefix.lower()
        return {
            key[len(app_prefix) :].lower(): value
            for key, value in os.environ.items()
            if key.lower().startswith(prefix)
        }
