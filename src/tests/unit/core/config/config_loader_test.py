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

from pathlib import Path
from unittest.mock import mock_open, patch

import pytest

from hunksplit.core.config.config_loader import ConfigLoader
from hunksplit.core.config.split_config import SplitConfig
from hunksplit.core.exceptions import ConfigurationError

# -----------------------------------------------------------------------------
# Loaders
# -----------------------------------------------------------------------------


def test_load_toml_exists():
    toml_content = b'unclassified_policy = "error"\ncontext_lines = 5'
    with patch("builtins.open", mock_open(read_data=toml_content)):
        with patch("pathlib.Path.exists", return_value=True):
            data = ConfigLoader.load_toml(Path("hunksplitconfig.toml"))
            assert data == {"unclassified_policy": "error", "context_lines": 5}


def test_load_toml_not_exists():
    with patch("pathlib.Path.exists", return_value=False):
        assert ConfigLoader.load_toml(Path("missing.toml")) == {}


def test_load_toml_invalid():
    with patch("builtins.open", mock_open(read_data=b"invalid toml content")):
        with patch("pathlib.Path.exists", return_value=True):
            assert ConfigLoader.load_toml(Path("bad.toml")) == {}


def test_load_env_lowercases_keys():
    with patch.dict(
        "os.environ",
        {"HUNKSPLIT_CONTEXT_LINES": "1", "HUNKSPLIT_VERBOSE": "true", "OTHER": "x"},
        clear=True,
    ):
        data = ConfigLoader.load_env("HUNKSPLIT_")
        assert data == {"context_lines": "1", "verbose": "true"}


# -----------------------------------------------------------------------------
# Merging
# -----------------------------------------------------------------------------


def _run(args, local=None, env=None, global_=None, custom=None):
    tomls = {
        "local.toml": local or {},
        "global.toml": global_ or {},
        "custom.toml": custom or {},
    }
    with (
        patch.object(ConfigLoader, "load_toml", side_effect=lambda p: tomls[str(p)]),
        patch.object(ConfigLoader, "load_env", return_value=env or {}),
    ):
        return ConfigLoader.get_full_config(
            SplitConfig,
            args,
            Path("local.toml"),
            "HUNKSPLIT_",
            Path("global.toml"),
            Path("custom.toml") if custom is not None else None,
        )


def test_defaults_when_nothing_is_set():
    config, sources, used_defaults = _run({})

    assert config == SplitConfig()
    assert config.unclassified_policy == "first_group"
    assert config.context_lines == 3
    assert sources == []
    assert used_defaults


def test_precedence_order():
    layers = {
        "local": {"context_lines": 2},
        "env": {"context_lines": "4"},
        "global_": {"context_lines": 5},
        "custom": {"context_lines": 1},
    }

    config, _, _ = _run({"context_lines": 0}, **layers)
    assert config.context_lines == 0

    config, _, _ = _run({}, **layers)
    assert config.context_lines == 1

    layers.pop("custom")
    config, _, _ = _run({}, **layers)
    assert config.context_lines == 2

    layers.pop("local")
    config, _, _ = _run({}, **layers)
    assert config.context_lines == 4

    layers.pop("env")
    config, _, _ = _run({}, **layers)
    assert config.context_lines == 5


def test_none_arguments_do_not_override():
    config, sources, _ = _run({"verbose": None}, local={"verbose": True})

    assert config.verbose is True
    assert sources == ["Local Config"]


def test_sources_are_reported_in_priority_order():
    _, sources, used_defaults = _run(
        {"verbose": True},
        global_={"context_lines": 7},
        env={"unclassified_policy": "error"},
        local={"abort_on_invalid_partition": True},
    )

    assert sources == ["Input Args", "Local Config", "Environment Variables", "Global Config"]
    assert not used_defaults


def test_unknown_keys_are_ignored_with_a_warning():
    with patch("hunksplit.core.config.config_loader.logger") as mock_logger:
        config, sources, _ = _run({}, local={"colour": "red", "verbose": True})

    assert config.verbose is True
    assert sources == ["Local Config"]
    mock_logger.warning.assert_called_once()
    assert mock_logger.warning.call_args.kwargs["keys"] == "colour"


def test_merge_layers_keeps_first_value_per_field():
    merged, used = ConfigLoader.merge_layers(
        [
            ("A", {"verbose": True}),
            ("B", {"verbose": False, "context_lines": 1}),
            ("C", {"context_lines": 9}),
        ],
        {"verbose", "context_lines"},
    )

    assert merged == {"verbose": True, "context_lines": 1}
    assert used == ["A", "B"]


@pytest.mark.parametrize(
    "args",
    [
        {"unclassified_policy": "guess"},
        {"context_lines": -1},
        {"context_lines": "many"},
    ],
)
def test_invalid_values_raise_configuration_error(args):
    with pytest.raises(ConfigurationError):
        _run(args)
