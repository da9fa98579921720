# topmark:header:start
#
#   project      : LineDigest
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Config` / `MutableConfig`: defaults, validation, merging and layering."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from linedigest.config.model import Config, MutableConfig
from linedigest.config.policy import OverflowPolicy
from linedigest.core.errors import ConfigError
from linedigest.core.exit_codes import ExitCode
from linedigest.pipeline.algorithms import DigestAlgorithm
from tests.conftest import parametrize


def test_defaults() -> None:
    cfg: Config = MutableConfig().freeze()
    assert cfg.algorithm is DigestAlgorithm.MD5
    assert cfg.buffer_size == 1024
    assert cfg.overflow is OverflowPolicy.ERROR
    assert cfg.config_files == ()


def test_config_is_frozen() -> None:
    cfg: Config = MutableConfig().freeze()
    with pytest.raises(AttributeError):
        cfg.buffer_size = 10  # type: ignore[misc]


def test_thaw_freeze_roundtrip() -> None:
    cfg: Config = MutableConfig(algorithm=DigestAlgorithm.SHA1, buffer_size=64).freeze()
    draft: MutableConfig = cfg.thaw()
    draft.overflow = OverflowPolicy.SPLIT
    again: Config = draft.freeze()
    assert again.algorithm is DigestAlgorithm.SHA1
    assert again.buffer_size == 64
    assert again.overflow is OverflowPolicy.SPLIT


@parametrize("buffer_size", [0, 1, -5])
def test_freeze_rejects_small_buffer(buffer_size: int) -> None:
    with pytest.raises(ConfigError, match="at least 2") as excinfo:
        MutableConfig(buffer_size=buffer_size).freeze()
    assert excinfo.value.exit_code == ExitCode.CONFIG_ERROR


def test_from_toml_dict_parses_values() -> None:
    draft: MutableConfig = MutableConfig.from_toml_dict(
        {"algorithm": "SHA-256", "buffer_size": 4096, "overflow": "split"}
    )
    assert draft.algorithm is DigestAlgorithm.SHA256
    assert draft.buffer_size == 4096
    assert draft.overflow is OverflowPolicy.SPLIT


def test_from_toml_dict_leaves_missing_keys_unset() -> None:
    draft: MutableConfig = MutableConfig.from_toml_dict({"algorithm": "sha1"})
    assert draft.buffer_size is None
    assert draft.overflow is None


@parametrize(
    "data, message",
    [
        ({"algorithm": "sha512"}, "Unsupported digest algorithm"),
        ({"algorithm": 5}, "must be a string"),
        ({"buffer_size": "big"}, "must be an integer"),
        ({"buffer_size": True}, "must be an integer"),
        ({"overflow": "truncate"}, "Unsupported overflow policy"),
        ({"overflow": ["split"]}, "must be a string"),
    ],
)
def test_from_toml_dict_rejects_bad_values(data: dict[str, Any], message: str) -> None:
    with pytest.raises(ConfigError, match=message):
        MutableConfig.from_toml_dict(data)


def test_unknown_keys_are_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("WARNING")
    draft: MutableConfig = MutableConfig.from_toml_dict({"algorithm": "md5", "color": "red"})
    assert draft.algorithm is DigestAlgorithm.MD5
    assert "Ignoring unknown config key 'color'" in caplog.text


def test_merge_with_prefers_values_set_in_other() -> None:
    base = MutableConfig(algorithm=DigestAlgorithm.SHA1, buffer_size=64)
    other = MutableConfig(buffer_size=128)
    merged: MutableConfig = base.merge_with(other)
    assert merged.algorithm is DigestAlgorithm.SHA1
    assert merged.buffer_size == 128
    assert merged.overflow is None


def test_apply_overrides_ignores_none() -> None:
    draft = MutableConfig(algorithm=DigestAlgorithm.SHA1)
    draft.apply_overrides(algorithm=None, buffer_size=32, overflow=None)
    assert draft.algorithm is DigestAlgorithm.SHA1
    assert draft.buffer_size == 32


def test_to_toml_dict() -> None:
    cfg: Config = MutableConfig(algorithm=DigestAlgorithm.SHA256).freeze()
    assert cfg.to_toml_dict() == {"algorithm": "sha256", "buffer_size": 1024, "overflow": "error"}


# --- Layering over files ---


def test_load_merged_without_files_is_defaults(tmp_path: Path) -> None:
    cfg: Config = MutableConfig.load_merged(cwd=tmp_path).freeze()
    assert cfg == MutableConfig().freeze()


def test_linedigest_toml_overrides_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.linedigest]\nalgorithm = "sha1"\nbuffer_size = 64\n',
        encoding="utf-8",
    )
    (tmp_path / "linedigest.toml").write_text('algorithm = "sha256"\n', encoding="utf-8")

    cfg: Config = MutableConfig.load_merged(cwd=tmp_path).freeze()

    assert cfg.algorithm is DigestAlgorithm.SHA256
    assert cfg.buffer_size == 64
    assert [Path(p).name for p in cfg.config_files] == [
        "pyproject.toml",
        "linedigest.toml",
    ]


def test_pyproject_without_tool_table_is_skipped(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    cfg: Config = MutableConfig.load_merged(cwd=tmp_path).freeze()
    assert cfg.config_files == ()


def test_explicit_files_override_discovered_ones(tmp_path: Path) -> None:
    (tmp_path / "linedigest.toml").write_text('algorithm = "sha1"\n', encoding="utf-8")
    first = tmp_path / "first.toml"
    first.write_text('algorithm = "sha256"\noverflow = "split"\n', encoding="utf-8")
    second = tmp_path / "second.toml"
    second.write_text('overflow = "error"\n', encoding="utf-8")

    cfg: Config = MutableConfig.load_merged(
        cwd=tmp_path, extra_config_files=[first, str(second)]
    ).freeze()

    assert cfg.algorithm is DigestAlgorithm.SHA256
    assert cfg.overflow is OverflowPolicy.ERROR


def test_discovery_can_be_disabled(tmp_path: Path) -> None:
    (tmp_path / "linedigest.toml").write_text('algorithm = "sha1"\n', encoding="utf-8")
    cfg: Config = MutableConfig.load_merged(cwd=tmp_path, discover=False).freeze()
    assert cfg.algorithm is DigestAlgorithm.MD5


def test_invalid_value_in_file_names_the_file(tmp_path: Path) -> None:
    path = tmp_path / "linedigest.toml"
    path.write_text("buffer_size = 1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="at least 2"):
        MutableConfig.load_merged(cwd=tmp_path).freeze()

    path.write_text('algorithm = "whirlpool"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="linedigest.toml"):
        MutableConfig.load_merged(cwd=tmp_path)

