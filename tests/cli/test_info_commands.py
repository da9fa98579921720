# topmark:header:start
#
#   project      : LineDigest
#   file         : test_info_commands.py
#   file_relpath : tests/cli/test_info_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the informational subcommands (``version``, ``algorithms``) and ``--help``."""

from __future__ import annotations

import json

from click.testing import Result

from linedigest.constants import LINEDIGEST_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_text() -> None:
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == LINEDIGEST_VERSION


def test_version_json() -> None:
    result: Result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": LINEDIGEST_VERSION}


def test_version_verbose_has_title() -> None:
    result: Result = run_cli(["-v", "--no-color", "version"])
    assert_SUCCESS(result)
    assert "LineDigest version:" in result.stdout


def test_algorithms_table() -> None:
    result: Result = run_cli(["--no-color", "algorithms"])
    assert_SUCCESS(result)
    rows: list[list[str]] = [line.split() for line in result.stdout.splitlines()[1:]]
    assert [row[:4] for row in rows] == [
        ["md5", "MD5", "16", "32"],
        ["sha1", "SHA-1", "20", "40"],
        ["sha256", "SHA-256", "32", "64"],
    ]
    assert "(default)" in result.stdout.splitlines()[1]


def test_algorithms_json() -> None:
    result: Result = run_cli(["algorithms", "--format", "json"])
    assert_SUCCESS(result)
    payload = json.loads(result.stdout)
    assert [entry["name"] for entry in payload] == ["md5", "sha1", "sha256"]
    assert [entry["hex_length"] for entry in payload] == [32, 40, 64]
    assert [entry["default"] for entry in payload] == [True, False, False]


def test_help_lists_options_and_subcommands() -> None:
    result: Result = run_cli(["--help"])
    assert_SUCCESS(result)
    for needle in ("--algorithm", "--buffer-size", "--overflow", "version", "dump-config"):
        assert needle in result.stdout
