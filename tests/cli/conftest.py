# topmark:header:start
#
#   project      : LineDigest
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LineDigest through Click's `CliRunner`.

Records are raw bytes, so tests read them from ``result.stdout_bytes``; messages
(errors, run summaries, logs) are on ``result.stderr``.
"""

from __future__ import annotations

from typing import IO, Any, Mapping, Sequence

from click.testing import CliRunner, Result

from linedigest.cli.main import cli
from linedigest.core.exit_codes import ExitCode


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Use together with the ``isolation`` fixture when the test must not pick up
    config files from the repository working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["-a", "sha1"]``.
        input_data (str | bytes | IO[Any] | None): Data fed to stdin.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli([], input_data=b"hello\\n")
        assert result.stdout_bytes == b"5d41402abc4b2a76b9719d911017c592\\thello\\n"
        ```
    """
    runner = CliRunner()
    return runner.invoke(
        cli,
        argv,
        input=input_data,
        env=env,
        obj={},
    )


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.stderr


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code`` and printed an error message."""
    assert result.exit_code == code, (result.exit_code, result.stderr)
    assert "Error:" in result.stderr
