"""Tests for the root bigutil CLI."""

import pytest
from click.testing import CliRunner

from bigutil import __version__
from bigutil.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "bigutil" in result.output
    for command in ("convert", "encode", "decode"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_verbose_with_literal_dollar_header(cli_runner: CliRunner) -> None:
    with open("bigutil.toml", "w", encoding="utf-8") as fh:
        fh.write('[log]\nheader = "$ ${level} ${message}"\n')
    result = cli_runner.invoke(cli, ["-v", "convert", "1"])
    assert result.exit_code == 0, result.output
    assert "$ DEBUG converted" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_malformed_header(cli_runner: CliRunner) -> None:
    with open("bigutil.toml", "w", encoding="utf-8") as fh:
        fh.write('[log]\nheader = "${level"\n')
    result = cli_runner.invoke(cli, ["convert", "1"])
    assert result.exit_code == 1
    assert "invalid log header" in result.output
