"""Shared pytest fixtures and test helpers for bigutil tests."""

from __future__ import annotations

import io
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy import Column, Integer, MetaData, Table, create_engine
from sqlalchemy.engine import Engine

from bigutil.config.settings import BigutilSettings
from bigutil.infrastructure.database.types import BoundedIntType
from bigutil.infrastructure.logger import Logger, LoggerConfig, LogLevel

# Block hash used across tests: 32 bytes, top bit clear.
BLOCK_HASH = "0x4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"
BLOCK_HASH_BYTES = bytes(
    [
        74, 94, 30, 75, 170, 184, 159, 58, 50, 81, 138, 136, 195, 27, 200, 127,
        97, 143, 118, 103, 62, 44, 199, 122, 178, 18, 123, 122, 253, 237, 163, 59,
    ]
)  # fmt: skip

MAX_DECIMAL = str(2**256 - 1)
OVER_DECIMAL = str(2**256)
OVER_HEX = "0x1" + "0" * 64


class RecordingTerminator:
    """Terminator stub that records exit codes instead of exiting."""

    def __init__(self) -> None:
        self.codes: list[int] = []

    def exit(self, code: int) -> None:
        self.codes.append(code)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BIGUTIL_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("BIGUTIL_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp dir so no bigutil.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path) -> BigutilSettings:
    return BigutilSettings.from_cli(start=tmp_path)


@pytest.fixture
def log_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def terminator() -> RecordingTerminator:
    return RecordingTerminator()


@pytest.fixture
def logger(log_output: io.StringIO, terminator: RecordingTerminator) -> Logger:
    """DEBUG-level logger writing to an in-memory buffer."""
    config = LoggerConfig(prefix="test", level=LogLevel.DEBUG)
    return Logger(config, output=log_output, terminator=terminator)


@pytest.fixture
def amounts_table() -> Table:
    metadata = MetaData()
    return Table(
        "amounts",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("value", BoundedIntType()),
    )


@pytest.fixture
def db_engine(amounts_table: Table) -> Generator[Engine]:
    """In-memory SQLite engine with the amounts table created."""
    engine = create_engine("sqlite:///:memory:")
    amounts_table.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()
