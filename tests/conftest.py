# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.
"""Shared fixtures for all tests."""
import os
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from typing import Any

import pytest
from loguru import logger
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def _clean_primkit_env(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> None:
    """Isolate tests from PRIMKIT_* variables and a stray primkit.yaml."""
    for name in list(os.environ):
        if name.startswith("PRIMKIT_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def runner() -> CliRunner:
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Capture loguru output (message plus extras) at TRACE level."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(str(message)),
        level="TRACE",
        format="{message} {extra}",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def nested_record_factory() -> Callable[..., dict[str, Any]]:
    """Factory fixture for nested dict graphs with containers and dates."""
    def _create(**overrides: Any) -> dict[str, Any]:
        record: dict[str, Any] = {
            "name": "widget",
            "tags": ["blue", "small"],
            "dimensions": {"width": 3, "height": [1, 2]},
            "created": datetime(2024, 5, 17, 9, 30, tzinfo=UTC),
            "coords": (1, [2, 3]),
            "flags": {"a", "b"},
        }
        record.update(overrides)
        return record

    return _create
