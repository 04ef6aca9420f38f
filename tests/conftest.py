"""Pytest configuration for rpl_mappers tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest
from rpl_mappers._config import reset_config
from rpl_mappers._logging import clear_event_hooks

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test from the default configuration, no event hooks and untouched root logging."""
    for name in ('RPL_MAPPERS_CHECK_ARITY', 'RPL_MAPPERS_TRACE', 'RPL_MAPPERS_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    reset_config()
    clear_event_hooks()
    yield
    reset_config()
    clear_event_hooks()
    root.handlers[:] = handlers
    root.setLevel(level)
