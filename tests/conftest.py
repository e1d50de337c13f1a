"""Shared test fixtures for levdist tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from levdist.cli.context import CLIContext
from levdist.infrastructure.paths import PathResolver

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None]:
    """Reset CLI context and logging configuration around each test."""
    CLIContext.reset()
    yield
    CLIContext.reset()
    structlog.reset_defaults()


@pytest.fixture
def resolver(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PathResolver:
    """Point the default config location at a temporary directory."""
    resolver = PathResolver(base=tmp_path / ".levdist")
    monkeypatch.setattr("levdist.infrastructure.config.default_resolver", resolver)
    return resolver
