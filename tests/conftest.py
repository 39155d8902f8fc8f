"""Pytest configuration and shared fixtures for variates tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from variates import UniformSource, set_source

if TYPE_CHECKING:
    from collections.abc import Generator

TEST_SEED = 20240601


@pytest.fixture(autouse=True)
def isolated_source() -> Generator[UniformSource]:
    """Install a freshly seeded process-wide source for every test."""
    source = UniformSource(TEST_SEED)
    previous = set_source(source)
    yield source
    set_source(previous)


@pytest.fixture
def rng() -> UniformSource:
    """An explicit source, independent of the process-wide one."""
    return UniformSource(1234)
