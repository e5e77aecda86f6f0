"""Pytest configuration and shared fixtures."""

import pytest

from helpers.fakes import FakePool, InMemoryArtworkStore


@pytest.fixture
def fake_pool() -> FakePool:
    return FakePool()


@pytest.fixture
def memory_store() -> InMemoryArtworkStore:
    return InMemoryArtworkStore()
