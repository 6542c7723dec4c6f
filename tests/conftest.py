"""Shared fixtures for lyricgrade tests."""

import pytest

import lyricgrade


@pytest.fixture(scope="session")
def scorer():
    """Load the scorer once for all tests."""
    return lyricgrade.load()


@pytest.fixture(scope="session")
def es(scorer):
    return scorer.profile("es")


@pytest.fixture(scope="session")
def fr(scorer):
    return scorer.profile("fr")
