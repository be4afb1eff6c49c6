"""Pytest configuration and fixtures."""

import pytest

from affectsim.agent import Agent
from affectsim.utils.random_source import RandomSource


@pytest.fixture
def seeded_agent():
    """Agent with a fixed seed for reproducible decisions."""
    return Agent(seed=42)


@pytest.fixture
def rng():
    """Random source seeded with 42."""
    return RandomSource(seed=42)
