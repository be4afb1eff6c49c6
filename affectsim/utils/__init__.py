"""Shared utilities for the affect simulator."""

from affectsim.utils.random_source import RandomSource

__all__ = ["RandomSource"]
