"""Pytest configuration and fixtures for region rendering tests."""

import pytest

from dots_regions.config import Settings
from dots_regions.engine import RegionDescriptor, SnapshotEngine
from dots_regions.geometry.types import GridPoint, PlanePoint


@pytest.fixture
def render_settings():
    """Default rendering settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def sample_boundary():
    """Five-cell boundary as reported by the engine (row, col)."""
    return (
        GridPoint(10, 10),
        GridPoint(11, 10),
        GridPoint(12, 10),
        GridPoint(11, 11),
        GridPoint(10, 11),
    )


@pytest.fixture
def square():
    """10x10 square running clockwise on a y-down screen."""
    return [
        PlanePoint(0.0, 0.0),
        PlanePoint(10.0, 0.0),
        PlanePoint(10.0, 10.0),
        PlanePoint(0.0, 10.0),
    ]


@pytest.fixture
def staged_engine(sample_boundary):
    """Small board with one captured region staged on it."""
    engine = SnapshotEngine(height=16, width=16)
    engine.add_region(RegionDescriptor(owner=0, boundary=sample_boundary))
    return engine
