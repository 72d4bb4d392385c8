"""Shared pytest fixtures."""

import pytest

from zbr_disk.core import GeometryModel

from tests.fixtures import (
    demo_parameters,
    multi_surface_parameters,
    fractional_gradient_parameters,
)


@pytest.fixture
def demo_geometry():
    """Two-track demo geometry (10 and 20 sectors)."""
    return GeometryModel(demo_parameters())


@pytest.fixture
def multi_surface_geometry():
    """Two-surface, four-track geometry (3/4/5/6 sectors)."""
    return GeometryModel(multi_surface_parameters())


@pytest.fixture
def fractional_geometry():
    """Five-track geometry with gradient 0.75."""
    return GeometryModel(fractional_gradient_parameters())
