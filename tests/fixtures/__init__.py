"""
Test fixtures for the ZBR disk model.

Provides hand-checkable drive geometries and factories for drives built
from them.
"""

from tests.fixtures.drives import (
    demo_parameters,
    multi_surface_parameters,
    fractional_gradient_parameters,
    create_demo_drive,
    create_multi_surface_drive,
    create_fractional_drive,
    expected_layout,
)

__all__ = [
    "demo_parameters",
    "multi_surface_parameters",
    "fractional_gradient_parameters",
    "create_demo_drive",
    "create_multi_surface_drive",
    "create_fractional_drive",
    "expected_layout",
]
