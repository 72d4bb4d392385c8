"""
Core functionality for the zoned-bit-recording disk model.

This module provides the drive geometry, logical block addressing,
access-time estimation, drive profiles and the HardDiskDrive facade
that a performance simulator calls.
"""

from zbr_disk.core.errors import (
    DiskModelError,
    InvalidGeometry,
    OutOfRange,
    DivisionHazard,
)

from zbr_disk.core.geometry import (
    GeometryParameters,
    GeometryModel,
    Position,
    get_geometry_summary,
    BYTES_PER_SECTOR,
)

from zbr_disk.core.addressing import (
    AddressDecoder,
)

from zbr_disk.core.timing import (
    AccessTimeEstimator,
    OperationKind,
    TransferResult,
)

from zbr_disk.core.settings import (
    DriveProfile,
    PRESETS,
    get_preset,
    list_presets,
    parse_profile,
    load_profile,
    save_profile,
)

# Imported last: the facade pulls in zbr_disk.utils, which needs the above
from zbr_disk.core.device import (
    HardDiskDrive,
)

__all__ = [
    # Errors
    "DiskModelError",
    "InvalidGeometry",
    "OutOfRange",
    "DivisionHazard",

    # Geometry
    "GeometryParameters",
    "GeometryModel",
    "Position",
    "get_geometry_summary",
    "BYTES_PER_SECTOR",

    # Addressing
    "AddressDecoder",

    # Timing
    "AccessTimeEstimator",
    "OperationKind",
    "TransferResult",

    # Profiles
    "DriveProfile",
    "PRESETS",
    "get_preset",
    "list_presets",
    "parse_profile",
    "load_profile",
    "save_profile",

    # Drive
    "HardDiskDrive",
]
