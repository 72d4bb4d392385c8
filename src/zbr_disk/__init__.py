"""
ZBR Disk Model - access-time model of a zoned-bit-recording hard disk.

A small, deterministic model for performance simulators: given a byte
address and a transfer size, a HardDiskDrive returns when a read or write
completes, accounting for seek distance, rotational latency and per-sector
transfer time on a drive whose tracks grow from the inside out.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Core must be imported before utils (see zbr_disk.core)
from zbr_disk.core import (
    HardDiskDrive,
    GeometryParameters,
    GeometryModel,
    Position,
    AddressDecoder,
    AccessTimeEstimator,
    OperationKind,
    TransferResult,
    DriveProfile,
    get_preset,
    list_presets,
    load_profile,
    DiskModelError,
    InvalidGeometry,
    OutOfRange,
    DivisionHazard,
)

from zbr_disk.utils import (
    setup_logging,
    AccessRecord,
    DiagnosticsHook,
    LoggingDiagnostics,
    RichDiagnostics,
    StatisticsCollector,
)

__all__ = [
    "__version__",

    # Drive
    "HardDiskDrive",

    # Model components
    "GeometryParameters",
    "GeometryModel",
    "Position",
    "AddressDecoder",
    "AccessTimeEstimator",
    "OperationKind",
    "TransferResult",

    # Profiles
    "DriveProfile",
    "get_preset",
    "list_presets",
    "load_profile",

    # Errors
    "DiskModelError",
    "InvalidGeometry",
    "OutOfRange",
    "DivisionHazard",

    # Diagnostics and logging
    "setup_logging",
    "AccessRecord",
    "DiagnosticsHook",
    "LoggingDiagnostics",
    "RichDiagnostics",
    "StatisticsCollector",
]
