"""
Utility functions for the zoned-bit-recording disk model.

This module provides logging setup and the diagnostics hooks that replace
verbose console output.
"""

from zbr_disk.utils.logging import (
    setup_logging,
    log_system_info,
    log_operation,
    log_device_info,
)

from zbr_disk.utils.diagnostics import (
    AccessRecord,
    DriveStatistics,
    DiagnosticsHook,
    NullDiagnostics,
    LoggingDiagnostics,
    RichDiagnostics,
    StatisticsCollector,
    CompositeDiagnostics,
)

__all__ = [
    # Logging
    "setup_logging",
    "log_system_info",
    "log_operation",
    "log_device_info",

    # Diagnostics
    "AccessRecord",
    "DriveStatistics",
    "DiagnosticsHook",
    "NullDiagnostics",
    "LoggingDiagnostics",
    "RichDiagnostics",
    "StatisticsCollector",
    "CompositeDiagnostics",
]
