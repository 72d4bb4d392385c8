"""
Logging configuration for the zoned-bit-recording disk model.

The model logs through the standard logging module. Nothing is configured
on import; a hosting simulator either installs its own handlers or calls
setup_logging() once at startup.
"""

import logging
import platform
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import numpy as np

from zbr_disk.core.geometry import get_geometry_summary

if TYPE_CHECKING:
    from zbr_disk.core.device import HardDiskDrive


def setup_logging(log_file: Optional[str] = "zbr_disk.log",
                  level: int = logging.DEBUG) -> None:
    """
    Configure logging for the disk model.

    Sets up file-based logging at the given level plus an INFO console
    handler, then records system information.

    Args:
        log_file: Path to log file, or None to log to the console only
        level: Logging level (default: logging.DEBUG)

    Example:
        >>> setup_logging()
        >>> logging.info("Simulation started")
    """
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logging.basicConfig(
            filename=log_file,
            level=level,
            format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        logging.getLogger().setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(console_formatter)
    logging.getLogger().addHandler(console_handler)

    log_system_info()


def log_system_info() -> None:
    """
    Log interpreter and library versions.

    Timing results depend on floating-point behavior, so the platform and
    numpy version are worth having in every log.
    """
    logging.info("=" * 60)
    logging.info("ZBR Disk Model - System Information")
    logging.info("=" * 60)
    logging.info(f"Platform: {platform.system()} {platform.release()}")
    logging.info(f"Machine: {platform.machine()}")
    logging.info(f"Python version: {sys.version}")
    logging.info(f"numpy version: {np.__version__}")
    logging.info("=" * 60)


def log_operation(operation: str, details: str, level: int = logging.INFO,
                  logger: Optional[logging.Logger] = None) -> None:
    """
    Log a drive operation with details.

    Args:
        operation: Name of the operation (e.g., "read", "decode")
        details: Additional details about the operation
        level: Logging level (default: logging.INFO)
        logger: Logger to write to (default: root logger)

    Example:
        >>> log_operation("read", "addr=0x0 size=0x200")
        >>> log_operation("decode", "block 9 -> S0:T0:#9", logging.DEBUG)
    """
    (logger or logging.getLogger()).log(level, f"{operation}: {details}")


def log_device_info(drive: "HardDiskDrive",
                    logger: Optional[logging.Logger] = None) -> None:
    """
    Log drive geometry and capacity.

    Args:
        drive: HardDiskDrive to describe
        logger: Logger to write to (default: root logger)

    Example:
        >>> log_device_info(drive)
    """
    target = logger or logging.getLogger()
    for line in get_geometry_summary(drive.geometry).splitlines():
        target.info(line)
