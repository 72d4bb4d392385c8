"""
Diagnostics hooks for the disk model.

A drive reports what it does through a DiagnosticsHook: its geometry once at
construction, each address decode, and each completed access. Hooks only
observe. Nothing a hook does can change the timing a drive returns.

Hooks:
    NullDiagnostics: Ignores everything (default)
    LoggingDiagnostics: Writes through the logging module
    RichDiagnostics: Renders tables on a rich console
    StatisticsCollector: Aggregates per-drive counters
    CompositeDiagnostics: Fans out to several hooks
"""

import logging
from abc import ABC
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from rich.console import Console
from rich.table import Table

from zbr_disk.core.geometry import Position
from zbr_disk.core.timing import OperationKind
from zbr_disk.utils.logging import log_device_info, log_operation

if TYPE_CHECKING:
    from zbr_disk.core.device import HardDiskDrive


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class AccessRecord:
    """
    Full timing breakdown of one read or write.

    Attributes:
        operation: READ or WRITE
        timestamp: Simulated time the request was issued
        address: Byte address of the request
        size: Request size in bytes
        position: Decoded start position
        sectors: Sectors transferred (size // sector_size)
        seek: Initial seek time from the previous head track
        rotational: Initial rotational wait
        transfer: Transfer time including track-crossing penalties
        head_before: Head track before the access
        head_after: Head track after the access
        track_crossings: Number of track boundaries crossed during transfer
    """
    operation: OperationKind
    timestamp: float
    address: int
    size: int
    position: Position
    sectors: int
    seek: float
    rotational: float
    transfer: float
    head_before: int
    head_after: int
    track_crossings: int = 0

    @property
    def elapsed(self) -> float:
        """Total service time of the access."""
        return self.seek + self.rotational + self.transfer

    @property
    def completion(self) -> float:
        """Simulated time the access completes."""
        return self.timestamp + self.elapsed


@dataclass
class DriveStatistics:
    """
    Counters accumulated over the lifetime of a drive.

    Attributes:
        reads: Completed read requests
        writes: Completed write requests
        sectors_read: Sectors transferred by reads
        sectors_written: Sectors transferred by writes
        busy_time: Sum of service times (seconds)
        seek_time: Sum of initial seek times (seconds)
        seeks: Requests that needed a nonzero initial seek
        track_crossings: Track boundaries crossed mid-transfer
        tracks_travelled: Total head movement in tracks
    """
    reads: int = 0
    writes: int = 0
    sectors_read: int = 0
    sectors_written: int = 0
    busy_time: float = 0.0
    seek_time: float = 0.0
    seeks: int = 0
    track_crossings: int = 0
    tracks_travelled: int = 0

    @property
    def requests(self) -> int:
        return self.reads + self.writes

    def get_average_service_time(self) -> float:
        """
        Get mean service time per request.

        Returns:
            Average seconds per request, 0.0 before any request
        """
        if self.requests == 0:
            return 0.0
        return self.busy_time / self.requests

    def get_seek_fraction(self) -> float:
        """Share of busy time spent on initial seeks (0.0 to 1.0)."""
        if self.busy_time == 0:
            return 0.0
        return self.seek_time / self.busy_time


# =============================================================================
# Hooks
# =============================================================================


class DiagnosticsHook(ABC):
    """
    Observer interface for drive activity.

    All callbacks default to doing nothing, so subclasses override only
    what they need.
    """

    def on_attach(self, drive: "HardDiskDrive") -> None:
        """Called once when a drive is constructed with this hook."""

    def on_decode(self, address: int, block: int, position: Position,
                  remaining: int) -> None:
        """Called after an address has been decoded for a request."""

    def on_access(self, record: AccessRecord) -> None:
        """Called after a read or write has completed."""


class NullDiagnostics(DiagnosticsHook):
    """Hook that discards everything."""
    pass


class LoggingDiagnostics(DiagnosticsHook):
    """
    Hook that writes drive activity to a logger.

    Args:
        logger: Logger to use, defaults to this module's logger
        level: Level for per-request messages (default: logging.DEBUG)
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 level: int = logging.DEBUG):
        self.logger = logger or logging.getLogger(__name__)
        self.level = level

    def on_attach(self, drive: "HardDiskDrive") -> None:
        log_device_info(drive, logger=self.logger)

    def on_decode(self, address: int, block: int, position: Position,
                  remaining: int) -> None:
        log_operation(
            "decode",
            f"0x{address:x} -> block {block}, {position}, max. access {remaining}",
            level=self.level,
            logger=self.logger,
        )

    def on_access(self, record: AccessRecord) -> None:
        log_operation(
            record.operation.value,
            f"t={record.timestamp:.6f} addr=0x{record.address:x} size=0x{record.size:x} "
            f"seek={record.seek:.6f} wait={record.rotational:.6f} "
            f"xfer={record.transfer:.6f} head {record.head_before}->{record.head_after}",
            level=self.level,
            logger=self.logger,
        )


class RichDiagnostics(DiagnosticsHook):
    """
    Hook that renders drive activity as rich tables.

    Args:
        console: Console to print on, defaults to a new stdout console
        show_decode: Also print every address decode
    """

    def __init__(self, console: Optional[Console] = None, show_decode: bool = False):
        self.console = console or Console()
        self.show_decode = show_decode

    def on_attach(self, drive: "HardDiskDrive") -> None:
        params = drive.parameters
        geometry = drive.geometry

        table = Table(title="HDD", show_header=False)
        table.add_column("Parameter", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("surfaces", str(params.surfaces))
        table.add_row("tracks/surface", str(params.tracks_per_surface))
        table.add_row("sect on innermost track", str(params.sectors_innermost_track))
        table.add_row("sect on outermost track", str(params.sectors_outermost_track))
        table.add_row("rpm", str(params.rpm))
        table.add_row("sector size", str(params.sector_size))
        table.add_row("number of sectors total", f"{geometry.total_capacity_sectors():,}")
        table.add_row("capacity (GB)", f"{geometry.capacity_gb:.3f}")

        self.console.print(table)

    def on_decode(self, address: int, block: int, position: Position,
                  remaining: int) -> None:
        if not self.show_decode:
            return
        self.console.print(
            f"[bold]decode[/bold](0x{address:x}) block {block} "
            f"surface {position.surface} track {position.track} "
            f"sector {position.sector} max. access {remaining}"
        )

    def on_access(self, record: AccessRecord) -> None:
        table = Table(title=f"{record.operation.value} 0x{record.address:x}")
        for column in ("start", "seek", "wait", "transfer", "done", "head"):
            table.add_column(column, justify="right")
        table.add_row(
            f"{record.timestamp:.6f}",
            f"{record.seek:.6f}",
            f"{record.rotational:.6f}",
            f"{record.transfer:.6f}",
            f"{record.completion:.6f}",
            f"{record.head_before}->{record.head_after}",
        )
        self.console.print(table)


class StatisticsCollector(DiagnosticsHook):
    """
    Hook that accumulates DriveStatistics.

    Example:
        >>> stats = StatisticsCollector()
        >>> drive = HardDiskDrive.from_profile(get_preset("demo"), diagnostics=stats)
        >>> drive.read(0.0, 0, 512)
        >>> stats.statistics.reads
        1
    """

    def __init__(self):
        self.statistics = DriveStatistics()

    def on_access(self, record: AccessRecord) -> None:
        stats = self.statistics
        if record.operation is OperationKind.WRITE:
            stats.writes += 1
            stats.sectors_written += record.sectors
        else:
            stats.reads += 1
            stats.sectors_read += record.sectors

        stats.busy_time += record.elapsed
        stats.seek_time += record.seek
        if record.head_before != record.position.track:
            stats.seeks += 1
        stats.track_crossings += record.track_crossings
        stats.tracks_travelled += (abs(record.position.track - record.head_before)
                                   + record.track_crossings)

    def reset(self) -> None:
        self.statistics = DriveStatistics()


class CompositeDiagnostics(DiagnosticsHook):
    """Hook that forwards every callback to each of its children in order."""

    def __init__(self, *hooks: DiagnosticsHook):
        self.hooks: List[DiagnosticsHook] = list(hooks)

    def on_attach(self, drive: "HardDiskDrive") -> None:
        for hook in self.hooks:
            hook.on_attach(drive)

    def on_decode(self, address: int, block: int, position: Position,
                  remaining: int) -> None:
        for hook in self.hooks:
            hook.on_decode(address, block, position, remaining)

    def on_access(self, record: AccessRecord) -> None:
        for hook in self.hooks:
            hook.on_access(record)
