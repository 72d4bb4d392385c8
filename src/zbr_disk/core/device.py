"""
Hard disk drive facade.

HardDiskDrive is what a performance simulator talks to. It owns the
geometry, the decoder and the estimator, and carries the only mutable
state of the model: the track the head is currently on.

Each read or write decodes the start address, seeks from the current head
track, waits half a revolution, transfers the requested sectors and leaves
the head wherever the transfer ended. A failed request raises and leaves
the head untouched.
"""

import logging
from typing import Optional

from zbr_disk.core.addressing import AddressDecoder
from zbr_disk.core.errors import OutOfRange
from zbr_disk.core.geometry import GeometryModel, GeometryParameters, Position
from zbr_disk.core.settings import DriveProfile
from zbr_disk.core.timing import AccessTimeEstimator, OperationKind
from zbr_disk.utils.diagnostics import (
    AccessRecord,
    DiagnosticsHook,
    LoggingDiagnostics,
    NullDiagnostics,
)

logger = logging.getLogger(__name__)


class HardDiskDrive:
    """
    Zoned-bit-recording hard disk access-time model.

    Args:
        surfaces: Number of recording surfaces
        tracks_per_surface: Tracks on each surface
        sectors_innermost_track: Sectors on track 0
        sectors_outermost_track: Sectors on the last track
        rpm: Rotational speed (revolutions per minute)
        sector_size: Bytes per sector
        seek_overhead: Fixed cost of a nonzero seek (seconds)
        seek_per_track: Cost per track traversed (seconds)
        verbose: Log geometry and every request when no hook is given
        diagnostics: Hook receiving geometry, decode and access reports

    Raises:
        InvalidGeometry: If the parameters are inconsistent

    Example:
        >>> drive = HardDiskDrive(1, 2, 10, 20, 6000, 512, 0.0, 0.0)
        >>> drive.read(0.0, 0, 512)
        0.006
        >>> drive.head_track
        0
    """

    def __init__(self, surfaces: int, tracks_per_surface: int,
                 sectors_innermost_track: int, sectors_outermost_track: int,
                 rpm: int, sector_size: int,
                 seek_overhead: float, seek_per_track: float,
                 verbose: bool = False,
                 diagnostics: Optional[DiagnosticsHook] = None):
        params = GeometryParameters(
            surfaces=surfaces,
            tracks_per_surface=tracks_per_surface,
            sectors_innermost_track=sectors_innermost_track,
            sectors_outermost_track=sectors_outermost_track,
            rpm=rpm,
            sector_size=sector_size,
            seek_overhead=seek_overhead,
            seek_per_track=seek_per_track,
        )

        self._geometry = GeometryModel(params)
        self._decoder = AddressDecoder(self._geometry)
        self._estimator = AccessTimeEstimator(self._geometry, self._decoder)
        self._head_track = 0
        self.verbose = verbose

        if diagnostics is None:
            diagnostics = LoggingDiagnostics(logger) if verbose else NullDiagnostics()
        self.diagnostics = diagnostics

        logger.info(
            "HDD created: %d surfaces, %d tracks/surface, %d sectors, %.3f GB",
            params.surfaces, params.tracks_per_surface,
            self._geometry.total_capacity_sectors(), self._geometry.capacity_gb
        )
        self.diagnostics.on_attach(self)

    @classmethod
    def from_parameters(cls, params: GeometryParameters, verbose: bool = False,
                        diagnostics: Optional[DiagnosticsHook] = None) -> "HardDiskDrive":
        """Create a drive from an existing GeometryParameters."""
        return cls(
            params.surfaces,
            params.tracks_per_surface,
            params.sectors_innermost_track,
            params.sectors_outermost_track,
            params.rpm,
            params.sector_size,
            params.seek_overhead,
            params.seek_per_track,
            verbose=verbose,
            diagnostics=diagnostics,
        )

    @classmethod
    def from_profile(cls, profile: DriveProfile, verbose: bool = False,
                     diagnostics: Optional[DiagnosticsHook] = None) -> "HardDiskDrive":
        """Create a drive from a DriveProfile (see zbr_disk.core.settings)."""
        return cls.from_parameters(profile.to_parameters(), verbose=verbose,
                                   diagnostics=diagnostics)

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    @property
    def parameters(self) -> GeometryParameters:
        return self._geometry.params

    @property
    def geometry(self) -> GeometryModel:
        return self._geometry

    @property
    def decoder(self) -> AddressDecoder:
        return self._decoder

    @property
    def estimator(self) -> AccessTimeEstimator:
        return self._estimator

    @property
    def head_track(self) -> int:
        """Track the head is currently positioned over."""
        return self._head_track

    @property
    def capacity_bytes(self) -> int:
        return self._geometry.capacity_bytes

    def decode(self, address: int) -> Position:
        """Decode a byte address without touching head state."""
        return self._decoder.decode(address)

    # -------------------------------------------------------------------------
    # Access
    # -------------------------------------------------------------------------

    def estimate(self, operation: OperationKind, address: int, size: int,
                 timestamp: float = 0.0) -> AccessRecord:
        """
        Compute the cost of an access from the current head position.

        The head is not moved, so this can be used for what-if queries.

        Args:
            operation: READ or WRITE
            address: Byte address of the first byte
            size: Request size in bytes; partial sectors are not counted
            timestamp: Simulated issue time recorded in the result

        Returns:
            AccessRecord with the full timing breakdown

        Raises:
            OutOfRange: If address or address + size falls outside the drive
        """
        if size < 0:
            raise OutOfRange("negative request size", value=size)
        if address + size > self.capacity_bytes:
            raise OutOfRange(
                "request extends past drive capacity",
                value=address + size, limit=self.capacity_bytes
            )

        position = self._decoder.decode(address)
        sector_count = size // self.parameters.sector_size

        seek = self._estimator.seek_time(self._head_track, position.track)
        rotational = self._estimator.rotational_wait()
        transfer = self._estimator.transfer(position, sector_count, operation)

        return AccessRecord(
            operation=operation,
            timestamp=timestamp,
            address=address,
            size=size,
            position=position,
            sectors=sector_count,
            seek=seek,
            rotational=rotational,
            transfer=transfer.duration,
            head_before=self._head_track,
            head_after=transfer.final_track,
            track_crossings=transfer.track_crossings,
        )

    def read(self, timestamp: float, address: int, size: int) -> float:
        """
        Read size bytes at address, starting at timestamp.

        Returns:
            Simulated completion time

        Raises:
            OutOfRange: If the request falls outside the drive
        """
        return self._access(OperationKind.READ, timestamp, address, size)

    def write(self, timestamp: float, address: int, size: int) -> float:
        """
        Write size bytes at address, starting at timestamp.

        Writes currently cost the same as reads.

        Returns:
            Simulated completion time

        Raises:
            OutOfRange: If the request falls outside the drive
        """
        return self._access(OperationKind.WRITE, timestamp, address, size)

    def _access(self, operation: OperationKind, timestamp: float,
                address: int, size: int) -> float:
        logger.debug("HDD::%s(%s, 0x%x, 0x%x)", operation.value, timestamp, address, size)

        record = self.estimate(operation, address, size, timestamp)

        self.diagnostics.on_decode(
            address,
            self._decoder.block_index(address),
            record.position,
            self._decoder.remaining_in_track(record.position),
        )

        self._head_track = record.head_after
        self.diagnostics.on_access(record)

        return timestamp + record.seek + record.rotational + record.transfer

    def __repr__(self) -> str:
        return f"HardDiskDrive({self._geometry!r}, head_track={self._head_track})"
