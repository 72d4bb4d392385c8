"""
Zoned-bit-recording disk geometry.

This module holds the immutable drive parameters and derives the physical
layout from them. Track capacity grows linearly from the innermost track
(track 0) to the outermost track, so every track may hold a different number
of sectors. The per-track counts are computed once with numpy and shared by
the address decoder and the access-time estimator.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from zbr_disk.core.errors import InvalidGeometry, OutOfRange

logger = logging.getLogger(__name__)


# Drive defaults
BYTES_PER_SECTOR = 512
SECONDS_PER_MINUTE = 60
BYTES_PER_GB = 1_000_000_000


# =============================================================================
# Geometry Parameters
# =============================================================================


@dataclass(frozen=True)
class GeometryParameters:
    """
    Physical parameters of a zoned-bit-recording hard disk.

    Parameters are validated on construction. Inconsistent values raise
    InvalidGeometry instead of producing a drive with an undefined layout.

    Attributes:
        surfaces: Number of recording surfaces (one head per surface)
        tracks_per_surface: Number of tracks on each surface
        sectors_innermost_track: Sectors on track 0
        sectors_outermost_track: Sectors on the last track
        rpm: Rotational speed in revolutions per minute
        sector_size: Bytes per sector
        seek_overhead: Fixed cost of any nonzero seek (seconds)
        seek_per_track: Cost per track traversed (seconds)

    Calculated Properties:
        sector_gradient: Sectors gained per track moving outward
        revolution_time: Time for one full revolution (seconds)

    Example:
        >>> params = GeometryParameters(
        ...     surfaces=1,
        ...     tracks_per_surface=2,
        ...     sectors_innermost_track=10,
        ...     sectors_outermost_track=20,
        ...     rpm=6000,
        ...     sector_size=512,
        ...     seek_overhead=0.0,
        ...     seek_per_track=0.0,
        ... )
        >>> params.sector_gradient
        10.0
    """
    surfaces: int
    tracks_per_surface: int
    sectors_innermost_track: int
    sectors_outermost_track: int
    rpm: int
    sector_size: int = BYTES_PER_SECTOR
    seek_overhead: float = 0.0
    seek_per_track: float = 0.0

    def __post_init__(self):
        if self.surfaces < 1:
            raise InvalidGeometry(
                "drive needs at least one surface",
                parameter="surfaces", value=self.surfaces
            )
        if self.tracks_per_surface < 2:
            raise InvalidGeometry(
                "at least two tracks per surface are needed for a sector gradient",
                parameter="tracks_per_surface", value=self.tracks_per_surface
            )
        if self.sectors_innermost_track < 1:
            raise InvalidGeometry(
                "innermost track must hold at least one sector",
                parameter="sectors_innermost_track", value=self.sectors_innermost_track
            )
        if self.sectors_outermost_track <= self.sectors_innermost_track:
            raise InvalidGeometry(
                "outermost track should contain more sectors than innermost",
                parameter="sectors_outermost_track", value=self.sectors_outermost_track
            )
        if self.rpm <= 0:
            raise InvalidGeometry(
                "rotational speed must be positive",
                parameter="rpm", value=self.rpm
            )
        if self.sector_size <= 0:
            raise InvalidGeometry(
                "sector size must be positive",
                parameter="sector_size", value=self.sector_size
            )
        if self.seek_overhead < 0:
            raise InvalidGeometry(
                "seek overhead cannot be negative",
                parameter="seek_overhead", value=self.seek_overhead
            )
        if self.seek_per_track < 0:
            raise InvalidGeometry(
                "per-track seek cost cannot be negative",
                parameter="seek_per_track", value=self.seek_per_track
            )

    @property
    def sector_gradient(self) -> float:
        """Sectors gained per track from innermost to outermost."""
        return ((self.sectors_outermost_track - self.sectors_innermost_track)
                / (self.tracks_per_surface - 1))

    @property
    def revolution_time(self) -> float:
        """Time for one platter revolution in seconds."""
        return SECONDS_PER_MINUTE / self.rpm


# =============================================================================
# Physical Position
# =============================================================================


@dataclass(frozen=True)
class Position:
    """
    Physical location of one sector.

    Attributes:
        surface: Surface (head) index
        track: Track index, 0 is innermost
        sector: Sector-slot index within the track
    """
    surface: int
    track: int
    sector: int

    def __str__(self) -> str:
        return f"S{self.surface}:T{self.track}:#{self.sector}"


# =============================================================================
# Geometry Model
# =============================================================================


class GeometryModel:
    """
    Derived layout of a zoned-bit-recording drive.

    Sector counts are floor(innermost + gradient * track), evaluated for all
    tracks at once. The cumulative block count per track (sectors times
    surfaces, summed over tracks) is kept for address decoding.

    Example:
        >>> model = GeometryModel(params)
        >>> model.sectors_on_track(1)
        20
        >>> model.total_capacity_sectors()
        30
    """

    def __init__(self, params: GeometryParameters):
        self.params = params

        tracks = np.arange(params.tracks_per_surface, dtype=np.float64)
        counts = np.floor(params.sectors_innermost_track
                          + params.sector_gradient * tracks).astype(np.int64)
        counts.setflags(write=False)
        self._sectors_per_track = counts

        cumulative = np.cumsum(counts * params.surfaces, dtype=np.int64)
        cumulative.setflags(write=False)
        self._cumulative_blocks = cumulative

        self._total_sectors = int(cumulative[-1])

        logger.debug(
            "Geometry: %d surfaces, %d tracks, %d..%d sectors/track, %d sectors total",
            params.surfaces, params.tracks_per_surface,
            int(counts[0]), int(counts[-1]), self._total_sectors
        )

    @property
    def sectors_per_track(self) -> np.ndarray:
        """Read-only array of sector counts indexed by track."""
        return self._sectors_per_track

    @property
    def cumulative_blocks(self) -> np.ndarray:
        """Read-only array; entry t is the block count of tracks 0..t inclusive."""
        return self._cumulative_blocks

    @property
    def tracks(self) -> int:
        return self.params.tracks_per_surface

    @property
    def surfaces(self) -> int:
        return self.params.surfaces

    def sectors_on_track(self, track: int) -> int:
        """
        Number of sector slots on a track.

        Args:
            track: Track index in [0, tracks_per_surface)

        Returns:
            floor(sectors_innermost + sector_gradient * track)

        Raises:
            OutOfRange: If the track does not exist
        """
        if track < 0 or track >= self.params.tracks_per_surface:
            raise OutOfRange(
                "track index outside drive",
                value=track, limit=self.params.tracks_per_surface
            )
        return int(self._sectors_per_track[track])

    def blocks_on_track(self, track: int) -> int:
        """Number of logical blocks on a track across all surfaces."""
        return self.sectors_on_track(track) * self.params.surfaces

    def first_block_of_track(self, track: int) -> int:
        """Logical block index of slot 0, surface 0 on a track."""
        return int(self._cumulative_blocks[track]) - self.blocks_on_track(track)

    def total_capacity_sectors(self) -> int:
        """Total sectors on the drive over all surfaces."""
        return self._total_sectors

    @property
    def capacity_bytes(self) -> int:
        return self._total_sectors * self.params.sector_size

    @property
    def capacity_gb(self) -> float:
        """Capacity in decimal gigabytes."""
        return self.capacity_bytes / BYTES_PER_GB

    def is_valid_position(self, position: Position) -> bool:
        """
        Check that a position addresses an existing sector.

        Args:
            position: Position to check

        Returns:
            True if surface, track and sector slot are all in range
        """
        if not 0 <= position.surface < self.params.surfaces:
            return False
        if not 0 <= position.track < self.params.tracks_per_surface:
            return False
        return 0 <= position.sector < self.sectors_on_track(position.track)

    def __repr__(self) -> str:
        return (
            f"GeometryModel(surfaces={self.params.surfaces}, "
            f"tracks={self.params.tracks_per_surface}, "
            f"sectors={self.params.sectors_innermost_track}.."
            f"{self.params.sectors_outermost_track}, "
            f"rpm={self.params.rpm})"
        )


# =============================================================================
# Geometry Information
# =============================================================================


def get_geometry_summary(model: GeometryModel,
                         title: Optional[str] = None) -> str:
    """
    Get a human-readable summary of drive geometry.

    Args:
        model: GeometryModel to describe
        title: Optional heading, defaults to "HDD"

    Returns:
        Multi-line string with geometry details

    Example:
        >>> print(get_geometry_summary(model))
        HDD
        ===
        Surfaces:                 1
        Tracks/surface:           2
        ...
    """
    params = model.params
    heading = title or "HDD"

    return f"""{heading}
{'=' * len(heading)}
Surfaces:                 {params.surfaces}
Tracks/surface:           {params.tracks_per_surface}
Sectors innermost track:  {params.sectors_innermost_track}
Sectors outermost track:  {params.sectors_outermost_track}
RPM:                      {params.rpm}
Sector size:              {params.sector_size}
Total sectors:            {model.total_capacity_sectors():,}
Capacity (GB):            {model.capacity_gb:.3f}"""


def sectors_on_track(params: GeometryParameters, track: int) -> int:
    """
    Scalar form of the per-track sector count.

    Useful for spot checks without building a full GeometryModel.
    """
    return math.floor(params.sectors_innermost_track + params.sector_gradient * track)
