"""
Access-time estimation for zoned-bit-recording drives.

Seek time is linear in track distance plus a fixed overhead. Rotational
latency is a constant half revolution. Transfer time charges one sector's
angular traversal per sector, at the density of the track being read, so
outer tracks transfer each sector faster than inner ones.

A sequential transfer that runs off the end of a track moves the head to
the next track and pays a full seek plus rotational wait for the crossing.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from zbr_disk.core.addressing import AddressDecoder
from zbr_disk.core.errors import DivisionHazard, OutOfRange
from zbr_disk.core.geometry import SECONDS_PER_MINUTE, GeometryModel, Position

logger = logging.getLogger(__name__)


class OperationKind(Enum):
    """Kind of media access."""
    READ = "read"
    WRITE = "write"


@dataclass(frozen=True)
class TransferResult:
    """
    Outcome of a sequential sector transfer.

    Attributes:
        duration: Transfer time including any track-crossing penalties (seconds)
        final_track: Track the head ends on
        sectors: Sectors transferred
        track_crossings: Number of times the head advanced to the next track
    """
    duration: float
    final_track: int
    sectors: int
    track_crossings: int = 0


class AccessTimeEstimator:
    """
    Seek, rotation and transfer costs for one drive.

    Example:
        >>> estimator = AccessTimeEstimator(model)
        >>> estimator.rotational_wait()
        0.005
        >>> estimator.transfer(Position(0, 0, 0), 1).duration
        0.001
    """

    def __init__(self, geometry: GeometryModel, decoder: AddressDecoder = None):
        self.geometry = geometry
        self.decoder = decoder or AddressDecoder(geometry)
        self.params = geometry.params

    def seek_time(self, from_track: int, to_track: int) -> float:
        """Head movement cost; zero when staying on the same track."""
        if from_track == to_track:
            return 0.0
        return self.params.seek_overhead + self.params.seek_per_track * abs(to_track - from_track)

    def rotational_wait(self) -> float:
        """Average rotational latency: half a revolution."""
        if self.params.rpm == 0:
            raise DivisionHazard("rotational speed is zero", value=self.params.rpm)
        return 0.5 * (SECONDS_PER_MINUTE / self.params.rpm)

    def sector_time(self, track: int) -> float:
        """Time for one sector of the given track to pass under the head."""
        track_sectors = self.geometry.sectors_on_track(track)
        if self.params.rpm == 0 or track_sectors == 0:
            raise DivisionHazard(
                f"zero rpm or empty track {track}",
                value=(self.params.rpm, track_sectors)
            )
        return SECONDS_PER_MINUTE / (self.params.rpm * track_sectors)

    def transfer(self, position: Position, sector_count: int,
                 operation: OperationKind = OperationKind.READ) -> TransferResult:
        """
        Time a sequential run of sectors starting at a position.

        Reads and writes share the same cost model; the operation kind is
        carried through for logging.

        Args:
            position: First sector of the run
            sector_count: Number of sectors to transfer
            operation: READ or WRITE

        Returns:
            TransferResult with duration and the track the head ends on

        Raises:
            OutOfRange: If the run extends past the last track
        """
        if sector_count < 0:
            raise OutOfRange("negative sector count", value=sector_count)

        duration = 0.0
        remaining = sector_count
        crossings = 0
        current = position

        while True:
            track_limit = self.decoder.remaining_in_track(current)
            consumed = min(remaining, track_limit)
            duration += consumed * self.sector_time(current.track)
            remaining -= consumed

            if remaining <= 0:
                break

            next_track = current.track + 1
            if next_track >= self.geometry.tracks:
                raise OutOfRange(
                    "transfer runs past the last track",
                    value=sector_count, limit=self.geometry.tracks
                )

            # every crossing pays a fresh seek and rotational alignment
            duration += self.seek_time(current.track, next_track) + self.rotational_wait()
            crossings += 1
            current = Position(surface=0, track=next_track, sector=0)

        logger.debug(
            "%s %d sectors from %s: %.6fs, %d track crossings, head -> %d",
            operation.value, sector_count, position, duration, crossings, current.track
        )

        return TransferResult(
            duration=duration,
            final_track=current.track,
            sectors=sector_count,
            track_crossings=crossings,
        )
