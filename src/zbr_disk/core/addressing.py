"""
Logical block addressing for zoned-bit-recording drives.

Byte addresses map to logical blocks (address // sector_size). Blocks are
laid out track-major, sector-slot next, surface fastest: on each track,
slot 0 holds one block per surface, then slot 1 holds the next group, and
so on until the track is full. The next track then begins.
"""

import logging

import numpy as np

from zbr_disk.core.errors import OutOfRange
from zbr_disk.core.geometry import GeometryModel, Position

logger = logging.getLogger(__name__)


class AddressDecoder:
    """
    Translate byte addresses into physical positions.

    The decoder holds no state besides the geometry, so decode() always
    returns the same Position for the same address.

    Example:
        >>> decoder = AddressDecoder(model)
        >>> decoder.decode(10 * 512)
        Position(surface=0, track=1, sector=0)
    """

    def __init__(self, geometry: GeometryModel):
        self.geometry = geometry

    @property
    def capacity_bytes(self) -> int:
        return self.geometry.capacity_bytes

    def block_index(self, address: int) -> int:
        """
        Logical block holding a byte address.

        Raises:
            OutOfRange: If the address is negative or past the end of the drive
        """
        if address < 0 or address >= self.capacity_bytes:
            raise OutOfRange(
                "address outside drive capacity",
                value=address, limit=self.capacity_bytes
            )
        return address // self.geometry.params.sector_size

    def decode(self, address: int) -> Position:
        """
        Decode a byte address into (surface, track, sector slot).

        The track is the first one whose cumulative block count reaches
        block + 1. Within that track, the residual offset walks sector
        slots upward with surfaces varying fastest.

        Args:
            address: Byte address in [0, capacity_bytes)

        Returns:
            Position of the sector holding the address

        Raises:
            OutOfRange: If the address lies outside the drive
        """
        block = self.block_index(address)

        # first track whose running total covers block + 1
        track = int(np.searchsorted(self.geometry.cumulative_blocks, block + 1, side="left"))

        offset = block - self.geometry.first_block_of_track(track)
        sector, surface = divmod(offset, self.geometry.surfaces)

        return Position(surface=surface, track=track, sector=sector)

    def encode(self, position: Position) -> int:
        """
        Logical block index of a physical position.

        Inverse of decode() at block granularity.

        Raises:
            OutOfRange: If the position does not exist on this drive
        """
        if not self.geometry.is_valid_position(position):
            raise OutOfRange("position outside drive geometry", value=position)

        return (self.geometry.first_block_of_track(position.track)
                + position.sector * self.geometry.surfaces
                + position.surface)

    def remaining_in_track(self, position: Position) -> int:
        """
        Blocks from a position (inclusive) to the end of its track.

        This is the most a single sequential transfer can consume before
        the head has to move to the next track.
        """
        track_sectors = self.geometry.sectors_on_track(position.track)
        surfaces = self.geometry.surfaces
        return (track_sectors - (position.sector + 1)) * surfaces + (surfaces - position.surface)
