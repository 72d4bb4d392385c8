"""
Integration tests for request sequences against a drive.

Simulates a host issuing requests in simulated-time order, each starting
when the previous one completes, and checks the drive stays consistent.
"""

import random

import pytest

from zbr_disk import (
    HardDiskDrive,
    OutOfRange,
    StatisticsCollector,
    get_preset,
)
from tests.fixtures import create_demo_drive


def run_workload(drive, requests, start=0.0):
    """Issue (op, address, size) requests back to back; return completion times."""
    now = start
    completions = []
    for operation, address, size in requests:
        issue = drive.read if operation == "r" else drive.write
        now = issue(now, address, size)
        completions.append(now)
    return completions


class TestSequentialStream:
    """Test a sequential scan of the demo drive."""

    def test_sector_by_sector_scan(self):
        """Test reading every sector one request at a time."""
        drive = create_demo_drive()
        requests = [("r", block * 512, 512) for block in range(30)]

        completions = run_workload(drive, requests)

        # each request: half revolution + one sector; the first track-1 request
        # also seeks, but seeks are free on this drive
        expected = 10 * (0.005 + 0.001) + 20 * (0.005 + 0.0005)
        assert completions[-1] == pytest.approx(expected)
        assert drive.head_track == 1

    def test_single_large_request_cheaper_than_many(self):
        """Test one 30-sector read beats 30 one-sector reads."""
        bulk = create_demo_drive()
        single = bulk.read(0.0, 0, 30 * 512)

        scan = create_demo_drive()
        completions = run_workload(scan, [("r", b * 512, 512) for b in range(30)])

        # one initial wait + 30 sectors + one crossing penalty
        assert single == pytest.approx(0.005 + 0.01 + 0.005 + 0.01)
        assert single < completions[-1]


class TestRandomWorkload:
    """Test a reproducible random workload on a realistic drive."""

    @pytest.fixture
    def drive_and_stats(self):
        stats = StatisticsCollector()
        drive = HardDiskDrive.from_profile(get_preset("laptop-5400"), diagnostics=stats)
        return drive, stats

    def make_requests(self, drive, count=200, seed=1234):
        rng = random.Random(seed)
        sector_size = drive.parameters.sector_size
        total = drive.geometry.total_capacity_sectors()
        requests = []
        for _ in range(count):
            sectors = rng.choice([1, 8, 64, 256, 4096])
            block = rng.randrange(0, total - sectors)
            operation = rng.choice("rw")
            requests.append((operation, block * sector_size, sectors * sector_size))
        return requests

    def test_time_moves_forward(self, drive_and_stats):
        """Test every completion is later than the one before."""
        drive, _ = drive_and_stats

        completions = run_workload(drive, self.make_requests(drive))

        assert all(b > a for a, b in zip(completions, completions[1:]))

    def test_head_stays_on_drive(self, drive_and_stats):
        """Test the head track is always a valid track index."""
        drive, _ = drive_and_stats
        now = 0.0

        for operation, address, size in self.make_requests(drive, count=50):
            now = drive.read(now, address, size) if operation == "r" else drive.write(now, address, size)
            assert 0 <= drive.head_track < drive.parameters.tracks_per_surface

    def test_statistics_match_workload(self, drive_and_stats):
        """Test collected statistics account for every request."""
        drive, stats = drive_and_stats
        requests = self.make_requests(drive)

        completions = run_workload(drive, requests)

        result = stats.statistics
        assert result.reads == sum(1 for op, _, _ in requests if op == "r")
        assert result.writes == sum(1 for op, _, _ in requests if op == "w")
        assert result.sectors_read + result.sectors_written == \
            sum(size // drive.parameters.sector_size for _, _, size in requests)
        assert result.busy_time == pytest.approx(completions[-1])

    def test_deterministic(self):
        """Test replaying a workload on a fresh drive gives identical times."""
        profile = get_preset("enterprise-15k")
        first = HardDiskDrive.from_profile(profile)
        second = HardDiskDrive.from_profile(profile)
        requests = self.make_requests(first, count=100, seed=99)

        assert run_workload(first, requests) == run_workload(second, requests)

    def test_rejected_request_mid_workload(self, drive_and_stats):
        """Test a bad request fails without disturbing later requests."""
        drive, _ = drive_and_stats
        reference = HardDiskDrive.from_profile(get_preset("laptop-5400"))
        requests = self.make_requests(drive, count=20)

        run_workload(drive, requests[:10])
        run_workload(reference, requests[:10])

        with pytest.raises(OutOfRange):
            drive.read(0.0, drive.capacity_bytes, 512)

        assert drive.head_track == reference.head_track
        assert run_workload(drive, requests[10:], 1.0) == run_workload(reference, requests[10:], 1.0)
