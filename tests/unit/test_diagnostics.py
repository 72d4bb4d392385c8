"""
Unit tests for diagnostics hooks and logging helpers.

Tests that hooks observe drive activity without affecting results.
"""

import io
import logging

import pytest
from rich.console import Console

from zbr_disk.core import OperationKind, Position
from zbr_disk.core.errors import DiskModelError, InvalidGeometry, OutOfRange
from zbr_disk.utils import (
    AccessRecord,
    CompositeDiagnostics,
    DiagnosticsHook,
    DriveStatistics,
    LoggingDiagnostics,
    RichDiagnostics,
    StatisticsCollector,
    log_operation,
    log_system_info,
)
from tests.fixtures import create_demo_drive, create_multi_surface_drive


class RecordingHook(DiagnosticsHook):
    """Hook that keeps every callback for inspection."""

    def __init__(self):
        self.attached = []
        self.decodes = []
        self.accesses = []

    def on_attach(self, drive):
        self.attached.append(drive)

    def on_decode(self, address, block, position, remaining):
        self.decodes.append((address, block, position, remaining))

    def on_access(self, record):
        self.accesses.append(record)


class TestHookCallbacks:
    """Test when and with what hooks are called."""

    def test_attach_on_construction(self):
        """Test on_attach receives the new drive."""
        hook = RecordingHook()
        drive = create_demo_drive(diagnostics=hook)

        assert hook.attached == [drive]

    def test_decode_and_access_reported(self):
        """Test a read reports its decode and timing breakdown."""
        hook = RecordingHook()
        drive = create_demo_drive(diagnostics=hook)

        done = drive.read(1.0, 9 * 512, 2 * 512)

        assert hook.decodes == [(9 * 512, 9, Position(0, 0, 9), 1)]
        (record,) = hook.accesses
        assert record.operation is OperationKind.READ
        assert record.sectors == 2
        assert record.completion == pytest.approx(done)

    def test_failed_request_not_reported(self):
        """Test rejected requests produce no access records."""
        hook = RecordingHook()
        drive = create_demo_drive(diagnostics=hook)

        with pytest.raises(OutOfRange):
            drive.write(0.0, 40 * 512, 512)

        assert hook.decodes == []
        assert hook.accesses == []

    def test_hook_does_not_change_timing(self):
        """Test results are identical with and without a hook."""
        plain = create_multi_surface_drive()
        observed = create_multi_surface_drive(diagnostics=RecordingHook())

        for address in (0, 17 * 512, 30 * 512, 2 * 512):
            assert observed.read(0.0, address, 1536) == plain.read(0.0, address, 1536)

    def test_composite_forwards_to_all(self):
        """Test every child hook sees every callback."""
        first, second = RecordingHook(), RecordingHook()
        drive = create_demo_drive(diagnostics=CompositeDiagnostics(first, second))

        drive.write(0.0, 0, 512)

        for hook in (first, second):
            assert len(hook.attached) == 1
            assert len(hook.decodes) == 1
            assert len(hook.accesses) == 1


class TestStatisticsCollector:
    """Test aggregated drive statistics."""

    def test_counts(self):
        """Test reads, writes, sectors and crossings are tallied."""
        stats = StatisticsCollector()
        drive = create_demo_drive(diagnostics=stats)

        drive.read(0.0, 0, 11 * 512)      # crosses into track 1
        drive.write(1.0, 0, 512)          # head returns to track 0

        result = stats.statistics
        assert result.reads == 1
        assert result.writes == 1
        assert result.requests == 2
        assert result.sectors_read == 11
        assert result.sectors_written == 1
        assert result.track_crossings == 1
        assert result.seeks == 1
        assert result.tracks_travelled == 2
        assert result.busy_time == pytest.approx(0.0205 + 0.006)
        assert result.get_average_service_time() == pytest.approx((0.0205 + 0.006) / 2)

    def test_seek_fraction(self):
        """Test share of busy time spent seeking."""
        stats = StatisticsCollector()
        drive = create_multi_surface_drive(diagnostics=stats)

        drive.read(0.0, 24 * 512, 512)   # seek 0 -> 3

        seek = 0.0025
        busy = seek + 0.005 + 60 / (6000 * 6)
        assert stats.statistics.get_seek_fraction() == pytest.approx(seek / busy)

    def test_empty_statistics(self):
        """Test averages before any request."""
        stats = DriveStatistics()

        assert stats.get_average_service_time() == 0.0
        assert stats.get_seek_fraction() == 0.0

    def test_reset(self):
        """Test counters can be cleared."""
        stats = StatisticsCollector()
        drive = create_demo_drive(diagnostics=stats)
        drive.read(0.0, 0, 512)

        stats.reset()

        assert stats.statistics == DriveStatistics()


class TestLoggingDiagnostics:
    """Test logging hook output."""

    def test_geometry_logged_on_attach(self, caplog):
        """Test the drive summary is logged at construction."""
        logger = logging.getLogger("zbr_disk.tests.diagnostics")
        caplog.set_level(logging.DEBUG, logger=logger.name)

        create_demo_drive(diagnostics=LoggingDiagnostics(logger))

        assert "Total sectors:            30" in caplog.text

    def test_requests_logged(self, caplog):
        """Test decode and access lines are logged at the chosen level."""
        logger = logging.getLogger("zbr_disk.tests.diagnostics")
        caplog.set_level(logging.DEBUG, logger=logger.name)
        drive = create_demo_drive(diagnostics=LoggingDiagnostics(logger, level=logging.INFO))

        drive.read(0.0, 10 * 512, 512)

        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert any(m.startswith("decode: 0x1400 -> block 10") for m in messages)
        assert any(m.startswith("read: t=0.000000 addr=0x1400") for m in messages)

    def test_log_operation(self, caplog):
        """Test the operation: details format."""
        caplog.set_level(logging.INFO)

        log_operation("write", "addr=0x0 size=0x200")

        assert "write: addr=0x0 size=0x200" in caplog.text

    def test_log_system_info(self, caplog):
        """Test interpreter and numpy versions are recorded."""
        caplog.set_level(logging.INFO)

        log_system_info()

        assert "Python version:" in caplog.text
        assert "numpy version:" in caplog.text


class TestRichDiagnostics:
    """Test rich console output."""

    @pytest.fixture
    def console(self):
        return Console(file=io.StringIO(), width=120, color_system=None)

    def test_summary_table(self, console):
        """Test the geometry table is printed on attach."""
        create_demo_drive(diagnostics=RichDiagnostics(console))
        output = console.file.getvalue()

        assert "HDD" in output
        assert "tracks/surface" in output
        assert "number of sectors total" in output
        assert "30" in output

    def test_access_table(self, console):
        """Test each access prints its timing row."""
        drive = create_demo_drive(diagnostics=RichDiagnostics(console))

        drive.read(0.0, 0, 512)
        output = console.file.getvalue()

        assert "read 0x0" in output
        assert "0.005000" in output
        assert "0.006000" in output
        assert "0->0" in output

    def test_decode_hidden_by_default(self, console):
        """Test decode lines appear only when requested."""
        quiet = create_demo_drive(diagnostics=RichDiagnostics(console))
        quiet.read(0.0, 0, 512)
        assert "max. access" not in console.file.getvalue()

        chatty = create_demo_drive(diagnostics=RichDiagnostics(console, show_decode=True))
        chatty.read(0.0, 0, 512)
        assert "max. access 10" in console.file.getvalue()


class TestErrors:
    """Test exception formatting."""

    def test_hierarchy(self):
        """Test all model errors share a base class."""
        assert issubclass(InvalidGeometry, DiskModelError)
        assert issubclass(OutOfRange, DiskModelError)

    def test_out_of_range_message(self):
        """Test value and limit are included."""
        assert str(OutOfRange("past end", value=5, limit=3)) == "past end [Value: 5] [Limit: 3]"

    def test_invalid_geometry_message(self):
        """Test parameter name and value are included."""
        assert str(InvalidGeometry("bad", parameter="rpm", value=0)) == "bad [rpm=0]"
        assert str(InvalidGeometry("bad")) == "bad"

    def test_access_record_totals(self):
        """Test elapsed and completion derive from the components."""
        record = AccessRecord(
            operation=OperationKind.WRITE,
            timestamp=1.0,
            address=0,
            size=512,
            position=Position(0, 0, 0),
            sectors=1,
            seek=0.25,
            rotational=0.5,
            transfer=0.125,
            head_before=3,
            head_after=0,
        )

        assert record.elapsed == 0.875
        assert record.completion == 1.875
