"""
Test suite for the ZBR disk model.

This package contains:
- Unit tests for geometry, addressing, timing, profiles and diagnostics
- Integration tests for request sequences against a drive
- Drive fixtures with hand-checkable layouts
"""
