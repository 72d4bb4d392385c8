"""
Drive profiles for the disk model.

A DriveProfile is the configuration-file form of GeometryParameters: a named,
validated set of drive parameters that can be stored as JSON and shared
between simulation runs. Field-level checks (types, signs, unknown keys) are
done by pydantic; cross-field checks (outermost > innermost) are left to
GeometryParameters so there is a single source of truth for them.

Built-in presets:
    - demo: One surface, two tracks, 10 and 20 sectors, 6000 rpm
    - laptop-5400: Small 2.5" drive
    - desktop-7200: Common 3.5" desktop drive
    - enterprise-15k: Short-stroke 15k rpm drive
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from zbr_disk.core.errors import InvalidGeometry
from zbr_disk.core.geometry import BYTES_PER_SECTOR, GeometryParameters

# Module logger
logger = logging.getLogger(__name__)


# =============================================================================
# Profile Model
# =============================================================================


class DriveProfile(BaseModel):
    """
    Named, validated set of drive parameters.

    Example:
        >>> profile = DriveProfile(
        ...     name="demo",
        ...     surfaces=1,
        ...     tracks_per_surface=2,
        ...     sectors_innermost_track=10,
        ...     sectors_outermost_track=20,
        ...     rpm=6000,
        ... )
        >>> profile.to_parameters().sector_gradient
        10.0
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    description: Optional[str] = None

    surfaces: int = Field(ge=1)
    tracks_per_surface: int = Field(ge=2)
    sectors_innermost_track: int = Field(ge=1)
    sectors_outermost_track: int = Field(ge=2)
    rpm: int = Field(gt=0)
    sector_size: int = Field(default=BYTES_PER_SECTOR, gt=0)
    seek_overhead: float = Field(default=0.0, ge=0.0)
    seek_per_track: float = Field(default=0.0, ge=0.0)

    def to_parameters(self) -> GeometryParameters:
        """
        Build GeometryParameters from this profile.

        Raises:
            InvalidGeometry: If the parameters are inconsistent as a whole
        """
        return GeometryParameters(
            surfaces=self.surfaces,
            tracks_per_surface=self.tracks_per_surface,
            sectors_innermost_track=self.sectors_innermost_track,
            sectors_outermost_track=self.sectors_outermost_track,
            rpm=self.rpm,
            sector_size=self.sector_size,
            seek_overhead=self.seek_overhead,
            seek_per_track=self.seek_per_track,
        )


# =============================================================================
# Presets
# =============================================================================


PRESETS: Dict[str, DriveProfile] = {
    "demo": DriveProfile(
        name="demo",
        description="Two-track toy drive used in examples and tests",
        surfaces=1,
        tracks_per_surface=2,
        sectors_innermost_track=10,
        sectors_outermost_track=20,
        rpm=6000,
        sector_size=512,
        seek_overhead=0.0,
        seek_per_track=0.0,
    ),
    "laptop-5400": DriveProfile(
        name="laptop-5400",
        description="2.5 inch 5400 rpm notebook drive",
        surfaces=2,
        tracks_per_surface=150_000,
        sectors_innermost_track=900,
        sectors_outermost_track=1_800,
        rpm=5400,
        sector_size=512,
        seek_overhead=0.003,
        seek_per_track=0.0000001,
    ),
    "desktop-7200": DriveProfile(
        name="desktop-7200",
        description="3.5 inch 7200 rpm desktop drive",
        surfaces=4,
        tracks_per_surface=200_000,
        sectors_innermost_track=1_000,
        sectors_outermost_track=2_000,
        rpm=7200,
        sector_size=512,
        seek_overhead=0.002,
        seek_per_track=0.00000005,
    ),
    "enterprise-15k": DriveProfile(
        name="enterprise-15k",
        description="Short-stroke 15000 rpm enterprise drive",
        surfaces=6,
        tracks_per_surface=80_000,
        sectors_innermost_track=700,
        sectors_outermost_track=1_100,
        rpm=15000,
        sector_size=4096,
        seek_overhead=0.0015,
        seek_per_track=0.00000003,
    ),
}


def list_presets() -> List[str]:
    """Names of the built-in drive profiles, sorted."""
    return sorted(PRESETS)


def get_preset(name: str) -> DriveProfile:
    """
    Get a built-in drive profile by name.

    Raises:
        KeyError: If no preset has that name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown drive preset '{name}'. Available: {', '.join(list_presets())}"
        ) from None


# =============================================================================
# Profile Files
# =============================================================================


def parse_profile(data: Mapping[str, Any]) -> DriveProfile:
    """
    Validate a mapping as a DriveProfile.

    Both field errors and cross-field geometry errors are reported as
    InvalidGeometry, so callers handle one exception type.

    Raises:
        InvalidGeometry: If the data does not describe a valid drive
    """
    try:
        profile = DriveProfile.model_validate(data)
    except ValidationError as e:
        raise InvalidGeometry(f"Invalid drive profile: {e.error_count()} error(s)\n{e}") from e

    # fail early on cross-field inconsistencies too
    profile.to_parameters()
    return profile


def load_profile(path: Union[str, Path]) -> DriveProfile:
    """
    Load a drive profile from a JSON file.

    Args:
        path: Path to the JSON profile

    Returns:
        Validated DriveProfile

    Raises:
        InvalidGeometry: If the file is not valid JSON or not a valid profile
        OSError: If the file cannot be read
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidGeometry(f"Drive profile {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidGeometry(f"Drive profile {path} must be a JSON object")

    profile = parse_profile(data)
    logger.info(f"Loaded drive profile '{profile.name}' from {path}")
    return profile


def save_profile(profile: DriveProfile, path: Union[str, Path]) -> None:
    """
    Write a drive profile to a JSON file.

    Args:
        profile: Profile to save
        path: Destination path; parent directories are created
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(profile.model_dump_json(indent=2), encoding="utf-8")
    logger.debug(f"Saved drive profile '{profile.name}' to {path}")
