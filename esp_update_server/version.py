from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import MalformedVersion

MIN_VERSION_LENGTH = 5
HW_REVISION_WIDTH = 4


@dataclass(frozen=True)
class VersionIdentifier:
    software_version: str
    hardware_revision: str


def parse_version(combined: Optional[str]) -> VersionIdentifier:
    """
    Split ``<softwareVersion>_<hardwareRevision>`` into its parts.
    The hardware revision is always the last 4 characters and the separator
    is dropped without being checked.
    """
    if combined is None or len(combined) < MIN_VERSION_LENGTH:
        raise MalformedVersion(f"Invalid version: {combined or ''}")

    return VersionIdentifier(
        software_version=combined[: -(HW_REVISION_WIDTH + 1)],
        hardware_revision=combined[-HW_REVISION_WIDTH:],
    )
