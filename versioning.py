"""Centralised version and naming information for SnapDeck.

This module is the single source of truth for application version and
human-readable metadata. The runtime imports it for window titles and the
QSettings application name.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


APP_NAME: str = "SnapDeck"
APP_VERSION: str = "0.3.0"
APP_DESCRIPTION: str = "SnapDeck - drag panels to the screen edges and corners to tile them."


@dataclass(frozen=True)
class VersionInfo:
    major: int
    minor: int
    patch: int

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)


def parse_version(version_str: str = APP_VERSION) -> VersionInfo:
    """Parse a semantic-ish version string ``MAJOR.MINOR.PATCH``.

    Falls back to ``0.0.0`` on parse errors so callers always receive a
    usable object.
    """

    try:
        parts = [int(p) for p in str(version_str).split(".")[:3]]
        while len(parts) < 3:
            parts.append(0)
        return VersionInfo(parts[0], parts[1], parts[2])
    except ValueError:
        return VersionInfo(0, 0, 0)


__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "APP_DESCRIPTION",
    "VersionInfo",
    "parse_version",
]
