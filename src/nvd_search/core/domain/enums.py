from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @classmethod
    def cvss_v2_levels(cls) -> tuple["Severity", ...]:
        """CVSS v2 has no CRITICAL rating."""
        return (cls.LOW, cls.MEDIUM, cls.HIGH)

    @classmethod
    def cvss_v3_levels(cls) -> tuple["Severity", ...]:
        return (cls.LOW, cls.MEDIUM, cls.HIGH, cls.CRITICAL)


class VersionBoundType(str, Enum):
    INCLUDING = "including"
    EXCLUDING = "excluding"
