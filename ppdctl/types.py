from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ppdctl.errors import InvalidProfile


class PowerProfile(Enum):
    POWER_SAVER = "power-saver"
    BALANCED = "balanced"
    PERFORMANCE = "performance"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Any) -> "PowerProfile":
        """
        Convert a wire string into a PowerProfile.

        :raises InvalidProfile: if value is not one of the three profile names
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidProfile(value) from None


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class Profile:
    """One selectable profile and the driver(s) backing it."""
    profile: PowerProfile
    driver: str
    platform_driver: Optional[str] = None
    cpu_driver: Optional[str] = None

    @classmethod
    def from_dbus(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            profile=PowerProfile.parse(data["Profile"]),
            driver=str(data.get("Driver", "")),
            platform_driver=_optional_str(data.get("PlatformDriver")),
            cpu_driver=_optional_str(data.get("CpuDriver")),
        )


@dataclass(frozen=True)
class Action:
    """A toggleable power-related behavior exposed by the daemon."""
    name: str
    description: str
    enabled: bool

    @classmethod
    def from_dbus(cls, data: Dict[str, Any]) -> "Action":
        return cls(
            name=str(data["Name"]),
            description=str(data["Description"]),
            enabled=bool(data["Enabled"]),
        )


@dataclass(frozen=True)
class ActiveHold:
    """A profile pinned by an application through HoldProfile."""
    reason: str
    profile: PowerProfile
    application_id: str

    @classmethod
    def from_dbus(cls, data: Dict[str, Any]) -> "ActiveHold":
        return cls(
            reason=str(data["Reason"]),
            profile=PowerProfile.parse(data["Profile"]),
            application_id=str(data["ApplicationId"]),
        )
