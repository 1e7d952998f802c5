#!/usr/bin/env python3
"""
Client-side view of the org.freedesktop.UPower.PowerProfiles interface.

Commands only talk to this abstract interface, so they can run against the
real daemon through DBusPowerProfiles or against an in-memory fake.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from ppdctl.types import Action, ActiveHold, PowerProfile, Profile


class PowerProfiles(ABC):
    """
    Typed operations on the power-profiles-daemon object.

    Every operation raises TransportError when the remote exchange cannot
    complete. Writes are remote mutations; nothing is cached locally.
    """

    # ==================== Properties ====================

    @abstractmethod
    def get_active_profile(self) -> PowerProfile: ...

    @abstractmethod
    def set_active_profile(self, profile: PowerProfile) -> None:
        """Write ActiveProfile. Does not check that the daemon advertises it."""

    @abstractmethod
    def list_profiles(self) -> List[Profile]:
        """Profiles in the daemon's own order."""

    @abstractmethod
    def list_actions(self) -> List[str]: ...

    @abstractmethod
    def list_actions_info(self) -> List[Action]: ...

    @abstractmethod
    def list_active_holds(self) -> List[ActiveHold]: ...

    @abstractmethod
    def get_battery_aware(self) -> bool: ...

    @abstractmethod
    def set_battery_aware(self, enabled: bool) -> None: ...

    @abstractmethod
    def get_performance_degraded(self) -> Optional[str]:
        """Reason the performance profile is degraded, None when it is not."""

    @abstractmethod
    def get_performance_inhibited(self) -> str:
        """Reason the performance profile is inhibited, empty when it is not."""

    @abstractmethod
    def get_version(self) -> str: ...

    # ==================== Methods ====================

    @abstractmethod
    def hold_profile(self, profile: PowerProfile, reason: str, application_id: str) -> int:
        """Request a profile hold and return its cookie."""

    @abstractmethod
    def release_profile(self, cookie: int) -> None: ...

    @abstractmethod
    def set_action_enabled(self, name: str, enabled: bool) -> None: ...

    # ==================== Signals ====================

    @abstractmethod
    def subscribe_active_profile_changes(self) -> Iterator[PowerProfile]:
        """
        Yield every new ActiveProfile value as the daemon reports it.

        The iterator never ends on its own and blocks between values. It
        cannot be restarted; call again for a new subscription.
        """
