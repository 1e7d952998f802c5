"""Shared fixtures: an in-memory PowerProfiles standing in for the daemon."""

from typing import Iterator, List, Optional

import pytest

from ppdctl.dbus.interface import PowerProfiles
from ppdctl.types import Action, ActiveHold, PowerProfile, Profile


class FakePowerProfiles(PowerProfiles):
    """Records every write and replays scripted ActiveProfile changes."""

    def __init__(self, profiles: List[Profile], active: PowerProfile = PowerProfile.BALANCED):
        self.profiles = profiles
        self.active = active
        self.degraded: Optional[str] = None
        self.inhibited = ""
        self.battery_aware = True
        self.actions: List[Action] = []
        self.holds: List[ActiveHold] = []
        self.version = "0.30"
        self.changes: List[PowerProfile] = []
        self.calls: List[str] = []
        self.profile_writes: List[PowerProfile] = []
        self.battery_aware_writes: List[bool] = []

    def get_active_profile(self) -> PowerProfile:
        self.calls.append("get_active_profile")
        return self.active

    def set_active_profile(self, profile: PowerProfile) -> None:
        self.calls.append("set_active_profile")
        self.profile_writes.append(profile)
        self.active = profile

    def list_profiles(self) -> List[Profile]:
        self.calls.append("list_profiles")
        return list(self.profiles)

    def list_actions(self) -> List[str]:
        return [a.name for a in self.actions]

    def list_actions_info(self) -> List[Action]:
        self.calls.append("list_actions_info")
        return list(self.actions)

    def list_active_holds(self) -> List[ActiveHold]:
        return list(self.holds)

    def get_battery_aware(self) -> bool:
        self.calls.append("get_battery_aware")
        return self.battery_aware

    def set_battery_aware(self, enabled: bool) -> None:
        self.calls.append("set_battery_aware")
        self.battery_aware_writes.append(enabled)
        self.battery_aware = enabled

    def get_performance_degraded(self) -> Optional[str]:
        self.calls.append("get_performance_degraded")
        return self.degraded

    def get_performance_inhibited(self) -> str:
        return self.inhibited

    def get_version(self) -> str:
        return self.version

    def hold_profile(self, profile: PowerProfile, reason: str, application_id: str) -> int:
        self.holds.append(ActiveHold(reason=reason, profile=profile, application_id=application_id))
        return len(self.holds)

    def release_profile(self, cookie: int) -> None:
        del self.holds[cookie - 1]

    def set_action_enabled(self, name: str, enabled: bool) -> None:
        self.actions = [
            Action(a.name, a.description, enabled) if a.name == name else a for a in self.actions
        ]

    def subscribe_active_profile_changes(self) -> Iterator[PowerProfile]:
        self.calls.append("subscribe_active_profile_changes")
        return iter(self.changes)


def make_profiles(*names: str) -> List[Profile]:
    return [Profile(profile=PowerProfile.parse(n), driver="multiple", cpu_driver="amd_pstate") for n in names]


@pytest.fixture
def proxy() -> FakePowerProfiles:
    return FakePowerProfiles(make_profiles("power-saver", "balanced", "performance"))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's real ppdctl.conf out of the tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setattr("ppdctl.config.config.SYSTEM_CONFIG_FILE", str(tmp_path / "etc" / "ppdctl.conf"))
