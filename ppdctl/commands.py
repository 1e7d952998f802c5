import logging
from typing import List, Optional

from click import echo

from ppdctl.dbus.interface import PowerProfiles
from ppdctl.errors import InvalidConfig, InvalidProfile, Unimplemented
from ppdctl.globals import BATTERY_AWARE_LABEL, NOT_DEGRADED
from ppdctl.prints import format_bool
from ppdctl.types import PowerProfile, Profile

log = logging.getLogger(__name__)


def get_command(proxy: PowerProfiles) -> None:
    echo(proxy.get_active_profile())


def render_profiles(profiles: List[Profile], current: PowerProfile, degraded: Optional[str]) -> List[str]:
    """
    Build the `list` output, one entry per profile in reverse daemon order.

    The active profile is marked with "*", the others with a space, and the
    performance entry carries the degraded reason. Entries are separated by
    a blank line.
    """
    entries = []
    for profile in reversed(profiles):
        marker = "*" if profile.profile == current else " "
        lines = [f"{marker} {profile.profile}:"]
        if profile.cpu_driver is not None:
            lines.append(f"    CpuDriver:\t{profile.cpu_driver}")
        if profile.platform_driver is not None:
            lines.append(f"    PlatformDriver:\t{profile.platform_driver}")
        if profile.profile == PowerProfile.PERFORMANCE:
            lines.append(f"    Degraded:  {degraded or NOT_DEGRADED}")
        entries.append("\n".join(lines))
    return entries


def list_command(proxy: PowerProfiles) -> None:
    current = proxy.get_active_profile()
    profiles = proxy.list_profiles()
    degraded = None
    if any(p.profile == PowerProfile.PERFORMANCE for p in profiles):
        degraded = proxy.get_performance_degraded()
    entries = render_profiles(profiles, current, degraded)
    if entries:
        echo("\n\n".join(entries))


def set_command(proxy: PowerProfiles, name: str) -> None:
    """
    Switch the active profile after checking the daemon advertises it.

    The profile list can change between the check and the write; the daemon
    rejects profiles it does not support, which surfaces as TransportError.
    """
    profile = PowerProfile.parse(name)
    advertised = {p.profile for p in proxy.list_profiles()}
    if profile not in advertised:
        log.debug(f"{profile} not in advertised profiles {sorted(map(str, advertised))}")
        raise InvalidProfile(profile)
    proxy.set_active_profile(profile)
    log.info(f"Active profile set to {profile}")


def list_actions_command(proxy: PowerProfiles) -> None:
    for action in proxy.list_actions_info():
        echo(f"Name: {action.name}")
        echo(f"Description: {action.description}")
        echo(f"Enabled: {format_bool(action.enabled)}")


def query_battery_aware_command(proxy: PowerProfiles) -> None:
    echo(f"{BATTERY_AWARE_LABEL}: {format_bool(proxy.get_battery_aware())}")


def configure_battery_aware_command(proxy: PowerProfiles, enable: bool, disable: bool) -> None:
    if enable and disable:
        raise InvalidConfig("can't set both enable and disable")
    if not (enable or disable):
        raise InvalidConfig("enable or disable is required")
    proxy.set_battery_aware(enable)


def configure_action_command(proxy: PowerProfiles, action: str, enable: bool, disable: bool) -> None:
    raise Unimplemented("ConfigureAction command")


def list_holds_command(proxy: PowerProfiles) -> None:
    raise Unimplemented("ListHolds command")


def launch_command(proxy: PowerProfiles, arguments: str, profile: Optional[str],
                   reason: Optional[str], appid: Optional[str]) -> None:
    raise Unimplemented("Launch command")


def version_command(proxy: PowerProfiles) -> None:
    echo(proxy.get_version())
