"""Tests for the command functions against the in-memory daemon."""

import pytest

from conftest import FakePowerProfiles, make_profiles
from ppdctl.commands import (
    configure_action_command, configure_battery_aware_command, get_command, launch_command, list_actions_command,
    list_command, list_holds_command, query_battery_aware_command, render_profiles, set_command, version_command
)
from ppdctl.errors import InvalidConfig, InvalidProfile, Unimplemented
from ppdctl.types import Action, PowerProfile, Profile


def test_get_prints_only_the_profile(proxy, capsys):
    get_command(proxy)
    assert capsys.readouterr().out == "balanced\n"


def test_list_reverses_daemon_order_and_marks_active(proxy, capsys):
    list_command(proxy)
    out = capsys.readouterr().out
    assert out == (
        "  performance:\n"
        "    CpuDriver:\tamd_pstate\n"
        "    Degraded:  no\n"
        "\n"
        "* balanced:\n"
        "    CpuDriver:\tamd_pstate\n"
        "\n"
        "  power-saver:\n"
        "    CpuDriver:\tamd_pstate\n"
    )


def test_list_one_marker_per_header(proxy, capsys):
    proxy.active = PowerProfile.POWER_SAVER
    list_command(proxy)
    headers = [line for line in capsys.readouterr().out.splitlines() if line.endswith(":") and not line.startswith("    ")]
    assert headers == ["  performance:", "  balanced:", "* power-saver:"]


def test_list_shows_degraded_reason(proxy, capsys):
    proxy.degraded = "high-operating-temperature"
    list_command(proxy)
    out = capsys.readouterr().out
    assert "    Degraded:  high-operating-temperature\n" in out
    assert out.count("Degraded") == 1


def test_list_skips_degraded_lookup_without_performance(capsys):
    proxy = FakePowerProfiles(make_profiles("power-saver", "balanced"))
    list_command(proxy)
    assert "get_performance_degraded" not in proxy.calls
    assert "Degraded" not in capsys.readouterr().out


def test_list_no_trailing_blank_line(proxy, capsys):
    list_command(proxy)
    assert not capsys.readouterr().out.endswith("\n\n")


def test_render_profiles_prints_only_reported_drivers():
    profiles = [
        Profile(PowerProfile.BALANCED, "platform_profile", platform_driver="platform_profile", cpu_driver="intel_pstate"),
        Profile(PowerProfile.POWER_SAVER, "placeholder"),
    ]
    entries = render_profiles(profiles, PowerProfile.BALANCED, None)
    assert entries == [
        "  power-saver:",
        "* balanced:\n    CpuDriver:\tintel_pstate\n    PlatformDriver:\tplatform_profile",
    ]


def test_render_profiles_empty():
    assert render_profiles([], PowerProfile.BALANCED, None) == []


def test_set_advertised_profile_writes_once(proxy):
    set_command(proxy, "performance")
    assert proxy.profile_writes == [PowerProfile.PERFORMANCE]
    assert proxy.calls.index("list_profiles") < proxy.calls.index("set_active_profile")


def test_set_unknown_name_is_rejected_without_write(proxy):
    with pytest.raises(InvalidProfile):
        set_command(proxy, "turbo")
    assert proxy.profile_writes == []
    assert "list_profiles" not in proxy.calls


def test_set_unadvertised_profile_is_rejected_without_write():
    proxy = FakePowerProfiles(make_profiles("power-saver", "balanced"))
    with pytest.raises(InvalidProfile) as excinfo:
        set_command(proxy, "performance")
    assert excinfo.value.profile is PowerProfile.PERFORMANCE
    assert proxy.profile_writes == []


def test_list_actions(proxy, capsys):
    proxy.actions = [
        Action("trickle_charge", "Trickle charge", False),
        Action("amdgpu_dpm", "GPU power management", True),
    ]
    list_actions_command(proxy)
    assert capsys.readouterr().out == (
        "Name: trickle_charge\n"
        "Description: Trickle charge\n"
        "Enabled: false\n"
        "Name: amdgpu_dpm\n"
        "Description: GPU power management\n"
        "Enabled: true\n"
    )


@pytest.mark.parametrize("value, expected", [(True, "true"), (False, "false")])
def test_query_battery_aware(proxy, capsys, value, expected):
    proxy.battery_aware = value
    query_battery_aware_command(proxy)
    assert capsys.readouterr().out == f"Dynamic changes from charger and battery events: {expected}\n"


@pytest.mark.parametrize("enable, disable", [(True, True), (False, False)])
def test_configure_battery_aware_needs_exactly_one_flag(proxy, enable, disable):
    with pytest.raises(InvalidConfig):
        configure_battery_aware_command(proxy, enable, disable)
    assert proxy.battery_aware_writes == []


@pytest.mark.parametrize("enable, disable, written", [(True, False, True), (False, True, False)])
def test_configure_battery_aware_writes_once(proxy, enable, disable, written):
    configure_battery_aware_command(proxy, enable, disable)
    assert proxy.battery_aware_writes == [written]


def test_unimplemented_commands(proxy):
    with pytest.raises(Unimplemented, match="ConfigureAction"):
        configure_action_command(proxy, "trickle_charge", True, False)
    with pytest.raises(Unimplemented, match="ListHolds"):
        list_holds_command(proxy)
    with pytest.raises(Unimplemented, match="Launch"):
        launch_command(proxy, "steam", "performance", None, None)
    assert proxy.calls == []


def test_version(proxy, capsys):
    version_command(proxy)
    assert capsys.readouterr().out == "0.30\n"
