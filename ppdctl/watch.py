import logging

from click import echo

from ppdctl.dbus.interface import PowerProfiles

log = logging.getLogger(__name__)


def watch_command(proxy: PowerProfiles) -> None:
    """
    Print the active profile, then every change the daemon reports.

    Runs until the process is interrupted; there is no timeout.
    """
    changes = proxy.subscribe_active_profile_changes()
    echo(proxy.get_active_profile())
    for profile in changes:
        log.debug(f"ActiveProfile changed to {profile}")
        echo(profile)
