#!/usr/bin/env python3
"""
D-Bus support for ppdctl.

This package talks to power-profiles-daemon through the
org.freedesktop.UPower.PowerProfiles D-Bus interface. The dasbus-backed
client lives in ppdctl.dbus.proxy and is imported on demand, so the abstract
interface and constants can be used without a bus available.
"""

from .interface import PowerProfiles
from .constants import (
    DBUS_SERVICE_NAME,
    DBUS_OBJECT_PATH,
    DBUS_INTERFACE_NAME,
    LEGACY_DBUS_SERVICE_NAME,
    KNOWN_SERVICES,
)

__all__ = [
    # Client interface
    "PowerProfiles",
    # Constants
    "DBUS_SERVICE_NAME",
    "DBUS_OBJECT_PATH",
    "DBUS_INTERFACE_NAME",
    "LEGACY_DBUS_SERVICE_NAME",
    "KNOWN_SERVICES",
]
