#!/usr/bin/env python3
"""
D-Bus constants for talking to power-profiles-daemon.

The daemon publishes a single object implementing the
org.freedesktop.UPower.PowerProfiles interface on the system bus. Older
releases use the net.hadess.PowerProfiles name for the same interface.
"""

# D-Bus service identification
DBUS_SERVICE_NAME = "org.freedesktop.UPower.PowerProfiles"
DBUS_OBJECT_PATH = "/org/freedesktop/UPower/PowerProfiles"
DBUS_INTERFACE_NAME = "org.freedesktop.UPower.PowerProfiles"

# Pre-0.20 power-profiles-daemon
LEGACY_DBUS_SERVICE_NAME = "net.hadess.PowerProfiles"
LEGACY_DBUS_OBJECT_PATH = "/net/hadess/PowerProfiles"
LEGACY_DBUS_INTERFACE_NAME = "net.hadess.PowerProfiles"

# service name -> (object path, interface name)
KNOWN_SERVICES = {
    DBUS_SERVICE_NAME: (DBUS_OBJECT_PATH, DBUS_INTERFACE_NAME),
    LEGACY_DBUS_SERVICE_NAME: (LEGACY_DBUS_OBJECT_PATH, LEGACY_DBUS_INTERFACE_NAME),
}

PROPERTIES_INTERFACE_NAME = "org.freedesktop.DBus.Properties"

# Properties read or written by the client
PROPERTY_ACTIVE_PROFILE = "ActiveProfile"
PROPERTY_PERFORMANCE_INHIBITED = "PerformanceInhibited"
PROPERTY_PERFORMANCE_DEGRADED = "PerformanceDegraded"
PROPERTY_PROFILES = "Profiles"
PROPERTY_ACTIONS = "Actions"
PROPERTY_ACTIONS_INFO = "ActionsInfo"
PROPERTY_ACTIVE_PROFILE_HOLDS = "ActiveProfileHolds"
PROPERTY_VERSION = "Version"
PROPERTY_BATTERY_AWARE = "BatteryAware"
