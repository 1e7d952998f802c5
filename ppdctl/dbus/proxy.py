#!/usr/bin/env python3
"""
dasbus client for the org.freedesktop.UPower.PowerProfiles interface.

This module turns the typed PowerProfiles operations into property reads,
property writes and method calls on the daemon object, and decodes replies
into ppdctl.types values.
"""

import logging
from collections import deque
from functools import wraps
from typing import Any, Callable, Iterator, List, Optional

from dasbus.connection import SessionMessageBus, SystemMessageBus
from dasbus.error import DBusError
from dasbus.typing import get_native
from gi.repository import GLib

from ppdctl.dbus.constants import (
    DBUS_SERVICE_NAME,
    KNOWN_SERVICES,
    PROPERTIES_INTERFACE_NAME,
    PROPERTY_ACTIVE_PROFILE,
    PROPERTY_ACTIVE_PROFILE_HOLDS,
    PROPERTY_ACTIONS,
    PROPERTY_ACTIONS_INFO,
    PROPERTY_BATTERY_AWARE,
    PROPERTY_PERFORMANCE_DEGRADED,
    PROPERTY_PERFORMANCE_INHIBITED,
    PROPERTY_PROFILES,
    PROPERTY_VERSION,
)
from ppdctl.dbus.interface import PowerProfiles
from ppdctl.errors import InvalidProfile, TransportError
from ppdctl.types import Action, ActiveHold, PowerProfile, Profile

log = logging.getLogger(__name__)

# Failures of the D-Bus exchange itself
REMOTE_ERRORS = (DBusError, GLib.Error)
# Raised by decoders on a reply that does not match the interface
DECODE_ERRORS = (InvalidProfile, AttributeError, KeyError, TypeError, ValueError)

WAKEUP_INTERVAL_MS = 250

MESSAGE_BUSES = {
    "system": SystemMessageBus,
    "session": SessionMessageBus,
}


class MalformedReply(Exception):
    """The daemon's reply or introspection data does not match the interface."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause))


def decode(decoder: Callable, value: Any) -> Any:
    try:
        return decoder(value)
    except DECODE_ERRORS as e:
        raise MalformedReply(e) from e


def decode_each(decoder: Callable, values: Any) -> List[Any]:
    return decode(lambda items: [decoder(item) for item in items], values)


def member(proxy, name: str) -> Any:
    """Look up a proxy member; dasbus raises AttributeError when introspection lacks it."""
    try:
        return getattr(proxy, name)
    except AttributeError as e:
        raise MalformedReply(e) from e


def remote_call(operation: str) -> Callable:
    """Log the call and turn a failed exchange or a malformed reply into TransportError."""
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            log.debug(f"{operation}: args={args}")
            try:
                return func(self, *args, **kwargs)
            except REMOTE_ERRORS as e:
                log.debug(f"{operation} failed: {e!r}")
                raise TransportError(e, operation) from e
            except MalformedReply as e:
                log.debug(f"{operation} returned a malformed reply: {e.cause!r}")
                raise TransportError(e.cause, operation) from e.cause
        return wrapper
    return decorator


def open_bus(bus_type: str = "system"):
    """Create the message bus connection named by bus_type ("system" or "session")."""
    return MESSAGE_BUSES[bus_type]()


class DBusPowerProfiles(PowerProfiles):
    """
    PowerProfiles backed by the power-profiles-daemon object on D-Bus.

    Owns the bus connection it is given; close() (or leaving the with block)
    disconnects it.
    """

    def __init__(self, bus=None, service_name: str = DBUS_SERVICE_NAME):
        self._bus = bus if bus is not None else open_bus()
        self._service_name = service_name
        self._object_path, self._interface_name = KNOWN_SERVICES[service_name]
        try:
            self._proxy = self._bus.get_proxy(self._service_name, self._object_path, self._interface_name)
        except REMOTE_ERRORS as e:
            raise TransportError(e, "connect") from e

    def __enter__(self) -> "DBusPowerProfiles":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        log.debug(f"Disconnecting from {self._service_name}")
        self._bus.disconnect()

    def _get(self, name: str) -> Any:
        return get_native(member(self._proxy, name))

    def _set(self, name: str, value: Any) -> None:
        try:
            setattr(self._proxy, name, value)
        except AttributeError as e:
            raise MalformedReply(e) from e

    def _call(self, name: str, *args) -> Any:
        return member(self._proxy, name)(*args)

    # ==================== Properties ====================

    @remote_call("Get ActiveProfile")
    def get_active_profile(self) -> PowerProfile:
        return decode(PowerProfile.parse, self._get(PROPERTY_ACTIVE_PROFILE))

    @remote_call("Set ActiveProfile")
    def set_active_profile(self, profile: PowerProfile) -> None:
        self._set(PROPERTY_ACTIVE_PROFILE, str(profile))

    @remote_call("Get Profiles")
    def list_profiles(self) -> List[Profile]:
        return decode_each(Profile.from_dbus, self._get(PROPERTY_PROFILES))

    @remote_call("Get Actions")
    def list_actions(self) -> List[str]:
        return decode_each(str, self._get(PROPERTY_ACTIONS))

    @remote_call("Get ActionsInfo")
    def list_actions_info(self) -> List[Action]:
        return decode_each(Action.from_dbus, self._get(PROPERTY_ACTIONS_INFO))

    @remote_call("Get ActiveProfileHolds")
    def list_active_holds(self) -> List[ActiveHold]:
        return decode_each(ActiveHold.from_dbus, self._get(PROPERTY_ACTIVE_PROFILE_HOLDS))

    @remote_call("Get BatteryAware")
    def get_battery_aware(self) -> bool:
        return bool(self._get(PROPERTY_BATTERY_AWARE))

    @remote_call("Set BatteryAware")
    def set_battery_aware(self, enabled: bool) -> None:
        self._set(PROPERTY_BATTERY_AWARE, bool(enabled))

    @remote_call("Get PerformanceDegraded")
    def get_performance_degraded(self) -> Optional[str]:
        # the daemon reports "not degraded" as an empty string
        return self._get(PROPERTY_PERFORMANCE_DEGRADED) or None

    @remote_call("Get PerformanceInhibited")
    def get_performance_inhibited(self) -> str:
        return self._get(PROPERTY_PERFORMANCE_INHIBITED) or ""

    @remote_call("Get Version")
    def get_version(self) -> str:
        return str(self._get(PROPERTY_VERSION))

    # ==================== Methods ====================

    @remote_call("HoldProfile")
    def hold_profile(self, profile: PowerProfile, reason: str, application_id: str) -> int:
        return decode(int, self._call("HoldProfile", str(profile), reason, application_id))

    @remote_call("ReleaseProfile")
    def release_profile(self, cookie: int) -> None:
        self._call("ReleaseProfile", cookie)

    @remote_call("SetActionEnabled")
    def set_action_enabled(self, name: str, enabled: bool) -> None:
        self._call("SetActionEnabled", name, enabled)

    # ==================== Signals ====================

    @remote_call("Subscribe PropertiesChanged")
    def subscribe_active_profile_changes(self) -> Iterator[PowerProfile]:
        # connected before returning; changes from here on are queued
        properties = self._bus.get_proxy(self._service_name, self._object_path, PROPERTIES_INTERFACE_NAME)
        pending = deque()

        def on_properties_changed(interface, changed, invalidated):
            if interface != self._interface_name:
                return
            if PROPERTY_ACTIVE_PROFILE in changed:
                pending.append(get_native(changed[PROPERTY_ACTIVE_PROFILE]))
            elif PROPERTY_ACTIVE_PROFILE in invalidated:
                # value not sent with the signal, read it back
                pending.append(None)

        member(properties, "PropertiesChanged").connect(on_properties_changed)
        log.debug(f"Subscribed to {PROPERTY_ACTIVE_PROFILE} changes on {self._service_name}")
        return self._active_profile_changes(properties, on_properties_changed, pending)

    def _active_profile_changes(self, properties, callback, pending: deque) -> Iterator[PowerProfile]:
        context = GLib.MainContext.default()
        # a blocked iteration() never returns to Python, so pending signals
        # such as SIGINT would not be raised until the next D-Bus message
        wakeup = GLib.timeout_add(WAKEUP_INTERVAL_MS, lambda: GLib.SOURCE_CONTINUE)
        try:
            while True:
                while not pending:
                    context.iteration(True)
                value = pending.popleft()
                if value is None:
                    yield self.get_active_profile()
                else:
                    yield self._decode_profile(value)
        finally:
            GLib.source_remove(wakeup)
            properties.PropertiesChanged.disconnect(callback)
            log.debug(f"Unsubscribed from {PROPERTY_ACTIVE_PROFILE} changes")

    @remote_call("PropertiesChanged")
    def _decode_profile(self, value: Any) -> PowerProfile:
        return decode(PowerProfile.parse, value)
