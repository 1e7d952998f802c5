#!/usr/bin/env python3
#
# ppdctl - command-line client for power-profiles-daemon

import logging
import sys

import click

from ppdctl import __version__
from ppdctl.commands import (
    configure_action_command, configure_battery_aware_command, get_command, launch_command, list_actions_command,
    list_command, list_holds_command, query_battery_aware_command, set_command, version_command
)
from ppdctl.config.config import config as conf
from ppdctl.errors import PpdError
from ppdctl.globals import APP_NAME
from ppdctl.prints import print_error
from ppdctl.tools import setup_logger
from ppdctl.watch import watch_command

log = logging.getLogger(__name__)


class PpdGroup(click.Group):
    """Report PpdError once on stderr and exit non-zero, whichever command raised it."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except PpdError as error:
            log.debug(f"{type(error).__name__}: {error.message}", exc_info=True)
            print_error(error.message)
            ctx.exit(error.exit_code)


def connect(ctx: click.Context):
    """Open the daemon proxy for this invocation; it is closed with the click context."""
    # dasbus and gi are only needed when talking to a real bus
    from ppdctl.dbus.proxy import DBusPowerProfiles, open_bus

    log.debug(f"Connecting to {conf.service} on the {conf.bus} bus")
    return ctx.with_resource(DBusPowerProfiles(open_bus(conf.bus), conf.service))


@click.group(cls=PpdGroup, invoke_without_command=True)
@click.option("--config", required=False, help="Use config file at defined path")
@click.option("--debug", is_flag=True, help="Show debug output on stderr")
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def main(ctx, config, debug):
    """Inspect and control power-profiles-daemon. Lists profiles when no command is given."""
    conf.setup(config)
    setup_logger("debug" if debug else conf.log_level)
    if conf.has_config():
        log.info(f"Using settings defined in {conf.file} file")

    # tests hand in their own PowerProfiles through obj
    if ctx.obj is None:
        ctx.obj = connect(ctx)

    if ctx.invoked_subcommand is None:
        ctx.invoke(list_)


@main.command("list")
@click.pass_obj
def list_(proxy):
    """List all available power profiles"""
    list_command(proxy)


@main.command("list-holds")
@click.pass_obj
def list_holds(proxy):
    """List active profile holds"""
    list_holds_command(proxy)


@main.command("list-actions")
@click.pass_obj
def list_actions(proxy):
    """List all available actions"""
    list_actions_command(proxy)


@main.command("get")
@click.pass_obj
def get(proxy):
    """Get the currently active profile"""
    get_command(proxy)


@main.command("set")
@click.argument("profile")
@click.pass_obj
def set_(proxy, profile):
    """Set the active power profile"""
    set_command(proxy, profile)


@main.command("configure-action")
@click.argument("action")
@click.option("--enable", is_flag=True, help="Enable the action")
@click.option("--disable", is_flag=True, help="Disable the action")
@click.pass_obj
def configure_action(proxy, action, enable, disable):
    """Configure a power-related action"""
    configure_action_command(proxy, action, enable, disable)


@main.command("configure-battery-aware")
@click.option("--enable", is_flag=True, help="Enable battery-aware behavior")
@click.option("--disable", is_flag=True, help="Disable battery-aware behavior")
@click.pass_obj
def configure_battery_aware(proxy, enable, disable):
    """Configure battery-aware behavior"""
    configure_battery_aware_command(proxy, enable, disable)


@main.command("query-battery-aware")
@click.pass_obj
def query_battery_aware(proxy):
    """Query whether battery-aware behavior is enabled"""
    query_battery_aware_command(proxy)


@main.command("launch")
@click.argument("arguments", nargs=-1, required=True)
@click.option("-p", "--profile", help="Profile to use for the application")
@click.option("-r", "--reason", help="Reason for the profile hold")
@click.option("-a", "--appid", help="Application ID for the profile hold")
@click.pass_obj
def launch(proxy, arguments, profile, reason, appid):
    """Launch an application with a specific power profile"""
    launch_command(proxy, " ".join(arguments), profile, reason, appid)


@main.command("watch")
@click.pass_context
def watch(ctx):
    """Print the active profile and every change until interrupted"""
    try:
        watch_command(ctx.obj)
    except KeyboardInterrupt:
        log.debug("watch interrupted")
        ctx.exit(0)


@main.command("version")
@click.pass_obj
def version(proxy):
    """Print the power-profiles-daemon version"""
    version_command(proxy)


if __name__ == "__main__":
    sys.exit(main())
