"""Configuration write operations for IOS devices.

Each function plans the commands for one resource, then issues them from
global configuration mode::

    conf t
    vlan 200
    name myvlan
    end

A command answered with an IOS parser error (``% Invalid input ...``)
aborts the remaining commands and raises
:class:`~napalm_ioscli.client.errors.IOSCLICommandError`; configuration mode
is always left with ``end`` while the session is still usable.
"""

from __future__ import annotations

import logging
import re

from napalm_ioscli.client.errors import IOSCLICommandError
from napalm_ioscli.client.session import DeviceSession
from napalm_ioscli.model.interface import InterfaceDesiredState, InterfaceRecord
from napalm_ioscli.model.vlan import VlanState
from napalm_ioscli.parser.text import find_cli_error
from napalm_ioscli.utils.interface_diff import plan_interface_update
from napalm_ioscli.utils.vlan_diff import plan_vlan_update

logger = logging.getLogger(__name__)

CONFIG_ENTER: str = "conf t"
CONFIG_END: str = "end"

# Older switches (2900XL, 3500XL) bundle ports with "port group" instead.
_CHANNEL_GROUP_RE: re.Pattern[str] = re.compile(r"^(no )?channel-group (\d+) mode \S+$")


def apply_config(session: DeviceSession, commands: list[str]) -> list[str]:
    """Issue *commands* inside configuration mode.

    Args:
        session: READY session.
        commands: Commands valid from global configuration mode.

    Returns:
        The commands actually issued (with any syntax fallback applied).

    Raises:
        IOSCLICommandError: If the device rejects a command.
    """
    if not commands:
        return []

    applied: list[str] = []
    session.run(CONFIG_ENTER)
    try:
        for command in commands:
            output = session.run(command)
            if find_cli_error(output) is not None:
                alternative = _alternative_syntax(command)
                if alternative is None:
                    raise IOSCLICommandError(command=command, output=output)
                logger.debug("%r rejected; retrying as %r", command, alternative)
                command = alternative
                output = session.run(command)
                if find_cli_error(output) is not None:
                    raise IOSCLICommandError(command=command, output=output)
            applied.append(command)
    finally:
        if session.is_ready:
            session.run(CONFIG_END)
    return applied


def vlan_update(
    session: DeviceSession,
    vlan_id: str | int,
    current: VlanState,
    desired: VlanState,
) -> list[str]:
    """Converge one VLAN and return the commands issued."""
    applied = apply_config(session, plan_vlan_update(vlan_id, current, desired))
    if applied:
        logger.info("Updated VLAN %s: %s", vlan_id, applied)
    return applied


def interface_update(
    session: DeviceSession,
    name: str,
    current: InterfaceRecord,
    desired: InterfaceDesiredState,
) -> list[str]:
    """Converge one interface and return the commands issued."""
    applied = apply_config(session, plan_interface_update(name, current, desired))
    if applied:
        logger.info("Updated interface %s: %s", name, applied)
    return applied


def _alternative_syntax(command: str) -> str | None:
    m = _CHANNEL_GROUP_RE.match(command)
    if not m:
        return None
    return f"{m.group(1) or ''}port group {m.group(2)}"
