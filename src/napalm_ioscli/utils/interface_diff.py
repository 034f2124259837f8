"""Interface command planner.

Compares a parsed :class:`~napalm_ioscli.model.interface.InterfaceRecord`
against an :class:`~napalm_ioscli.model.interface.InterfaceDesiredState` and
produces the IOS interface-mode commands that converge them.
"""

from __future__ import annotations

from typing import Any

from napalm_ioscli.model.interface import (
    InterfaceDesiredState,
    InterfaceRecord,
    IPAddressEntry,
)
from napalm_ioscli.utils.render import render_ip_address

# Apply order for IOS; later properties depend on earlier ones (a port must
# be a trunk before its allowed list can be set, addresses go on last).
_PROPERTY_COMMANDS: tuple[tuple[str, str], ...] = (
    ("description", "description {}"),
    ("speed", "speed {}"),
    ("duplex", "duplex {}"),
    ("native_vlan", "switchport trunk native vlan {}"),
    ("encapsulation", "switchport trunk encapsulation {}"),
    ("mode", "switchport mode {}"),
    ("allowed_trunk_vlans", "switchport trunk allowed vlan {}"),
    ("etherchannel", "channel-group {} mode on"),
)


def plan_interface_update(
    name: str,
    current: InterfaceRecord,
    desired: InterfaceDesiredState,
) -> list[str]:
    """Compute the command list moving interface *name* to *desired*.

    Only attributes set on *desired* are considered.  An attribute that is
    set on the device but desired as an empty string is removed with the
    ``no`` form of its command.  IP address removals are emitted before
    additions.  The plan starts with ``interface <name>``; an empty list is
    returned when nothing differs.

    Args:
        name: Canonical interface name.
        current: Current interface record.
        desired: Target state.

    Returns:
        Ordered command list, to be issued from global configuration mode.
    """
    body: list[str] = []
    current_values = _current_values(current)

    for prop, template in _PROPERTY_COMMANDS:
        want = getattr(desired, prop)
        if want is None:
            continue
        have = current_values.get(prop)
        if want == "":
            if have is not None:
                body.append("no " + template.format(have))
            continue
        if _normalise(want) != _normalise(have):
            body.append(template.format(want))

    if desired.ip_addresses is not None:
        body.extend(_plan_ip_addresses(current.ip_addresses, desired.ip_addresses))

    if desired.ensure is not None and desired.ensure != current.ensure:
        body.append("no shutdown" if desired.ensure == "present" else "shutdown")

    if not body:
        return []
    return [f"interface {name}", *body]


def _current_values(current: InterfaceRecord) -> dict[str, Any]:
    values: dict[str, Any] = {
        "description": current.description,
        "speed": current.speed,
        "duplex": current.duplex,
        "etherchannel": current.etherchannel,
    }
    if current.switchport is not None:
        values.update(current.switchport.to_dict())
    return values


def _normalise(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).lower()


def _plan_ip_addresses(
    have: tuple[IPAddressEntry, ...],
    want: tuple[IPAddressEntry, ...],
) -> list[str]:
    commands = [f"no {render_ip_address(e)}" for e in have if e not in want]
    commands.extend(render_ip_address(e) for e in want if e not in have)
    return commands
