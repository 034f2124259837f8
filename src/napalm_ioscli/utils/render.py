"""Rendering helpers shared by the parsers and the configuration planners."""

from __future__ import annotations

import ipaddress

from napalm_ioscli.model.interface import IPAddressEntry


def netmask_to_prefix(netmask: str) -> int:
    """Convert a dotted IPv4 netmask to a prefix length.

    Raises:
        ValueError: If *netmask* is not a valid contiguous netmask.
    """
    return ipaddress.IPv4Network(f"0.0.0.0/{netmask}").prefixlen


def prefix_to_netmask(prefix_length: int) -> str:
    """Convert an IPv4 prefix length to a dotted netmask."""
    return str(ipaddress.IPv4Network(f"0.0.0.0/{prefix_length}").netmask)


def render_ip_address(entry: IPAddressEntry) -> str:
    """Render an address entry as the IOS interface command that assigns it.

    IPv4 entries use ``ip address <addr> <mask> [tag]``; IPv6 entries use
    ``ipv6 address <addr>/<len> [tag]``.
    """
    if entry.address.version == 6:
        line = f"ipv6 address {entry.address}/{entry.prefix_length}"
    else:
        line = f"ip address {entry.address} {prefix_to_netmask(entry.prefix_length)}"
    if entry.tag:
        line = f"{line} {entry.tag}"
    return line
