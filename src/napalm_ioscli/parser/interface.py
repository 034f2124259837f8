"""Parsers for interface-level IOS commands.

- ``sh interface <name>``: administrative state, duplex, speed.
- ``sh ip interface brief``: interface inventory.
- ``sh running-config interface <name> | begin interface``: IP addresses
  and EtherChannel membership.
"""

from __future__ import annotations

import ipaddress
import logging
import re

from napalm_ioscli.model.interface import (
    Duplex,
    InterfaceBrief,
    InterfaceConfig,
    InterfaceStatus,
    IPAddressEntry,
    Speed,
)
from napalm_ioscli.parser.ifname import canonicalize_ifname
from napalm_ioscli.parser.text import output_lines
from napalm_ioscli.utils.render import netmask_to_prefix

logger = logging.getLogger(__name__)

# "FastEthernet0/1 is down, line protocol is down"
# "Vlan1 is administratively down, line protocol is down (disabled)"
_STATUS_RE: re.Pattern[str] = re.compile(
    r"^\s*\S+ is ([\w ]+?), line protocol is (\w+)"
)

# "Auto-duplex , Auto Speed , 100BaseTX/FX"
# "Full-duplex, 100Mb/s, 100BaseTX/FX"
# "Auto-duplex (Full), Auto Speed (100), 100BaseTX/FX"
# "Half-duplex, 10Mb/s, media type is RJ45"
# "Full Duplex, 1Gbps, media type is SFP-LR"
_DUPLEX_RE: re.Pattern[str] = re.compile(r"^\s*(Auto|Full|Half)[- ]duplex\b", re.IGNORECASE)

# Speed field following the duplex field on the same line.
_SPEED_RE: re.Pattern[str] = re.compile(
    r",\s*(?:(Auto)[- ]?Speed|(\d+)\s*([MG])b(?:/s|ps))",
    re.IGNORECASE,
)

_DESCRIPTION_RE: re.Pattern[str] = re.compile(r"^\s*Description:\s*(.*?)\s*$")
_MTU_BW_RE: re.Pattern[str] = re.compile(r"^\s*MTU (\d+) bytes, BW (\d+) Kbit")
_MAC_RE: re.Pattern[str] = re.compile(r"address is ([0-9a-fA-F]{4}\.[0-9a-fA-F]{4}\.[0-9a-fA-F]{4})")

# "FastEthernet0/1   unassigned   YES unset  administratively down down"
_BRIEF_RE: re.Pattern[str] = re.compile(
    r"^(\S+)\s+(\S+)\s+(?:YES|NO)\s+\S+\s+(up|down|administratively down|deleted)\s+(up|down)\s*$"
)

# " ip address 192.168.0.24 255.255.255.0 secondary"
_IPV4_RE: re.Pattern[str] = re.compile(
    r"^\s*ip address (\d+\.\d+\.\d+\.\d+) (\d+\.\d+\.\d+\.\d+)(?:\s+(\S+))?\s*$"
)

# " ipv6 address 2001:7A8:71C1::/64 eui-64"
_IPV6_RE: re.Pattern[str] = re.compile(
    r"^\s*ipv6 address ([0-9A-Fa-f:.]+)/(\d+)(?:\s+(\S+))?\s*$"
)

# " channel-group 1 mode passive"
_CHANNEL_GROUP_RE: re.Pattern[str] = re.compile(r"^\s*channel-group (\d+) mode (\S+)")


def parse_interface_status(output: str) -> InterfaceStatus | None:
    """Parse ``sh interface <name>`` output.

    Args:
        output: Raw device output (command echo and prompt may be included).

    Returns:
        The parsed :class:`.InterfaceStatus`, or ``None`` when no status
        banner line was found (the interface is considered absent).
    """
    ensure: str | None = None
    line_protocol_up: bool | None = None
    duplex: Duplex | None = None
    speed: Speed | None = None
    description: str | None = None
    mtu: int | None = None
    bandwidth: int | None = None
    mac: str | None = None

    for line in output_lines(output):
        m = _STATUS_RE.match(line)
        if m and ensure is None:
            ensure = "present" if m.group(1) == "up" else "absent"
            line_protocol_up = m.group(2) == "up"
            continue
        m = _DUPLEX_RE.match(line)
        if m:
            duplex = m.group(1).lower()  # type: ignore[assignment]
            speed = _parse_speed(line)
            continue
        m = _DESCRIPTION_RE.match(line)
        if m:
            description = m.group(1)
            continue
        m = _MTU_BW_RE.match(line)
        if m:
            mtu = int(m.group(1))
            bandwidth = int(m.group(2))
            continue
        m = _MAC_RE.search(line)
        if m and mac is None:
            mac = m.group(1)

    if ensure is None:
        return None
    return InterfaceStatus(
        ensure=ensure,  # type: ignore[arg-type]
        duplex=duplex,
        speed=speed,
        line_protocol_up=line_protocol_up,
        description=description,
        mtu=mtu,
        mac_address=mac,
        bandwidth_kbit=bandwidth,
    )


def parse_interface_brief(output: str) -> list[InterfaceBrief]:
    """Parse ``sh ip interface brief`` into one entry per interface.

    Header, echo and prompt lines are skipped.

    Args:
        output: Raw device output.

    Returns:
        Entries in listing order with canonical interface names.
    """
    entries: list[InterfaceBrief] = []
    for line in output_lines(output):
        m = _BRIEF_RE.match(line)
        if not m:
            continue
        ip = m.group(2)
        entries.append(
            InterfaceBrief(
                name=canonicalize_ifname(m.group(1)),
                ip_address=None if ip == "unassigned" else ip,
                status=m.group(3),
                protocol=m.group(4),
            )
        )
    return entries


def parse_ip_addresses(output: str) -> list[IPAddressEntry]:
    """Extract every address assignment from an interface running-config block.

    Recognises ``ip address <addr> <mask> [qualifier]`` and
    ``ipv6 address <prefix>/<len> [qualifier]``.  Every other configuration
    line (``ip nat inside``, ``ipv6 nd prefix ...``) is ignored.

    Args:
        output: Raw ``sh running-config interface <name> | begin interface``
            output.

    Returns:
        Address entries in configuration order.
    """
    entries: list[IPAddressEntry] = []
    for line in output_lines(output):
        m = _IPV4_RE.match(line)
        if m:
            try:
                prefix = netmask_to_prefix(m.group(2))
                address = ipaddress.ip_address(m.group(1))
            except ValueError:
                logger.debug("Skipping unparseable address line %r", line)
                continue
            entries.append(IPAddressEntry(prefix, address, m.group(3)))
            continue
        m = _IPV6_RE.match(line)
        if m:
            try:
                address = ipaddress.ip_address(m.group(1))
            except ValueError:
                logger.debug("Skipping unparseable address line %r", line)
                continue
            entries.append(IPAddressEntry(int(m.group(2)), address, m.group(3)))
    return entries


def parse_etherchannel(output: str) -> str | None:
    """Return the channel-group id configured in an interface block, if any."""
    for line in output_lines(output):
        m = _CHANNEL_GROUP_RE.match(line)
        if m:
            return m.group(1)
    return None


def parse_interface_config(output: str) -> InterfaceConfig:
    """Parse an interface running-config block into addresses and bundling.

    Args:
        output: Raw ``sh running-config interface <name> | begin interface``
            output.

    Returns:
        :class:`.InterfaceConfig`; both fields are empty when the block holds
        neither address nor channel-group lines.
    """
    return InterfaceConfig(
        ip_addresses=tuple(parse_ip_addresses(output)),
        etherchannel=parse_etherchannel(output),
    )


def _parse_speed(line: str) -> Speed | None:
    """Return the speed in Mb/s (or ``"auto"``) from a duplex/speed line."""
    m = _SPEED_RE.search(line)
    if not m:
        return None
    if m.group(1):
        return "auto"
    speed = int(m.group(2))
    return speed * 1000 if m.group(3).upper() == "G" else speed
