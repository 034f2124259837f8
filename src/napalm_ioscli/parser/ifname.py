"""Interface name canonicalization.

IOS accepts (and prints) abbreviated interface names such as ``Fa0/1`` or
``Gi 0/17``.  Every parser reports interfaces under their full name so that
records from different commands can be joined.
"""

from __future__ import annotations

import re

# Ordered (abbreviations, full name) pairs.  Matching is case-sensitive and
# the first table entry that matches wins, so media types whose
# abbreviations overlap ("FE", "GE", "TE" vs. "E") must precede Ethernet.
_IFNAME_TABLE: tuple[tuple[tuple[str, ...], str], ...] = (
    (("FastEthernet", "FastEth", "Fast", "FE", "Fa"), "FastEthernet"),
    (("GigabitEthernet", "GigEthernet", "GigEth", "GigE", "GE", "Gi"), "GigabitEthernet"),
    (("TenGigabitEthernet", "TenGigE", "TenGig", "TE", "Te"), "TenGigabitEthernet"),
    (("Ethernet", "Eth", "Et", "E"), "Ethernet"),
    (("Serial", "Ser", "Se"), "Serial"),
    (("Port-channel", "Port-Channel", "PortChannel", "Po"), "Port-channel"),
    (("Loopback", "Loop", "Lo"), "Loopback"),
    (("Tunnel", "Tu"), "Tunnel"),
    (("Virtual-Access", "Virtual-A", "Virtual", "Virt"), "Virtual-Access"),
    (("ATM", "AT"), "ATM"),
    (("Dialer", "dialer", "Di"), "Dialer"),
    (("Vlan", "Vl"), "Vlan"),
)

_IFNAME_RULES: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (
        re.compile(r"^(?:" + "|".join(re.escape(a) for a in abbrevs) + r")\s*(\d.*)$"),
        full,
    )
    for abbrevs, full in _IFNAME_TABLE
)


def canonicalize_ifname(name: str) -> str:
    """Expand an abbreviated interface name to its canonical form.

    Examples::

        canonicalize_ifname("Fa 0/1")  -> "FastEthernet0/1"
        canonicalize_ifname("Gi1")     -> "GigabitEthernet1"
        canonicalize_ifname("E0")      -> "Ethernet0"
        canonicalize_ifname("VLAN99")  -> "VLAN99"

    Names whose prefix is not in the abbreviation table are returned
    unchanged; they are assumed to be canonical already.

    Args:
        name: Interface name as typed by a user or printed by the device.

    Returns:
        Canonical interface name.
    """
    stripped = name.strip()
    for pattern, full in _IFNAME_RULES:
        m = pattern.match(stripped)
        if m:
            return full + re.sub(r"\s+", "", m.group(1))
    return name
