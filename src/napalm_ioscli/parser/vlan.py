"""Parser for the ``sh vlan brief`` listing.

The listing is columnar::

    VLAN Name                             Status    Ports
    ---- -------------------------------- --------- -------------------------------
    1    default                          active    Fa0/3, Fa0/4, Fa0/5, Fa0/6,
                                                    Fa0/7, Fa0/8
    10   VLAN0010                         active
    100  management                       active    Fa0/1, Fa0/2

A row starts with a numeric VLAN id; indented continuation lines carry
further member ports of the most recently started row.
"""

from __future__ import annotations

import re

from napalm_ioscli.model.vlan import VlanRecord
from napalm_ioscli.parser.ifname import canonicalize_ifname
from napalm_ioscli.parser.text import output_lines

_ROW_RE: re.Pattern[str] = re.compile(r"^(\d+)\s+(\S+)\s+(\S+)\s*(.*?)\s*$")
_CONTINUATION_RE: re.Pattern[str] = re.compile(r"^\s+(\S.*?)\s*$")


def parse_vlan_brief(output: str) -> dict[str, VlanRecord]:
    """Parse ``sh vlan brief`` (or ``sh vlan-switch brief``) output.

    Args:
        output: Raw device output (command echo and prompt may be included).

    Returns:
        Mapping of VLAN id (string) to :class:`.VlanRecord`, in listing order.
        A VLAN without member ports has an empty ``interfaces`` tuple.
    """
    rows: dict[str, tuple[str, str, list[str]]] = {}
    current: str | None = None

    for line in output_lines(output):
        m = _ROW_RE.match(line)
        if m:
            current = m.group(1)
            ports = _split_ports(m.group(4))
            if current in rows:
                rows[current][2].extend(ports)
            else:
                rows[current] = (m.group(2), m.group(3), ports)
            continue
        m = _CONTINUATION_RE.match(line)
        if m and current is not None:
            rows[current][2].extend(_split_ports(m.group(1)))
            continue
        # Header, separator, echo or prompt: ends any open row.
        current = None

    return {
        vid: VlanRecord(
            name=vid,
            description=description,
            status=status,
            interfaces=tuple(ports),
        )
        for vid, (description, status, ports) in rows.items()
    }


def _split_ports(text: str) -> list[str]:
    return [canonicalize_ifname(p.strip()) for p in text.split(",") if p.strip()]
