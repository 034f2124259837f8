"""Parser for ``sh interface <name> switchport`` output."""

from __future__ import annotations

import re

from napalm_ioscli.model.interface import SwitchportRecord
from napalm_ioscli.parser.text import normalize_text, output_lines

# "Key: value" lines; keys are matched case-insensitively because IOS
# trains disagree on "Administrative mode" vs "Administrative Mode".
_KEY_VALUE_RE: re.Pattern[str] = re.compile(r"^\s*([A-Za-z][\w .\-]*?):\s*(.*?)\s*$")

# Leading VLAN id before a parenthetical comment: "1 (default)", "0 ((Inactive))".
_VLAN_ID_RE: re.Pattern[str] = re.compile(r"^(\d+)\s*(\(.*\))?$")

_ADMIN_MODE = "administrative mode"
_OPER_MODE = "operational mode"
_ENCAPSULATION = "administrative trunking encapsulation"
_ACCESS_VLAN = "access mode vlan"
_NATIVE_VLAN = "trunking native mode vlan"
_TRUNK_VLANS = "trunking vlans enabled"


def parse_switchport(output: str) -> SwitchportRecord:
    """Parse switchport settings for one interface.

    Mode resolution:

    - ``trunk`` and ``static access`` administrative modes map to the
      canonical ``"trunk"`` / ``"access"`` values.
    - Negotiation states (``"dynamic auto"``, ``"dynamic desirable"``) are
      reported verbatim.

    Trunk-only fields (encapsulation, allowed VLANs) are omitted for access
    ports, and an access VLAN flagged ``((Inactive))`` is omitted.

    Args:
        output: Raw device output (command echo and prompt may be included).

    Returns:
        :class:`.SwitchportRecord`; all fields ``None`` for a routed port or
        unrecognised output.
    """
    pairs: dict[str, str] = {}
    for line in output_lines(output):
        m = _KEY_VALUE_RE.match(line)
        if not m:
            continue
        key = normalize_text(m.group(1)).lower()
        pairs.setdefault(key, m.group(2))

    mode = _resolve_mode(pairs.get(_ADMIN_MODE), pairs.get(_OPER_MODE))

    encapsulation: str | None = None
    allowed: str | None = None
    if mode != "access":
        raw_encap = pairs.get(_ENCAPSULATION)
        if raw_encap:
            encapsulation = raw_encap.lower()
        allowed = _parse_allowed_vlans(pairs.get(_TRUNK_VLANS))

    return SwitchportRecord(
        mode=mode,
        encapsulation=encapsulation,
        access_vlan=_parse_vlan_id(pairs.get(_ACCESS_VLAN)),
        native_vlan=_parse_vlan_id(pairs.get(_NATIVE_VLAN)),
        allowed_trunk_vlans=allowed,
    )


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _resolve_mode(admin: str | None, oper: str | None) -> str | None:
    """Pick the reported switchport mode from the administrative/operational pair."""
    if not admin:
        return None
    admin = normalize_text(admin).lower()
    if admin.startswith("dynamic"):
        return admin
    if admin == "trunk":
        return "trunk"
    if admin.endswith("access"):
        return "access"
    # Unknown administrative value (e.g. "private-vlan host"): fall back to
    # the operational class when it is a simple one.
    if oper:
        oper = normalize_text(oper).lower()
        if oper == "trunk":
            return "trunk"
        if oper.endswith("access"):
            return "access"
    return admin


def _parse_vlan_id(value: str | None) -> str | None:
    if not value:
        return None
    m = _VLAN_ID_RE.match(value.strip())
    if not m:
        return None
    comment = m.group(2) or ""
    if "inactive" in comment.lower():
        return None
    return m.group(1)


def _parse_allowed_vlans(value: str | None) -> str | None:
    if not value:
        return None
    value = value.strip()
    if value.upper() == "ALL":
        return "all"
    if value.upper() == "NONE":
        return "none"
    return value
