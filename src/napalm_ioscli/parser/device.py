"""Parser for IOS ``sh ver`` output."""

from __future__ import annotations

import re

from napalm_ioscli.model.device import DeviceFacts
from napalm_ioscli.parser.text import output_lines

# cisco WS-C2960G-48TC-L (PowerPC405) processor (revision C0) with 61440K/4088K bytes of memory.
# Cisco 1841 (revision 5.0) with 355328K/37888K bytes of memory.
# cisco WS-C2950T-24 (RC32300) processor (revision R0) with 19959K bytes of memory.
_HARDWARE_RE: re.Pattern[str] = re.compile(
    r"[cC]isco ([\w-]+) (?:\(([\w-]+)\) processor )?\(revision (.+?)\) "
    r"with (\d+[KMG])(?:/(\d+[KMG]))? bytes of memory\."
)

# c2960 uptime is 2 years, 27 weeks, 5 days, 21 hours, 30 minutes
_UPTIME_LINE_RE: re.Pattern[str] = re.compile(r"^\s*([\w.-]+)\s+uptime is (.*?)\s*$")

# IOS (tm) C2900XL Software (C2900XL-C3H2S-M), Version 12.0(5)WC10, RELEASE SOFTWARE (fc1)
# Cisco IOS Software, C2960 Software (C2960-LANBASEK9-M), Version 12.2(25)SEE3, RELEASE SOFTWARE (fc2)
_VERSION_RE: re.Pattern[str] = re.compile(
    r"IOS (?:\(tm\) |Software, )?(?:[\w-]+)\s+Software\s+\(\w+-(\w+)-\w+\), "
    r"Version ([0-9.()A-Za-z]+),"
)

# "System serial number            : FOC1234X0YZ" / "Processor board ID FOC1234X0YZ"
_SERIAL_RE: re.Pattern[str] = re.compile(
    r"^\s*(?:System serial number\s*:\s*|Processor board ID\s+)(\S+)"
)

# 12.2(25)SEE3 -> 12.2SEE
_MAJOR_RELEASE_RE: re.Pattern[str] = re.compile(r"^(\d+)\.(\d+)\(.+\)([A-Z]+)")

_UPTIME_UNITS: dict[str, int] = {
    "year": 365 * 86400,
    "week": 7 * 86400,
    "day": 86400,
    "hour": 3600,
    "minute": 60,
    "second": 1,
}

_UPTIME_PART_RE: re.Pattern[str] = re.compile(r"(\d+)\s+(year|week|day|hour|minute|second)s?")


def parse_show_version(output: str) -> DeviceFacts:
    """Parse ``sh ver`` output into :class:`.DeviceFacts`.

    Unrecognised lines are ignored; fields whose line is missing stay ``None``.

    Args:
        output: Raw device output.

    Returns:
        Parsed :class:`.DeviceFacts`.
    """
    fields: dict[str, object] = {}
    for line in output_lines(output):
        m = _HARDWARE_RE.search(line)
        if m:
            fields["hardware_model"] = m.group(1)
            if m.group(2):
                fields["processor"] = m.group(2)
            fields["hardware_revision"] = m.group(3)
            fields["memory_size"] = m.group(4)
            continue
        m = _UPTIME_LINE_RE.match(line)
        if m:
            fields["hostname"] = m.group(1)
            fields["uptime"] = m.group(2)
            fields["uptime_seconds"] = parse_uptime_seconds(m.group(2))
            continue
        m = _VERSION_RE.search(line)
        if m:
            fields["operating_system"] = "IOS"
            fields["os_feature"] = m.group(1)
            fields["os_release"] = m.group(2)
            fields["os_major_release"] = ios_major_release(m.group(2))
            continue
        m = _SERIAL_RE.match(line)
        # "System serial number" is more specific than the board ID; keep it.
        if m and (
            "serial_number" not in fields or line.lstrip().startswith("System serial")
        ):
            fields["serial_number"] = m.group(1)

    return DeviceFacts(**fields)  # type: ignore[arg-type]


def parse_uptime_seconds(uptime: str | None) -> int:
    """Convert an IOS uptime string to total seconds.

    Supports any subset of ``years, weeks, days, hours, minutes``
    (e.g. ``"1 year, 12 weeks, 6 days, 22 hours, 32 minutes"``).
    Years count as 365 days.  Returns ``0`` if *uptime* is ``None`` or holds
    no recognisable component.
    """
    if not uptime:
        return 0
    return sum(
        int(count) * _UPTIME_UNITS[unit]
        for count, unit in _UPTIME_PART_RE.findall(uptime)
    )


def ios_major_release(release: str) -> str:
    """Return the major release train of an IOS version string.

    ``"12.2(25)SEE3"`` becomes ``"12.2SEE"``; ``"15.0(2)SE"`` becomes
    ``"15.0SE"``.  Versions without a train suffix are returned unchanged.
    """
    m = _MAJOR_RELEASE_RE.match(release)
    if not m:
        return release
    return f"{m.group(1)}.{m.group(2)}{m.group(3)}"
