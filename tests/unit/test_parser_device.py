"""Unit tests for napalm_ioscli.parser.device."""

from __future__ import annotations

import pytest

from napalm_ioscli.parser.device import (
    ios_major_release,
    parse_show_version,
    parse_uptime_seconds,
)

SH_VER_C2960 = """\
c2960#sh ver
Cisco IOS Software, C2960 Software (C2960-LANBASEK9-M), Version 12.2(25)SEE3, RELEASE SOFTWARE (fc2)
Copyright (c) 1986-2007 by Cisco Systems, Inc.
Compiled Thu 22-Feb-07 13:57 by myl
Image text-base: 0x00003000, data-base: 0x00AA2F34

ROM: Bootstrap program is C2960 boot loader
BOOTLDR: C2960 Boot Loader (C2960-HBOOT-M) Version 12.2(25r)SEE1, RELEASE SOFTWARE (fc1)

c2960 uptime is 2 years, 27 weeks, 5 days, 21 hours, 30 minutes
System returned to ROM by power-on
System image file is "flash:c2960-lanbasek9-mz.122-25.SEE3/c2960-lanbasek9-mz.122-25.SEE3.bin"

cisco WS-C2960G-48TC-L (PowerPC405) processor (revision C0) with 61440K/4088K bytes of memory.
Processor board ID FOC1111X2YZ
Last reset from power-on
1 Virtual Ethernet interface
48 Gigabit Ethernet interfaces
The password-recovery mechanism is enabled.

64K bytes of flash-simulated non-volatile configuration memory.
Base ethernet MAC Address       : 00:1E:F7:11:22:80
Motherboard assembly number     : 73-10015-06
Model number                    : WS-C2960G-48TC-L
System serial number            : FOC1234X0YZ
Configuration register is 0xF
c2960#
"""

SH_VER_1841 = """\
router#sh ver
Cisco IOS Software, 1841 Software (C1841-ADVSECURITYK9-M), Version 12.4(4)T1, RELEASE SOFTWARE (fc4)
router uptime is 1 day, 2 hours, 3 minutes
Cisco 1841 (revision 5.0) with 355328K/37888K bytes of memory.
Processor board ID FCZ0000A1BC
router#
"""


class TestShowVersion:
    def test_c2960_facts(self) -> None:
        facts = parse_show_version(SH_VER_C2960)
        assert facts.hostname == "c2960"
        assert facts.uptime == "2 years, 27 weeks, 5 days, 21 hours, 30 minutes"
        assert facts.hardware_model == "WS-C2960G-48TC-L"
        assert facts.processor == "PowerPC405"
        assert facts.hardware_revision == "C0"
        assert facts.memory_size == "61440K"
        assert facts.operating_system == "IOS"
        assert facts.os_release == "12.2(25)SEE3"
        assert facts.os_major_release == "12.2SEE"
        assert facts.os_feature == "LANBASEK9"

    def test_system_serial_number_preferred_over_board_id(self) -> None:
        assert parse_show_version(SH_VER_C2960).serial_number == "FOC1234X0YZ"

    def test_router_without_processor_name(self) -> None:
        facts = parse_show_version(SH_VER_1841)
        assert facts.hostname == "router"
        assert facts.hardware_model == "1841"
        assert facts.processor is None
        assert facts.hardware_revision == "5.0"
        assert facts.os_release == "12.4(4)T1"
        assert facts.os_major_release == "12.4T"
        assert facts.serial_number == "FCZ0000A1BC"
        assert facts.uptime_seconds == 86400 + 2 * 3600 + 3 * 60
        assert facts.uptime_days == 1

    def test_unrecognised_output_leaves_fields_unset(self) -> None:
        facts = parse_show_version("% Invalid input detected at '^' marker.\n")
        assert facts.hostname is None
        assert facts.uptime_days is None


class TestUptime:
    @pytest.mark.parametrize(
        ("uptime", "seconds"),
        [
            ("2 years, 27 weeks, 5 days, 21 hours, 30 minutes", 924 * 86400 + 21 * 3600 + 30 * 60),
            ("1 year, 12 weeks, 6 days, 22 hours, 32 minutes", 455 * 86400 + 22 * 3600 + 32 * 60),
            ("3 weeks, 1 day, 23 hours, 36 minutes", 22 * 86400 + 23 * 3600 + 36 * 60),
            ("5 minutes", 300),
            ("", 0),
            (None, 0),
        ],
    )
    def test_parse_uptime_seconds(self, uptime: str | None, seconds: int) -> None:
        assert parse_uptime_seconds(uptime) == seconds


class TestMajorRelease:
    @pytest.mark.parametrize(
        ("release", "major"),
        [
            ("12.2(25)SEE3", "12.2SEE"),
            ("15.0(2)SE", "15.0SE"),
            ("12.0(5)WC10", "12.0WC"),
            ("15.1", "15.1"),
        ],
    )
    def test_ios_major_release(self, release: str, major: str) -> None:
        assert ios_major_release(release) == major
