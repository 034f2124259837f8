"""Unit tests for napalm_ioscli.parser.interface."""

from __future__ import annotations

import ipaddress

import pytest

from napalm_ioscli.model.interface import InterfaceConfig, IPAddressEntry
from napalm_ioscli.parser.interface import (
    parse_etherchannel,
    parse_interface_brief,
    parse_interface_config,
    parse_interface_status,
    parse_ip_addresses,
)

# ---------------------------------------------------------------------------
# Device output samples
# ---------------------------------------------------------------------------

SH_INTERFACE_DOWN = """\
Switch#sh interfaces FastEthernet 0/1
FastEthernet0/1 is down, line protocol is down 
  Hardware is Fast Ethernet, address is 00d0.bbe2.19c1 (bia 00d0.bbe2.19c1)
  MTU 1500 bytes, BW 100000 Kbit, DLY 100 usec, 
     reliability 255/255, txload 1/255, rxload 1/255
  Encapsulation ARPA, loopback not set
  Keepalive not set
  Auto-duplex , Auto Speed , 100BaseTX/FX
  ARP type: ARPA, ARP Timeout 04:00:00
  Last input never, output 5d04h, output hang never
  Last clearing of "show interface" counters never
  Queueing strategy: fifo
  Output queue 0/40, 0 drops; input queue 0/75, 0 drops
  5 minute input rate 0 bits/sec, 0 packets/sec
  5 minute output rate 0 bits/sec, 0 packets/sec
     580 packets input, 54861 bytes
     0 output buffer failures, 0 output buffers swapped out
Switch#
"""

SH_INTERFACE_UP = """\
c2960#sh interface GigabitEthernet0/1
GigabitEthernet0/1 is up, line protocol is up (connected)
  Hardware is Gigabit Ethernet, address is 0019.e7a1.b201 (bia 0019.e7a1.b201)
  Description: uplink to core
  MTU 1500 bytes, BW 1000000 Kbit/sec, DLY 10 usec,
  Full-duplex, 1000Mb/s, media type is 10/100/1000BaseTX
c2960#
"""

SH_INTERFACE_ADMIN_DOWN = """\
router#sh interface Vlan2
Vlan2 is administratively down, line protocol is down
  Hardware is EtherSVI, address is 0019.e7a1.b240 (bia 0019.e7a1.b240)
router#
"""

SH_IP_INTERFACE_BRIEF = """\
Switch#sh ip interface brief
Interface              IP-Address      OK? Method Status                Protocol
Vlan1                  192.168.0.1     YES NVRAM  up                    up
FastEthernet0/1        unassigned      YES unset  down                  down
FastEthernet0/2        unassigned      YES unset  administratively down down
Switch#
"""

SH_RUN_VLAN1 = """\
router#sh running-config interface Vlan 1 | begin interface
interface Vlan1
 description $ETH-SW-LAUNCH$$INTF-INFO-HWIC 4ESW$$FW_INSIDE$
 ip address 192.168.0.24 255.255.255.0 secondary
 ip address 192.168.0.1 255.255.255.0
 ip access-group 100 in
 no ip redirects
 no ip proxy-arp
 ip nat inside
 ipv6 address 2001:7A8:71C1::/64 eui-64
 ipv6 enable
 ipv6 nd prefix 2001:7A8:71C1::/64
 ipv6 mtu 1280
end

router#
"""

SH_RUN_GI017 = """\
c2960#sh running-config interface Gi0/17 | begin interface
interface GigabitEthernet0/17
 description member of Po1
 switchport mode access
 channel-protocol lacp
 channel-group 1 mode passive
 spanning-tree portfast
end

c2960#
"""


# ---------------------------------------------------------------------------
# sh interface
# ---------------------------------------------------------------------------

class TestInterfaceStatus:
    def test_down_interface_is_absent_with_auto_settings(self) -> None:
        status = parse_interface_status(SH_INTERFACE_DOWN)
        assert status is not None
        assert status.ensure == "absent"
        assert status.duplex == "auto"
        assert status.speed == "auto"
        assert status.line_protocol_up is False

    def test_down_interface_hardware_details(self) -> None:
        status = parse_interface_status(SH_INTERFACE_DOWN)
        assert status is not None
        assert status.mtu == 1500
        assert status.bandwidth_kbit == 100000
        assert status.mac_address == "00d0.bbe2.19c1"

    def test_up_interface_with_fixed_speed(self) -> None:
        status = parse_interface_status(SH_INTERFACE_UP)
        assert status is not None
        assert status.ensure == "present"
        assert status.duplex == "full"
        assert status.speed == 1000
        assert status.description == "uplink to core"
        assert status.line_protocol_up is True

    def test_administratively_down_is_absent(self) -> None:
        status = parse_interface_status(SH_INTERFACE_ADMIN_DOWN)
        assert status is not None
        assert status.ensure == "absent"
        assert status.duplex is None
        assert status.speed is None

    def test_no_status_line_returns_none(self) -> None:
        output = "Switch#sh interface Fa0/99\n                    ^\n% Invalid input detected at '^' marker.\nSwitch#\n"
        assert parse_interface_status(output) is None

    def test_empty_output_returns_none(self) -> None:
        assert parse_interface_status("") is None

    def test_half_duplex_10_mbps(self) -> None:
        output = "Ethernet0 is up, line protocol is up\n  Half-duplex, 10Mb/s\n"
        status = parse_interface_status(output)
        assert status is not None
        assert (status.duplex, status.speed) == ("half", 10)

    @pytest.mark.parametrize(
        ("line", "duplex", "speed"),
        [
            ("  Full-duplex, 10Gb/s, media type is 10GBase-SR", "full", 10000),
            ("  Full Duplex, 1Gbps, media type is SFP-LR", "full", 1000),
            ("  Auto-duplex (Full), Auto Speed (100), 100BaseTX/FX", "auto", "auto"),
            ("  Full-duplex, unknown speed, media type is unknown", "full", None),
        ],
    )
    def test_duplex_reported_for_any_speed_format(
        self, line: str, duplex: str, speed: object
    ) -> None:
        output = f"GigabitEthernet1/0/1 is up, line protocol is up\n{line}\n"
        status = parse_interface_status(output)
        assert status is not None
        assert (status.duplex, status.speed) == (duplex, speed)


# ---------------------------------------------------------------------------
# sh ip interface brief
# ---------------------------------------------------------------------------

class TestInterfaceBrief:
    def test_rows_parsed_in_order(self) -> None:
        entries = parse_interface_brief(SH_IP_INTERFACE_BRIEF)
        assert [e.name for e in entries] == ["Vlan1", "FastEthernet0/1", "FastEthernet0/2"]

    def test_unassigned_address_is_none(self) -> None:
        entries = parse_interface_brief(SH_IP_INTERFACE_BRIEF)
        assert entries[0].ip_address == "192.168.0.1"
        assert entries[1].ip_address is None

    def test_status_flags(self) -> None:
        vlan1, fa1, fa2 = parse_interface_brief(SH_IP_INTERFACE_BRIEF)
        assert vlan1.is_up and vlan1.is_enabled
        assert not fa1.is_up and fa1.is_enabled
        assert not fa2.is_enabled

    def test_abbreviated_names_are_canonicalized(self) -> None:
        output = "Gi0/1   10.0.0.1   YES manual up   up\n"
        assert parse_interface_brief(output)[0].name == "GigabitEthernet0/1"


# ---------------------------------------------------------------------------
# sh running-config interface
# ---------------------------------------------------------------------------

class TestIPAddresses:
    def test_all_address_lines_in_order(self) -> None:
        assert parse_ip_addresses(SH_RUN_VLAN1) == [
            IPAddressEntry(24, ipaddress.ip_address("192.168.0.24"), "secondary"),
            IPAddressEntry(24, ipaddress.ip_address("192.168.0.1"), None),
            IPAddressEntry(64, ipaddress.ip_address("2001:07a8:71c1::"), "eui-64"),
        ]

    def test_mask_converted_to_prefix_length(self) -> None:
        output = " ip address 10.1.2.3 255.255.252.0\n"
        assert parse_ip_addresses(output)[0].prefix_length == 22

    def test_non_address_lines_ignored(self) -> None:
        output = " no ip address\n ip address dhcp\n ip nat inside\n ipv6 enable\n"
        assert parse_ip_addresses(output) == []

    def test_invalid_mask_skipped(self) -> None:
        output = " ip address 10.1.2.3 255.0.255.0\n ip address 10.9.9.9 255.255.255.255\n"
        entries = parse_ip_addresses(output)
        assert [str(e.address) for e in entries] == ["10.9.9.9"]


class TestEtherchannel:
    def test_channel_group_id(self) -> None:
        assert parse_etherchannel(SH_RUN_GI017) == "1"

    def test_no_channel_group(self) -> None:
        assert parse_etherchannel(SH_RUN_VLAN1) is None


class TestInterfaceConfig:
    def test_etherchannel_only(self) -> None:
        config = parse_interface_config(SH_RUN_GI017)
        assert config == InterfaceConfig(ip_addresses=(), etherchannel="1")
        assert config.to_dict() == {"etherchannel": "1"}

    def test_addresses_only(self) -> None:
        config = parse_interface_config(SH_RUN_VLAN1)
        assert config.etherchannel is None
        assert len(config.to_dict()["ipaddress"]) == 3
