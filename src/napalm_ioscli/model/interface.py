"""Typed models for interface/switchport data."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Any, Literal, Union

Ensure = Literal["present", "absent"]
Duplex = Literal["half", "full", "auto"]
Speed = Union[int, Literal["auto"]]
IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class InterfaceStatus:
    """State reported by the ``sh interface <name>`` banner.

    Attributes:
        ensure: ``"present"`` if the interface is up, ``"absent"`` when it is
            down or administratively down.
        duplex: ``"half"``, ``"full"`` or ``"auto"``; ``None`` if not shown.
        speed: Speed in Mbps or ``"auto"``; ``None`` if not shown.
        line_protocol_up: Line protocol state, ``None`` if not shown.
        description: Interface description, if configured.
        mtu: MTU in bytes.
        mac_address: Hardware address as printed (``00d0.bbe2.19c1``).
        bandwidth_kbit: Configured bandwidth in Kbit/s.
    """

    ensure: Ensure
    duplex: Duplex | None = None
    speed: Speed | None = None
    line_protocol_up: bool | None = None
    description: str | None = None
    mtu: int | None = None
    mac_address: str | None = None
    bandwidth_kbit: int | None = None


@dataclass(frozen=True)
class SwitchportRecord:
    """Layer-2 settings parsed from ``sh interface <name> switchport``.

    Every field is optional; an omitted field means the device did not
    report it (never zero).

    Attributes:
        mode: ``"access"``, ``"trunk"``, or the raw negotiation state
            (``"dynamic auto"``, ``"dynamic desirable"``).
        encapsulation: ``"dot1q"``, ``"isl"`` or ``"negotiate"``.
        access_vlan: Access VLAN id.
        native_vlan: Trunk native VLAN id.
        allowed_trunk_vlans: ``"all"``, ``"none"`` or a comma/range string
            such as ``"1,99"``.
    """

    mode: str | None = None
    encapsulation: str | None = None
    access_vlan: str | None = None
    native_vlan: str | None = None
    allowed_trunk_vlans: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Return only the fields the device reported."""
        fields = {
            "mode": self.mode,
            "encapsulation": self.encapsulation,
            "access_vlan": self.access_vlan,
            "native_vlan": self.native_vlan,
            "allowed_trunk_vlans": self.allowed_trunk_vlans,
        }
        return {k: v for k, v in fields.items() if v is not None}


@dataclass(frozen=True)
class IPAddressEntry:
    """One address assignment line from the running configuration.

    Attributes:
        prefix_length: Prefix length derived from the mask or ``/len``.
        address: The configured address.
        tag: Trailing qualifier (``"secondary"``, ``"eui-64"``), ``None`` for
            a plain primary address.
    """

    prefix_length: int
    address: IPAddress
    tag: str | None = None

    @property
    def version(self) -> int:
        return self.address.version


@dataclass(frozen=True)
class InterfaceConfig:
    """Layer-3 and bundling data from ``sh running-config interface <name>``."""

    ip_addresses: tuple[IPAddressEntry, ...] = field(default_factory=tuple)
    etherchannel: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.ip_addresses:
            result["ipaddress"] = list(self.ip_addresses)
        if self.etherchannel is not None:
            result["etherchannel"] = self.etherchannel
        return result


@dataclass(frozen=True)
class InterfaceRecord:
    """Merged view of one interface.

    Attributes:
        name: Canonical interface name (e.g. ``"FastEthernet0/1"``).
        ensure: ``"present"`` or ``"absent"``.
        duplex: See :class:`InterfaceStatus`.
        speed: See :class:`InterfaceStatus`.
        description: Interface description.
        ip_addresses: Ordered address assignments.
        etherchannel: Channel-group id, when the port is bundled.
        switchport: Layer-2 settings, ``None`` for routed-only interfaces.
    """

    name: str
    ensure: Ensure
    duplex: Duplex | None = None
    speed: Speed | None = None
    description: str | None = None
    ip_addresses: tuple[IPAddressEntry, ...] = field(default_factory=tuple)
    etherchannel: str | None = None
    switchport: SwitchportRecord | None = None

    @classmethod
    def absent(cls, name: str) -> InterfaceRecord:
        return cls(name=name, ensure="absent")

    def to_dict(self) -> dict[str, Any]:
        """Flatten the record, merging switchport fields in and omitting unset fields."""
        result: dict[str, Any] = {"ensure": self.ensure}
        if self.ensure == "absent":
            return result
        if self.duplex is not None:
            result["duplex"] = self.duplex
        if self.speed is not None:
            result["speed"] = self.speed
        if self.description is not None:
            result["description"] = self.description
        if self.switchport is not None:
            result.update(self.switchport.to_dict())
        if self.ip_addresses:
            result["ipaddress"] = list(self.ip_addresses)
        if self.etherchannel is not None:
            result["etherchannel"] = self.etherchannel
        return result


@dataclass(frozen=True)
class InterfaceDesiredState:
    """Desired configuration for one interface.

    Used as input to :func:`~napalm_ioscli.utils.interface_diff.plan_interface_update`.
    Any field set to ``None`` means "do not change this attribute".

    Attributes:
        ensure: ``"present"`` to bring the port up (``no shutdown``),
            ``"absent"`` to shut it down.
        ip_addresses: Full desired address list; ``None`` leaves addressing
            untouched, an empty tuple removes every address.
    """

    ensure: Ensure | None = None
    description: str | None = None
    speed: Speed | None = None
    duplex: Duplex | None = None
    native_vlan: str | None = None
    encapsulation: str | None = None
    mode: str | None = None
    allowed_trunk_vlans: str | None = None
    etherchannel: str | None = None
    ip_addresses: tuple[IPAddressEntry, ...] | None = None


@dataclass(frozen=True)
class InterfaceBrief:
    """One row of ``sh ip interface brief``.

    Attributes:
        name: Canonical interface name.
        ip_address: Address column, ``None`` when ``unassigned``.
        status: Status column (``"up"``, ``"down"``, ``"administratively down"``).
        protocol: Line protocol column (``"up"``/``"down"``).
    """

    name: str
    ip_address: str | None
    status: str
    protocol: str

    @property
    def is_enabled(self) -> bool:
        return not self.status.startswith("administratively")

    @property
    def is_up(self) -> bool:
        return self.protocol == "up"
