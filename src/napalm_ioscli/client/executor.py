"""Run IOS show commands on a ready session and parse their output."""

from __future__ import annotations

import logging

from napalm_ioscli.client.session import DeviceSession
from napalm_ioscli.model.device import DeviceFacts
from napalm_ioscli.model.interface import (
    InterfaceBrief,
    InterfaceConfig,
    InterfaceRecord,
    InterfaceStatus,
    SwitchportRecord,
)
from napalm_ioscli.model.vlan import VlanRecord
from napalm_ioscli.parser.device import parse_show_version
from napalm_ioscli.parser.ifname import canonicalize_ifname
from napalm_ioscli.parser.interface import (
    parse_interface_brief,
    parse_interface_config,
    parse_interface_status,
)
from napalm_ioscli.parser.switchport import parse_switchport
from napalm_ioscli.parser.text import find_cli_error
from napalm_ioscli.parser.vlan import parse_vlan_brief

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Query operations for one :class:`.DeviceSession`.

    Every method issues one or more show commands and returns freshly
    parsed records; nothing is cached between calls.

    Args:
        session: A READY session.
    """

    def __init__(self, session: DeviceSession) -> None:
        self._session = session

    @property
    def session(self) -> DeviceSession:
        return self._session

    def run(self, command: str) -> str:
        """Run *command* and return its raw output."""
        return self._session.run(command)

    # ------------------------------------------------------------------
    # Interfaces
    # ------------------------------------------------------------------

    def interface(self, name: str) -> InterfaceRecord:
        """Return the merged record for one interface.

        The interface banner decides presence; switchport and running-config
        details are only fetched for interfaces that exist.
        """
        ifname = canonicalize_ifname(name)
        status = self.interface_status(ifname)
        if status is None:
            return InterfaceRecord.absent(ifname)

        switchport = self.switchport(ifname)
        config = self.interface_config(ifname)
        return InterfaceRecord(
            name=ifname,
            ensure=status.ensure,
            duplex=status.duplex,
            speed=status.speed,
            description=status.description,
            ip_addresses=config.ip_addresses,
            etherchannel=config.etherchannel,
            switchport=switchport if switchport.to_dict() else None,
        )

    def interface_status(self, name: str) -> InterfaceStatus | None:
        return parse_interface_status(self.run(f"sh interface {name}"))

    def switchport(self, name: str) -> SwitchportRecord:
        return parse_switchport(self.run(f"sh interface {name} switchport"))

    def interface_config(self, name: str) -> InterfaceConfig:
        return parse_interface_config(
            self.run(f"sh running-config interface {name} | begin interface")
        )

    def interfaces_brief(self) -> list[InterfaceBrief]:
        return parse_interface_brief(self.run("sh ip interface brief"))

    # ------------------------------------------------------------------
    # VLANs and device
    # ------------------------------------------------------------------

    def vlans(self) -> dict[str, VlanRecord]:
        """Return the VLAN table keyed by VLAN id.

        Uses ``sh vlan brief`` or, on devices whose capability check rejected
        it, ``sh vlan-switch brief``.  If the device rejects the listing
        command as well, the table is reported empty.
        """
        command = self._session.vlan_command
        output = self.run(command)
        error = find_cli_error(output)
        if error is not None:
            logger.warning("VLAN listing %r rejected by device: %s", command, error)
            return {}
        return parse_vlan_brief(output)

    def show_version(self) -> DeviceFacts:
        return parse_show_version(self.run("sh ver"))
