"""Typed model for VLAN data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Ensure = Literal["present", "absent"]


@dataclass(frozen=True)
class VlanRecord:
    """A single row of ``sh vlan brief``.

    The record follows the resource naming used by the VLAN reconciler:
    ``name`` carries the VLAN id and ``description`` the VLAN name shown by
    the switch.

    Attributes:
        name: 802.1Q VLAN identifier as a string (e.g. ``"100"``).
        description: VLAN name as configured on the switch.
        status: Status column (``"active"``, ``"act/unsup"``, ...).
        interfaces: Canonical names of the member ports, in listing order.
    """

    name: str
    description: str
    status: str
    interfaces: tuple[str, ...] = field(default_factory=tuple)

    @property
    def vlan_id(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status,
            "interfaces": list(self.interfaces),
        }


@dataclass(frozen=True)
class VlanState:
    """Current or desired VLAN state used by :func:`plan_vlan_update`.

    Attributes:
        ensure: ``"present"`` or ``"absent"``.
        name: VLAN id the state belongs to; informational only.
        description: VLAN name to configure; ``None`` means "do not change".
    """

    ensure: Ensure = "present"
    name: str | None = None
    description: str | None = None

    @classmethod
    def from_record(cls, record: VlanRecord | None) -> VlanState:
        """Build the current state of a VLAN from a parsed record (or its absence)."""
        if record is None:
            return cls(ensure="absent")
        return cls(ensure="present", name=record.name, description=record.description)
