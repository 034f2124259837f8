"""VLAN command planner.

Compares the *current* state of one VLAN against a *desired* state and
produces the ordered IOS configuration commands that converge them.
"""

from __future__ import annotations

from napalm_ioscli.model.vlan import VlanState


def plan_vlan_update(
    vlan_id: str | int,
    current: VlanState,
    desired: VlanState,
) -> list[str]:
    """Compute the minimal command list moving VLAN *vlan_id* to *desired*.

    Rules:

    - ``present -> absent``: exactly ``no vlan <id>``.
    - ``absent -> absent``: nothing.
    - ``* -> present``: ``vlan <id>`` (enters VLAN configuration mode), then
      ``name <description>`` only when the desired description is set and
      differs from the current one.  ``name`` on a :class:`VlanState` is the
      VLAN id, so it never produces a command.

    Commands are meant to be issued from global configuration mode.

    Args:
        vlan_id: 802.1Q VLAN identifier.
        current: Current state (``VlanState.from_record(...)``).
        desired: Target state; ``None`` attributes are left unchanged.

    Returns:
        Ordered command list; empty when nothing needs to happen.
    """
    if desired.ensure == "absent":
        if current.ensure == "present":
            return [f"no vlan {vlan_id}"]
        return []

    commands = [f"vlan {vlan_id}"]
    if desired.description is not None and desired.description != current.description:
        commands.append(f"name {desired.description}")
    return commands
