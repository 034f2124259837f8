"""Device facts aggregation.

:class:`IOSFacts` assembles the facts of one device by calling back into
the query operations of a :class:`~napalm_ioscli.client.executor.CommandExecutor`.
"""

from __future__ import annotations

import logging
from typing import Any

from napalm_ioscli.client.executor import CommandExecutor

logger = logging.getLogger(__name__)


class IOSFacts:
    """Collects ``sh ver`` facts and the interface inventory.

    Args:
        executor: Executor bound to a READY session.
    """

    def __init__(self, executor: CommandExecutor) -> None:
        self._executor = executor

    def retrieve(self) -> dict[str, Any]:
        """Return a flat facts dict; keys whose value is unknown are omitted."""
        version = self._executor.show_version()
        facts: dict[str, Any] = {
            "hostname": version.hostname,
            "uptime": version.uptime,
            "uptime_seconds": version.uptime_seconds,
            "uptime_days": version.uptime_days,
            "hardwaremodel": version.hardware_model,
            "processor": version.processor,
            "hardwarerevision": version.hardware_revision,
            "memorysize": version.memory_size,
            "operatingsystem": version.operating_system,
            "operatingsystemrelease": version.os_release,
            "operatingsystemmajrelease": version.os_major_release,
            "operatingsystemfeature": version.os_feature,
            "serialnumber": version.serial_number,
        }
        facts = {k: v for k, v in facts.items() if v is not None}
        facts["interfaces"] = [brief.name for brief in self._executor.interfaces_brief()]
        logger.debug("Retrieved %d facts", len(facts))
        return facts
