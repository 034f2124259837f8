"""Typed model for device facts parsed from ``sh ver``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DeviceFacts:
    """General device information parsed from ``sh ver``.

    Attributes:
        hostname: Device hostname, from the ``<host> uptime is`` line.
        uptime: Raw uptime text (e.g. ``"3 weeks, 1 day, 23 hours, 36 minutes"``).
        uptime_seconds: Uptime converted to seconds.
        hardware_model: Chassis model (e.g. ``"WS-C2960G-48TC-L"``).
        processor: CPU type, when reported.
        hardware_revision: Board revision string.
        memory_size: Main memory size as reported (e.g. ``"61440K"``).
        operating_system: ``"IOS"`` when the version banner was recognised.
        os_release: Full IOS release (e.g. ``"12.2(25)SEE3"``).
        os_major_release: Major release train (e.g. ``"12.2SEE"``).
        os_feature: Feature set from the image name (e.g. ``"LANBASEK9"``).
        serial_number: System or processor board serial number.
    """

    hostname: str | None = None
    uptime: str | None = None
    uptime_seconds: int | None = None
    hardware_model: str | None = None
    processor: str | None = None
    hardware_revision: str | None = None
    memory_size: str | None = None
    operating_system: str | None = None
    os_release: str | None = None
    os_major_release: str | None = None
    os_feature: str | None = None
    serial_number: str | None = None

    @property
    def uptime_days(self) -> int | None:
        if self.uptime_seconds is None:
            return None
        return self.uptime_seconds // 86400
