"""Custom exceptions for the napalm-ioscli CLI client."""

from __future__ import annotations

from dataclasses import dataclass


class IOSCLIError(Exception):
    """Base exception for all napalm-ioscli errors."""


class IOSCLIConfigError(IOSCLIError):
    """Raised when the driver is missing configuration it needs (e.g. an enable password)."""


class IOSCLISessionError(IOSCLIError):
    """Raised when a session is used outside the state it is valid in."""


class IOSCLITransportError(IOSCLIError):
    """Raised on connect failure, prompt mismatch, timeout or disconnect."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Transport failure during {operation!r}: {cause}")


@dataclass(eq=False)
class IOSCLICommandError(IOSCLIError):
    """Raised when the device rejects a configuration command.

    Attributes:
        command: The command line that was sent.
        output: Raw device output containing the ``%`` error line.
    """

    command: str
    output: str

    def __post_init__(self) -> None:
        first = next(
            (line.strip() for line in self.output.splitlines() if line.strip().startswith("%")),
            self.output.strip()[:200],
        )
        super().__init__(f"Device rejected {self.command!r}: {first}")
