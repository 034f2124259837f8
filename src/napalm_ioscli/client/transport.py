"""Interactive CLI transport for IOS devices.

:class:`Transport` is the capability the session state machine consumes.
:class:`NetmikoTransport` implements it on top of :mod:`netmiko`, mapping
netmiko's failures onto :class:`~napalm_ioscli.client.errors.IOSCLITransportError`.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Protocol

from netmiko import ConnectHandler
from netmiko.exceptions import (
    NetmikoAuthenticationException,
    NetmikoTimeoutException,
    ReadException,
)

from napalm_ioscli.client.errors import IOSCLITransportError

logger = logging.getLogger(__name__)

OutputCallback = Callable[[str], None]

_TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (
    NetmikoTimeoutException,
    NetmikoAuthenticationException,
    ReadException,
    EOFError,
    OSError,
)

# netmiko device types per URL scheme.
DEVICE_TYPES: dict[str, str] = {
    "telnet": "cisco_ios_telnet",
}

DEFAULT_PORTS: dict[str, int] = {
    "telnet": 23,
}


class Transport(Protocol):
    """Line-oriented interactive session to one device."""

    def connect(self) -> None:
        """Open the connection."""

    def close(self) -> None:
        """Release the connection; must be safe to call more than once."""

    def command(
        self,
        text: str,
        prompt: re.Pattern[str] | None = None,
        on_output: OutputCallback | None = None,
    ) -> str:
        """Send *text* as one line and return the output up to *prompt*.

        When *prompt* is ``None`` the transport waits for its default device
        prompt.  *on_output*, if given, receives every output line including
        the prompt that terminated the command.
        """

    def expect(self, pattern: re.Pattern[str]) -> str:
        """Wait until *pattern* appears in the output and return what was read."""

    def handles_login(self) -> bool:
        """``True`` if :meth:`connect` already performed authentication."""


class NetmikoTransport:
    """:class:`Transport` backed by a :mod:`netmiko` connection.

    netmiko authenticates while connecting, so :meth:`handles_login`
    is always ``True``.

    Args:
        host: Device hostname or IP address.
        port: TCP port (default 23).
        username: Login username.
        password: Login password.
        device_type: netmiko platform (default ``cisco_ios_telnet``).
        read_timeout: Seconds to wait for a prompt before failing.
        debug: Raise the ``netmiko`` logger to DEBUG for this process.
    """

    def __init__(
        self,
        host: str,
        port: int = 23,
        username: str = "",
        password: str = "",
        device_type: str = DEVICE_TYPES["telnet"],
        read_timeout: float = 30.0,
        debug: bool = False,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.device_type = device_type
        self.read_timeout = read_timeout
        self.debug = debug
        self._conn: Any = None

    # ------------------------------------------------------------------
    # Transport protocol
    # ------------------------------------------------------------------

    def connect(self) -> None:
        if self.debug:
            logging.getLogger("netmiko").setLevel(logging.DEBUG)
        logger.debug("Connecting to %s:%d (%s)", self.host, self.port, self.device_type)
        try:
            self._conn = ConnectHandler(
                device_type=self.device_type,
                host=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                conn_timeout=self.read_timeout,
                auth_timeout=self.read_timeout,
            )
        except _TRANSPORT_ERRORS as exc:
            raise IOSCLITransportError("connect", exc) from exc

    def close(self) -> None:
        conn, self._conn = self._conn, None
        if conn is None:
            return
        try:
            conn.disconnect()
        except _TRANSPORT_ERRORS:
            logger.debug("Disconnect from %s failed (ignored)", self.host, exc_info=True)

    def command(
        self,
        text: str,
        prompt: re.Pattern[str] | None = None,
        on_output: OutputCallback | None = None,
    ) -> str:
        conn = self._require_connection(text)
        try:
            output: str = conn.send_command(
                text,
                expect_string=prompt.pattern if prompt is not None else None,
                read_timeout=self.read_timeout,
                strip_prompt=False,
                strip_command=False,
                cmd_verify=False,
            )
            if on_output is not None:
                for line in output.splitlines():
                    on_output(line)
                if prompt is None:
                    on_output(conn.find_prompt())
        except _TRANSPORT_ERRORS as exc:
            raise IOSCLITransportError(text, exc) from exc
        return output

    def expect(self, pattern: re.Pattern[str]) -> str:
        conn = self._require_connection(pattern.pattern)
        try:
            matched: str = conn.read_until_pattern(
                pattern=pattern.pattern,
                read_timeout=self.read_timeout,
            )
        except _TRANSPORT_ERRORS as exc:
            raise IOSCLITransportError(f"expect {pattern.pattern}", exc) from exc
        return matched

    def handles_login(self) -> bool:
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_connection(self, operation: str) -> Any:
        if self._conn is None:
            raise IOSCLITransportError(operation, ConnectionError("transport is not connected"))
        return self._conn
