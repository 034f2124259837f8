"""NAPALM driver for Cisco IOS devices managed over an interactive CLI."""

from napalm_ioscli.driver import IOSCLIDriver

__all__ = ["IOSCLIDriver"]
