"""Shared fixtures for napalm_ioscli unit tests."""

from __future__ import annotations

import pytest

from tests.unit.fakes import FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
