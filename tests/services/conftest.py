"""Service test fixtures."""

import pytest

from tests.services.fake_transport import FakeTransport


@pytest.fixture
def fake_transport():
    return FakeTransport()
