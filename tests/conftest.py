"""pytest fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def client():
    """FastAPI TestClient for the bitflip app."""
    from fastapi.testclient import TestClient

    from bitflip.main import app

    return TestClient(app)


@pytest.fixture
def hostname_chars():
    """Hostname label characters."""
    from bitflip.config.bconfig import HOSTNAME_ALLOWED_CHARS

    return HOSTNAME_ALLOWED_CHARS
