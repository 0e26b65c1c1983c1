"""Pytest configuration for hexkit tests."""

import pytest


def pytest_configure(config):
    """Configure pytest for the Zelos SDK plugin."""
    # The zelos-sdk pytest plugin reads these attributes for its checker output
    config.zelos_local_artifacts_dir = None
    config.zelos_remote_artifacts_dir = None
    config.zelos_device_id = None


@pytest.fixture
def sample_bytes() -> bytes:
    """Seventeen bytes spanning one full dump window and one partial one."""
    return bytes(range(17))
