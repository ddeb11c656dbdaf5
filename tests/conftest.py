import os
from unittest.mock import patch

import pytest

_ENV_KEYS = (
    "XCVT_LOG_LEVEL",
    "XCVT_COLOR",
    "XCVT_PRECISION",
    "XCVT_MCP_TOOLS",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def reset_config():
    """Reset config env vars after each test."""
    # Store original env vars
    original_env = {key: os.environ.get(key) for key in _ENV_KEYS}

    yield

    # Restore original env vars
    for key, value in original_env.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]


@pytest.fixture
def test_env():
    """Set up test environment variables."""
    env_vars = {
        "XCVT_LOG_LEVEL": "debug",
        "XCVT_COLOR": "0",
        "XCVT_PRECISION": "4",
        "XCVT_MCP_TOOLS": "conversion",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars
