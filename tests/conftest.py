"""Pytest configuration and fixtures.

Registers markers and Hypothesis profiles, and keeps library logging quiet
unless a test opts in with ``caplog``.
"""

from __future__ import annotations

import logging
import os

from hypothesis import HealthCheck, settings
import pytest

# =============================================================================
# Hypothesis Profiles
# =============================================================================

settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    derandomize=True,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_library_logging():
    """Keep fallible's debug logging out of test output by default."""
    logging.getLogger("fallible").setLevel(logging.WARNING)


@pytest.fixture
def debug_logging(caplog):
    """Capture fallible's DEBUG records for assertions."""
    caplog.set_level(logging.DEBUG, logger="fallible")
    return caplog


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Structural guarantees of the public types",
        "scenario: End-to-end usage scenarios built on safe_divide/sqrt",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
