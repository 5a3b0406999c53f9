"""Pytest configuration and shared fixtures for the acrodoc test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from acrodoc.ast import Emphasis, Text
from acrodoc.registry import AcronymRegistry

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture
def registry() -> AcronymRegistry:
    """Provide a registry with a few plain and formatted acronyms.

    Returns
    -------
    AcronymRegistry
        Registry holding RL, CPU and IVD (formatted longname with a plural)

    """
    registry = AcronymRegistry()
    registry.register("RL", "RL", "Reinforcement Learning")
    registry.register("CPU", "CPU", "Central Processing Unit")
    registry.register(
        "IVD",
        "IVD",
        [Emphasis(content=[Text(content="in vitro")]), Text(content=" diagnostic")],
        plural_longname=[Emphasis(content=[Text(content="in vitro")]), Text(content=" diagnostics")],
    )
    return registry


@pytest.fixture
def write_config(tmp_path: Path):
    """Provide a helper writing a configuration file in a temporary directory.

    Returns
    -------
    callable
        ``write_config(name, content) -> Path``

    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def restore_package_logger():
    """Restore the ``acrodoc`` logger after a test that configures logging."""
    package_logger = logging.getLogger("acrodoc")
    saved = (package_logger.level, list(package_logger.handlers), package_logger.propagate)
    yield
    for handler in package_logger.handlers:
        if handler not in saved[1]:
            handler.close()
    package_logger.setLevel(saved[0])
    package_logger.handlers[:] = saved[1]
    package_logger.propagate = saved[2]
