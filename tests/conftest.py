"""Root-level pytest fixtures for the lazyreq test suite.

Provides shared configuration fixtures built from the Pydantic schemas.
"""

import pytest

from lazyreq.schemas import ParamConfig, CLIConfig, resolve_config


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Examples
    --------
    >>> def test_failure_case(make_config):
    ...     config = make_config(run_failure_case=True)
    ...     assert config.demo.run_failure_case
    """
    def _make(**cli_overrides):
        """Create InternalConfig with CLI overrides."""
        if cli_overrides:
            return resolve_config(param_config, None, CLIConfig(**cli_overrides))
        return resolve_config(param_config, None, None)

    return _make


# =============================================================================
# Message Producer Fixtures
# =============================================================================

class CountingProducer:
    """Zero-argument message producer that records how often it ran."""

    def __init__(self, result="Value must be positive"):
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.result


@pytest.fixture
def producer():
    """Fresh counting producer returning 'Value must be positive'."""
    return CountingProducer()


@pytest.fixture
def make_producer():
    """Factory for counting producers with a custom result."""
    return CountingProducer
