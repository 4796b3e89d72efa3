"""Tests for CLIConfig schema and conversion to internal overrides."""

import pytest
from pydantic import ValidationError as ConfigValidationError

from lazyreq.schemas.cli import CLIConfig

pytestmark = pytest.mark.unit


def test_cli_to_internal_overrides_with_number():
    cli = CLIConfig(number=3)
    overrides = cli.to_internal_overrides()
    assert overrides["demo"]["number"] == 3


def test_cli_to_internal_overrides_with_log_level():
    cli = CLIConfig(log_level="DEBUG")
    overrides = cli.to_internal_overrides()
    assert overrides["logging"]["level"] == "DEBUG"


def test_cli_to_internal_overrides_empty():
    cli = CLIConfig()
    assert cli.to_internal_overrides() == {}


def test_invalid_number_enables_failure_case():
    """Giving a value to fail on switches the failure case on."""
    cli = CLIConfig(invalid_number=-3)
    assert cli.run_failure_case is True
    overrides = cli.to_internal_overrides()
    assert overrides["demo"] == {"invalid_number": -3, "run_failure_case": True}


def test_explicit_failure_case_flag_is_kept():
    cli = CLIConfig(invalid_number=-3, run_failure_case=False)
    assert cli.run_failure_case is False


def test_cli_config_all_log_levels():
    for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
        assert CLIConfig(log_level=level).log_level == level


def test_cli_config_rejects_unknown_field():
    with pytest.raises(ConfigValidationError):
        CLIConfig(mode="historical")
