"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated
and contains no optional fields.
"""

from typing import Literal
from pydantic import ConfigDict
from lazyreq.schemas.base import LazyReqBaseModel


class InternalBaseModel(LazyReqBaseModel):
    """Frozen base for every runtime section."""

    model_config = ConfigDict(frozen=True)


class InternalDemoConfig(InternalBaseModel):
    """Runtime demonstration values."""
    number: int
    invalid_number: int
    run_failure_case: bool


class InternalLoggingConfig(InternalBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(LazyReqBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
    Runtime code accesses fields directly:

        number = config.demo.number  # NOT .get()
    """

    demo: InternalDemoConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
