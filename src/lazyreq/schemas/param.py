"""ParamConfig: Expert defaults for the demonstration.

ALL parameters must have defaults here. Runtime code never reads ParamConfig
directly - it only receives InternalConfig.
"""

from typing import Literal
from pydantic import Field
from lazyreq.schemas.base import LazyReqBaseModel


class DemoConfig(LazyReqBaseModel):
    """Values checked by the demonstration runner."""
    number: int = Field(10, description="Value checked on the passing path")
    invalid_number: int = Field(-5, description="Value checked in the failure case")
    run_failure_case: bool = False


class LoggingConfig(LazyReqBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class ParamConfig(LazyReqBaseModel):
    """Complete expert configuration with defaults for every parameter.

    Usage
    -----
        param = ParamConfig()
        internal = resolve_config(param, user_cfg, cli_cfg)
    """

    demo: DemoConfig = Field(default_factory=DemoConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
