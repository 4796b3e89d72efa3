"""Pydantic configuration schemas for the lazyreq demonstration.

All configuration validation, coercion, and normalization happens at schema
validation time via Pydantic.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from lazyreq.schemas.resolve import resolve_config
from lazyreq.schemas.internal import InternalConfig
from lazyreq.schemas.param import ParamConfig
from lazyreq.schemas.user import UserConfig
from lazyreq.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
