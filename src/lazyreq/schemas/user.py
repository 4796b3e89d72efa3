"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts both lowercase keys and the legacy uppercase spelling
(NUMBER -> number, RUN_FAILURE_CASE -> run_failure_case). Users only
specify what they want to override from the expert defaults.
As on the command line, giving INVALID_NUMBER without RUN_FAILURE_CASE
switches the failure case on.
"""

from typing import Literal, Optional, Any
from pydantic import model_validator, field_validator
from lazyreq.schemas.base import LazyReqBaseModel


class UserConfig(LazyReqBaseModel):
    """User configuration overrides.

    Usage
    -----
        user = UserConfig.model_validate({"NUMBER": 3, "LOG_LEVEL": "info"})
        user.number
        3
        user.log_level
        'INFO'
    """

    number: Optional[int] = None
    invalid_number: Optional[int] = None
    run_failure_case: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any):
        """Lowercase top-level keys so legacy UPPERCASE configs validate."""
        if isinstance(data, dict):
            return {
                (k.lower() if isinstance(k, str) else k): v
                for k, v in data.items()
            }
        return data

    @model_validator(mode="after")
    def infer_failure_case_from_invalid_number(self):
        """Enable the failure case when an invalid number is given."""
        if self.run_failure_case is None and self.invalid_number is not None:
            self.run_failure_case = True

        return self

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert user config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        demo_overrides = {}
        if self.number is not None:
            demo_overrides["number"] = self.number
        if self.invalid_number is not None:
            demo_overrides["invalid_number"] = self.invalid_number
        if self.run_failure_case is not None:
            demo_overrides["run_failure_case"] = self.run_failure_case

        if demo_overrides:
            overrides["demo"] = demo_overrides

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
