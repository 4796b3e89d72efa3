"""CLIConfig: Command-line operational overrides.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pydantic import model_validator
from lazyreq.schemas.base import LazyReqBaseModel


class CLIConfig(LazyReqBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Notes
    -----
    If invalid_number is provided but run_failure_case is not, the failure
    case is switched on: asking for a value to fail on implies running it.
    """

    number: Optional[int] = None
    invalid_number: Optional[int] = None
    run_failure_case: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @model_validator(mode="after")
    def infer_failure_case_from_invalid_number(self):
        """Enable the failure case when an invalid number is given."""
        if self.run_failure_case is None and self.invalid_number is not None:
            self.run_failure_case = True

        return self

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

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
