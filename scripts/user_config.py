"""lazyreq demo user configuration.

Modify settings here to customize the demonstration. Defaults live in
src/lazyreq/schemas/param.py

Usage:
    python scripts/run_demo.py scripts/user_config.py
    python scripts/run_demo.py scripts/user_config.py --number 3
"""

CONFIG = {
    # ========================================================================
    # PASSING PATH
    # ========================================================================
    "NUMBER": 10,             # Must be > 0 for the eager and lazy checks to pass

    # ========================================================================
    # FAILURE CASE
    # ========================================================================
    "RUN_FAILURE_CASE": False,  # True ends the program with ValidationError;
                                # if left out, setting INVALID_NUMBER turns it on
    "INVALID_NUMBER": -5,       # Value checked in the failure case

    "LOG_LEVEL": "WARNING",
}
