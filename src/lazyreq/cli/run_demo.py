"""Demonstration of eager vs lazy precondition messages.

Runs the same passing check twice. The eager version builds its message
anyway, so "Computing error message..." appears; the lazy version never
builds it. An optional failure case shows the lazy message being built
exactly once and the ValidationError ending the program.
"""

import sys
import argparse
import logging
import importlib.util
from pathlib import Path
from typing import Optional, Sequence

from lazyreq.contracts import require_eager, require_lazy
from lazyreq.messages import expensive_message
from lazyreq.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig, InternalConfig


logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def setup_logging(level: str) -> None:
    """Configure the root logger with a single stderr handler."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    logger.debug("Logging: level=%s", logging.getLevelName(log_level))


def run_demo(config: InternalConfig) -> None:
    """Run the eager and lazy checks, then the failure case if enabled.

    Raises
    ------
    ValidationError
        From the failure case. It is not caught here.
    """
    number = config.demo.number
    logger.info("Checking number=%d", number)

    print("expensive_message() IS called")
    # the f-string runs before require_eager is entered, pass or fail
    require_eager(number > 0, f"{number} {expensive_message()}")

    print()

    print("expensive_message() is NOT called")
    require_lazy(number > 0, lambda: f"{number} {expensive_message()}")

    if config.demo.run_failure_case:
        invalid = config.demo.invalid_number
        print()
        print(f"Failure case: validating {invalid}")
        logger.info("Running failure case with invalid_number=%d", invalid)
        require_lazy(invalid > 0, expensive_message)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Show when eager and lazy precondition messages are built"
    )
    parser.add_argument("config", nargs="?", help="Path to user config file (optional)")
    parser.add_argument("--number", type=int, help="Value checked on the passing path")
    parser.add_argument("--invalid-number", type=int, help="Value checked in the failure case")
    parser.add_argument("--fail", action="store_true", help="Run the failure case (exits non-zero)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    param_cfg = ParamConfig()

    user_cfg = None
    if args.config:
        user_cfg = UserConfig.model_validate(load_user_config_dict(args.config))

    cli_cfg = CLIConfig.model_validate({
        k: v
        for k, v in {
            "number": args.number,
            "invalid_number": args.invalid_number,
            "run_failure_case": True if args.fail else None,
            "log_level": "DEBUG" if args.verbose else None,
        }.items()
        if v is not None
    })

    # Param < User < CLI
    config = resolve_config(param_cfg, user_cfg, cli_cfg)
    setup_logging(config.logging.level)

    run_demo(config)


if __name__ == "__main__":
    main()
