#!/usr/bin/env python3
"""Eager vs lazy precondition message demo.

Usage:
    python scripts/run_demo.py
    python scripts/run_demo.py scripts/user_config.py
    python scripts/run_demo.py --fail --invalid-number -3

Note: User config in scripts/user_config.py, defaults in src/lazyreq/schemas/param.py
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from lazyreq.cli.run_demo import main


if __name__ == "__main__":
    main()
