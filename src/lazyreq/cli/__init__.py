"""Command-line interface modules for the lazyreq demonstration.

This package contains the execution logic, making scripts/ optional.
"""

from lazyreq.cli.run_demo import run_demo, main

__all__ = ['run_demo', 'main']
