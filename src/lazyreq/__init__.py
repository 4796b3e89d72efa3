"""`lazyreq` - precondition checks with lazily built failure messages.

Subpackages:
- contracts: require_lazy / require_eager and ValidationError
- schemas: Pydantic configuration for the demonstration
- cli: Demonstration runner
"""

__version__ = "0.1.0"
