"""Repository adapters - Account directory implementations."""

from .memory import InMemoryAccountDirectory

__all__ = ["InMemoryAccountDirectory"]
