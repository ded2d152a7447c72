"""
In-Memory Repository Implementations.

This package contains in-memory implementations of the repository
interfaces. Nothing is persisted; state lives for the length of a run.
"""

from recordkeeping.infrastructure.repositories.memory.keyed_repository import (
    InMemoryKeyedRepository,
)
from recordkeeping.infrastructure.repositories.memory.list_repository import (
    InMemoryListRepository,
)

__all__ = ["InMemoryKeyedRepository", "InMemoryListRepository"]
