"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Implementations raise StorageError (core/errors.py), never driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; the pure ranking/parsing that
      services wrap around these calls is never async
"""

from typing import Protocol

from schoolfinder.core.domain_types import NewSchool, SchoolId, SchoolRecord


class SchoolRepository(Protocol):
    """Contract for school persistence — implemented by shell."""
    async def insert(self, school: NewSchool) -> SchoolId: ...
    async def fetch_all(self) -> list[SchoolRecord]: ...
