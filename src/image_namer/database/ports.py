"""Database abstraction (ports) to enable dependency inversion.

Provides a minimal, DB-agnostic interface used by the ledger, with concrete
adapters for specific backends (SQLite, Postgres).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any


class Database(ABC):
    """Abstract database interface.

    Queries use SQLite-style ``?`` placeholders; adapters translate as needed.
    """

    dialect: str = "sqlite"

    @abstractmethod
    def execute(self, query: str, params: Sequence[Any] | None = None) -> int:
        """Execute a statement and return the affected row count."""

    @abstractmethod
    def executemany(self, query: str, seq_of_params: Iterable[Sequence[Any]]) -> None: ...

    @abstractmethod
    def fetchone(self, query: str, params: Sequence[Any] | None = None) -> Any: ...

    @abstractmethod
    def fetchall(self, query: str, params: Sequence[Any] | None = None) -> list[Any]: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...

    @abstractmethod
    def is_unique_violation(self, exc: BaseException) -> bool:
        """Return True when `exc` is this backend's duplicate-key error."""
