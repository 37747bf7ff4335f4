"""Query models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectQuery:
    """A compiled SELECT statement.

    ``condition`` is already substituted; None means no WHERE clause.
    """

    table: str
    columns: tuple[str, ...]
    condition: str | None = None

    def render(self) -> str:
        """Format as ``SELECT <cols> FROM <table>[ WHERE <condition>];``."""
        sql = f"SELECT {','.join(self.columns)} FROM {self.table}"
        if self.condition is not None:
            sql += f" WHERE {self.condition}"
        return sql + ";"

    def __str__(self) -> str:
        return self.render()
