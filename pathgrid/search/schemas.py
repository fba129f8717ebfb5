"""Pydantic result models for search runs."""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .types import SearchType


class SearchReport(BaseModel):
    """Outcome of one timed search, for display by the editor.

    ``path`` is None when the end is unreachable; that is a normal outcome,
    not a failure. Strategies that cannot run raise instead of reporting.
    """

    model_config = ConfigDict(frozen=True)

    strategy: SearchType
    start: Tuple[int, int]
    end: Tuple[int, int]
    path: Optional[List[Tuple[int, int]]] = Field(
        None, description="Cells from start to end inclusive; None if unreachable",
    )
    elapsed_ms: float = Field(..., ge=0, description="Wall-clock duration of the search call")

    @property
    def reachable(self) -> bool:
        return self.path is not None

    @property
    def steps(self) -> Optional[int]:
        """Number of moves along the path (cells - 1), or None if unreachable."""
        if self.path is None:
            return None
        return len(self.path) - 1

    def summary(self) -> str:
        if self.path is None:
            return f"{self.strategy.value}: no path from {self.start} to {self.end} ({self.elapsed_ms:.2f} ms)"
        return (
            f"{self.strategy.value}: {self.steps} step(s) from {self.start} to {self.end} "
            f"({self.elapsed_ms:.2f} ms)"
        )
