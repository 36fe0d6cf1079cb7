from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .order_table import OrderTable


@dataclass(frozen=True)
class RankedToken:
    token: str
    primary_rank: Optional[int]
    is_custom: bool
    position: int = 0

    def sort_key(self) -> int:
        # rank only; equal ranks keep input order through the stable sort
        return self.primary_rank if self.primary_rank is not None else -1


def classify(token: str, table: OrderTable, position: int = 0) -> RankedToken:
    """Rank one class token. An unknown token is a custom token, not an error."""
    rank = table.rank_of(token)
    return RankedToken(token, rank, rank is None, position)
