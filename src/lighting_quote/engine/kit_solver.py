"""
Kit Solver - Least-cost kit cover for a requested footage.

Kits are bought whole and may repeat. The solver finds the cheapest
multiset whose combined length reaches the requested footage, allowing
leftover. It is an unbounded knapsack solved as a forward shortest-path
over lengths 0..(footage + largest kit).
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Mapping, Optional, Sequence

from .models import freeze_counts
from .money import ZERO


@dataclass(frozen=True)
class KitCover:
    """Chosen kit combination."""
    total_length: int
    cost: Decimal
    counts: Mapping[int, int] = field(default_factory=dict, hash=False)  # kit size → quantity
    covered: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'counts', freeze_counts(self.counts))


@dataclass
class _Cell:
    cost: Decimal
    prev: int = -1
    kit: int = -1


def solve_kit_cover(footage: int, kits: Sequence[tuple[int, Decimal]]) -> KitCover:
    """
    Find the cheapest kit multiset with total length >= footage.

    Args:
        footage: Required length in whole feet (already normalized, >= 0)
        kits: (size, cost) pairs, sizes positive and ascending

    Returns:
        KitCover. Among equally cheap covers the shortest total length
        wins. An empty catalog yields no kits, zero cost and
        ``covered=False`` with the length reported as the footage itself.
    """
    if footage <= 0:
        return KitCover(total_length=0, cost=ZERO)
    if not kits:
        return KitCover(total_length=footage, cost=ZERO, covered=False)

    cap = footage + max(size for size, _ in kits)
    table: dict[int, _Cell] = {0: _Cell(cost=ZERO)}

    # Relaxing out of a length that already covers the footage can only add
    # cost, so only lengths below the footage act as sources.
    for length in range(footage):
        cell = table.get(length)
        if cell is None:
            continue
        for size, price in kits:
            target = min(cap, length + size)
            candidate = cell.cost + price
            current = table.get(target)
            if current is None or candidate < current.cost:
                table[target] = _Cell(cost=candidate, prev=length, kit=size)

    best_length: Optional[int] = None
    for length in sorted(table):
        if length < footage:
            continue
        if best_length is None or table[length].cost < table[best_length].cost:
            best_length = length

    return KitCover(
        total_length=best_length,
        cost=table[best_length].cost,
        counts=_walk_back(table, best_length),
    )


def _walk_back(table: dict[int, _Cell], length: int) -> dict[int, int]:
    """Rebuild kit counts by following predecessor links back to zero."""
    counts: dict[int, int] = {}
    while length > 0:
        cell = table[length]
        if cell.kit == -1:
            break
        counts[cell.kit] = counts.get(cell.kit, 0) + 1
        length = cell.prev
    return dict(sorted(counts.items()))
