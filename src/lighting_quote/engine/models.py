"""
Data models for the quote engine.

Uses dataclasses for structured, type-safe data representation.
Config and results are frozen: the engine never mutates what it is given
and callers never mutate what it returns.
"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .money import to_decimal

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD_FT = 75
DEFAULT_MINIMUM = 2000.0


def freeze_counts(counts: Optional[Mapping[int, int]]) -> Mapping[int, int]:
    """Read-only copy of a kit size → quantity mapping."""
    return MappingProxyType(dict(counts or {}))


@dataclass(frozen=True)
class TraceStep:
    """A single step in the quote resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class MinimumRule:
    """
    Minimum invoice charge for small jobs below a footage threshold.

    A threshold or minimum left as None falls back to 75 ft / $2,000.
    """
    enabled: bool = True
    threshold_ft: Optional[int] = DEFAULT_THRESHOLD_FT
    minimum: Optional[float] = DEFAULT_MINIMUM

    @property
    def effective_threshold(self) -> Decimal:
        if self.threshold_ft is None:
            return Decimal(DEFAULT_THRESHOLD_FT)
        return to_decimal(self.threshold_ft)

    @property
    def effective_minimum(self) -> Decimal:
        if self.minimum is None:
            return to_decimal(DEFAULT_MINIMUM)
        return to_decimal(self.minimum)


@dataclass(frozen=True)
class PricingConfig:
    """Business inputs for one quote: rates, kit catalog, lift and minimum rule."""
    kit_costs: dict[int, float] = field(default_factory=dict)  # kit length (ft) → cost
    rate_under_100: Optional[float] = 0.0
    rate_under_200: Optional[float] = 0.0
    rate_200_plus: Optional[float] = 0.0
    use_lift: bool = False
    lift_rental_per_day: Optional[float] = 0.0
    lift_days: Optional[int] = 0
    min_rule: Optional[MinimumRule] = field(default_factory=MinimumRule)

    def sorted_kits(self) -> tuple[tuple[int, Decimal], ...]:
        """
        Normalize the kit catalog into (size, cost) pairs ordered by size.

        Sizes that are not positive whole feet are dropped. When two keys
        normalize to the same size (e.g. "100" and 100) the cheaper cost wins.
        """
        kits: dict[int, Decimal] = {}
        for raw_size, raw_cost in (self.kit_costs or {}).items():
            size = _kit_size(raw_size)
            if size is None:
                logger.debug("Ignoring kit size %r", raw_size)
                continue
            cost = to_decimal(raw_cost)
            if size not in kits or cost < kits[size]:
                kits[size] = cost
        return tuple(sorted(kits.items()))


def _kit_size(raw: Any) -> Optional[int]:
    try:
        size = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return None
    return size if size > 0 else None


@dataclass(frozen=True)
class QuoteRequest:
    """A quote request. Footage may be anything; the engine normalizes it."""
    footage: Any = 0


@dataclass(frozen=True)
class Quote:
    """Complete result of a quote calculation."""
    applied_footage: int
    tier_label: str
    tier_rate: float
    core_revenue: float
    customer_total: float
    materials_cost: float
    profit: float
    deposit_base: float
    deposit_due: float
    lift_total: float
    total_kit_footage: int
    leftover_footage: int
    kit_counts: Mapping[int, int] = field(hash=False)  # kit size → quantity, read-only
    min_applied: bool
    kit_sizes: tuple[int, ...] = ()
    trace: tuple[TraceStep, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'kit_counts', freeze_counts(self.kit_counts))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dict (kit sizes become string keys)."""
        return {
            "applied_footage": self.applied_footage,
            "tier_label": self.tier_label,
            "tier_rate": self.tier_rate,
            "core_revenue": self.core_revenue,
            "customer_total": self.customer_total,
            "materials_cost": self.materials_cost,
            "profit": self.profit,
            "deposit_base": self.deposit_base,
            "deposit_due": self.deposit_due,
            "lift_total": self.lift_total,
            "total_kit_footage": self.total_kit_footage,
            "leftover_footage": self.leftover_footage,
            "kit_counts": {str(size): qty for size, qty in self.kit_counts.items()},
            "min_applied": self.min_applied,
            "kit_sizes": list(self.kit_sizes),
            "trace": [
                {"step": t.step, "description": t.description, "value": t.value}
                for t in self.trace
            ],
        }
