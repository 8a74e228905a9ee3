"""
Quote Engine - Core quote computation with traceability.

Turns a footage request and a PricingConfig into a Quote:
- Footage clamped to 0..400 whole feet
- Tier rate chosen by footage bracket
- Least-cost kit cover for the footage
- Minimum invoice rule for small jobs
- Lift rental passed through to the customer and the deposit
- Deposit and profit, rounded once to the cent

compute_quote is pure: no I/O, no shared state, never raises.
"""
import logging
import math
from decimal import Decimal
from typing import Any, Optional

from .kit_solver import solve_kit_cover
from .models import MinimumRule, PricingConfig, Quote, QuoteRequest, TraceStep
from .money import DEPOSIT_MULTIPLIER, ZERO, format_number, round2, to_decimal

logger = logging.getLogger(__name__)

MAX_FOOTAGE = 400

# Tier brackets are fixed by the business, only the rates are configurable
TIER_UNDER_100 = 100
TIER_UNDER_200 = 200
LABEL_UNDER_100 = "Under 100 ft"
LABEL_UNDER_200 = "100–199 ft"
LABEL_200_PLUS = "200 ft+"


def normalize_footage(value: Any) -> int:
    """Clamp any footage input to a whole number of feet in 0..400."""
    if isinstance(value, int):
        # Ints beyond float range would overflow below
        return min(max(int(value), 0), MAX_FOOTAGE)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(number):
        return 0
    number = min(max(number, 0.0), float(MAX_FOOTAGE))
    return int(math.floor(number))


def select_tier(footage: int, config: PricingConfig) -> tuple[str, Decimal]:
    """Return (label, rate per foot) for the footage bracket."""
    if footage < TIER_UNDER_100:
        return LABEL_UNDER_100, to_decimal(config.rate_under_100)
    if footage < TIER_UNDER_200:
        return LABEL_UNDER_200, to_decimal(config.rate_under_200)
    return LABEL_200_PLUS, to_decimal(config.rate_200_plus)


def apply_minimum_rule(footage: int, revenue: Decimal, rule: Optional[MinimumRule]) -> tuple[Decimal, bool]:
    """
    Apply the minimum invoice rule.

    The rule fires only for 0 < footage < threshold; a zero-footage quote
    is never lifted to the minimum. A threshold or minimum left as None
    uses the rule's defaults.
    """
    if rule is None or not rule.enabled:
        return revenue, False
    threshold = rule.effective_threshold
    if not (0 < footage < threshold):
        return revenue, False
    return max(revenue, rule.effective_minimum), True


def lift_total(config: PricingConfig) -> Decimal:
    """Lift rental for the job, or zero when the lift is off."""
    if not config.use_lift:
        return ZERO
    return to_decimal(config.lift_rental_per_day) * to_decimal(config.lift_days)


def compute_quote(request: Any, config: Optional[PricingConfig] = None) -> Quote:
    """
    Calculate a quote with full traceability.

    Args:
        request: QuoteRequest (a bare footage value is also accepted)
        config: Business inputs; an empty PricingConfig when omitted

    Returns:
        Quote dataclass with money rounded to the cent and a resolution trace
    """
    config = config or PricingConfig()
    trace: list[TraceStep] = []

    raw_footage = request.footage if isinstance(request, QuoteRequest) else request
    footage = normalize_footage(raw_footage)
    if isinstance(raw_footage, (int, float)) and raw_footage == footage:
        trace.append(TraceStep("Footage", "Requested footage", f"{footage} ft"))
    else:
        logger.debug("Footage %r normalized to %d", raw_footage, footage)
        trace.append(TraceStep("Footage", f"Normalized requested footage {raw_footage!r}", f"{footage} ft"))

    tier_label, tier_rate = select_tier(footage, config)
    trace.append(TraceStep("Tier", tier_label, f"${tier_rate:.2f}/ft"))

    kits = config.sorted_kits()
    cover = solve_kit_cover(footage, kits)
    if not cover.covered:
        trace.append(TraceStep("Kit Cover", "No kits in catalog, materials not priced"))
    elif cover.counts:
        combo = " + ".join(f"{qty} × {size} ft" for size, qty in cover.counts.items())
        trace.append(TraceStep("Kit Cover", combo, f"${cover.cost:.2f}"))
    else:
        trace.append(TraceStep("Kit Cover", "No footage requested, no kits needed"))

    core_revenue = footage * tier_rate
    trace.append(TraceStep("Revenue", f"{footage} ft × ${tier_rate:.2f}", f"${core_revenue:.2f}"))
    core_revenue, min_applied = apply_minimum_rule(footage, core_revenue, config.min_rule)
    if min_applied:
        trace.append(TraceStep("Minimum Rule", f"Under {format_number(config.min_rule.effective_threshold)} ft minimum", f"${core_revenue:.2f}"))

    lift = lift_total(config)
    if config.use_lift:
        trace.append(TraceStep("Lift", f"{format_number(config.lift_days)} day(s) passed through", f"${lift:.2f}"))

    materials = cover.cost
    customer_total = core_revenue + lift
    deposit_base = materials + lift
    deposit_due = deposit_base * DEPOSIT_MULTIPLIER
    profit = core_revenue - materials
    trace.append(TraceStep("Deposit", "(kits + lift) × 1.10", f"${round2(deposit_due):.2f}"))

    return Quote(
        applied_footage=footage,
        tier_label=tier_label,
        tier_rate=float(tier_rate),
        core_revenue=round2(core_revenue),
        customer_total=round2(customer_total),
        materials_cost=round2(materials),
        profit=round2(profit),
        deposit_base=round2(deposit_base),
        deposit_due=round2(deposit_due),
        lift_total=round2(lift),
        total_kit_footage=cover.total_length,
        leftover_footage=max(0, cover.total_length - footage),
        kit_counts=cover.counts,
        min_applied=min_applied,
        kit_sizes=tuple(size for size, _ in kits),
        trace=tuple(trace),
    )


class QuoteEngine:
    """
    Quote engine bound to application settings.

    Supplies the configured default PricingConfig when a caller does not
    pass one. Holds no per-quote state, so one instance can serve any
    number of callers.
    """

    def __init__(self, settings=None):
        """Initialize engine with settings (loaded from the project when omitted)."""
        if settings is None:
            from ..config.settings import get_settings
            settings = get_settings()
        self.settings = settings

    @property
    def default_config(self) -> PricingConfig:
        return self.settings.pricing_config()

    def calculate(self, request: QuoteRequest, config: Optional[PricingConfig] = None) -> Quote:
        """Quote a request against ``config`` or the default config."""
        return compute_quote(request, config or self.default_config)

    def quote_footage(self, footage: Any = None) -> Quote:
        """Quote a bare footage with defaults; None uses the default footage."""
        if footage is None:
            footage = self.settings.default_footage
        return self.calculate(QuoteRequest(footage=footage))
