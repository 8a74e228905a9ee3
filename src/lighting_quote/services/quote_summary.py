"""
Quote Summary - Display-ready figures for a Quote.

The engine returns raw numbers; this module turns them into the labelled
statistics, badges and currency strings a front end shows.
"""
from typing import Any

from ..engine.models import PricingConfig, Quote
from ..engine.money import format_number, round2


def format_currency(value: Any) -> str:
    """Format an amount as US dollars, e.g. $1,234.56 or -$12.50."""
    amount = round2(value) + 0.0  # folds -0.0 into 0.0
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def format_minimum(value: Any) -> str:
    """Whole-dollar minimums drop the cents ($2,000 rather than $2,000.00)."""
    amount = round2(value)
    if amount == int(amount):
        return f"${int(amount):,}"
    return format_currency(amount)


def build_badges(quote: Quote, config: PricingConfig) -> list[dict]:
    """Tier, minimum-rule and lift badges with their intent (ok/warn/muted)."""
    badges = [{"text": quote.tier_label, "intent": "ok"}]
    if quote.min_applied and config.min_rule is not None:
        badges.append({
            "text": f"{format_minimum(config.min_rule.effective_minimum)} minimum applied",
            "intent": "warn",
        })
    if config.use_lift:
        badges.append({"text": f"Lift: {format_number(config.lift_days)} day(s)", "intent": "ok"})
    else:
        badges.append({"text": "Lift: Off", "intent": "muted"})
    return badges


def deposit_label(config: PricingConfig) -> str:
    return "Deposit (kits + lift × 1.10)" if config.use_lift else "Deposit (kits × 1.10)"


def build_stats(quote: Quote) -> list[dict]:
    """Labelled statistics in display order."""
    return [
        {"label": "Requested footage", "value": f"{quote.applied_footage} ft", "highlight": False},
        {"label": "Applied rate", "value": f"{format_currency(quote.tier_rate)}/ft", "highlight": False},
        {"label": "Core revenue", "value": format_currency(quote.core_revenue), "highlight": False},
        {"label": "Customer total", "value": format_currency(quote.customer_total), "highlight": True},
        {"label": "Materials cost", "value": format_currency(quote.materials_cost), "highlight": False},
        {"label": "Profit (excl. lift)", "value": format_currency(quote.profit), "highlight": False},
        {"label": "Total kit footage", "value": f"{quote.total_kit_footage} ft", "highlight": False},
        {"label": "Leftover inventory", "value": f"{quote.leftover_footage} ft", "highlight": False},
        {"label": "Lift total", "value": format_currency(quote.lift_total), "highlight": False},
    ]


def describe_kits(quote: Quote) -> list[str]:
    return [f"{qty} × {size} ft" for size, qty in quote.kit_counts.items()]


def summarize_quote(quote: Quote, config: PricingConfig) -> dict:
    """Everything a results panel needs, as plain JSON-ready data."""
    return {
        "badges": build_badges(quote, config),
        "deposit_label": deposit_label(config),
        "deposit_due": format_currency(quote.deposit_due),
        "stats": build_stats(quote),
        "kits": describe_kits(quote),
    }
