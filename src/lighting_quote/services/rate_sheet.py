"""
Rate Sheet - Quote sweep across a range of footages.

Runs the engine for each footage and collects the results in a
DataFrame, for price lists and for checking where tier breaks and
kit changes land.
"""
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from ..engine.models import PricingConfig, QuoteRequest
from ..engine.quote_engine import MAX_FOOTAGE, QuoteEngine, compute_quote
from .quote_summary import describe_kits

RATE_SHEET_COLUMNS = [
    'footage', 'tier', 'rate', 'core_revenue', 'customer_total', 'materials_cost',
    'profit', 'deposit_due', 'lift_total', 'kit_footage', 'leftover', 'kits', 'min_applied',
]


def footage_range(start: int = 0, stop: int = MAX_FOOTAGE, step: int = 25) -> list[int]:
    """Footages from start to stop inclusive, clamped to the engine's 0..400."""
    start = min(max(int(start), 0), MAX_FOOTAGE)
    stop = min(max(int(stop), 0), MAX_FOOTAGE)
    step = max(int(step), 1)
    footages = list(range(start, stop + 1, step))
    if footages and footages[-1] != stop and stop > start:
        footages.append(stop)
    return footages


def build_rate_sheet(
    config: Optional[PricingConfig] = None,
    footages: Optional[Iterable[int]] = None,
    engine: Optional[QuoteEngine] = None,
) -> pd.DataFrame:
    """
    Build a rate sheet.

    Args:
        config: Pricing inputs; the engine's default config when omitted
        footages: Footages to quote; 0..400 in 25 ft steps when omitted
        engine: Engine supplying the default config

    Returns:
        DataFrame with one row per footage (columns in RATE_SHEET_COLUMNS)
    """
    if config is None:
        config = (engine or QuoteEngine()).default_config
    if footages is None:
        footages = footage_range()

    rows = []
    for footage in footages:
        quote = compute_quote(QuoteRequest(footage=footage), config)
        rows.append({
            'footage': quote.applied_footage,
            'tier': quote.tier_label,
            'rate': quote.tier_rate,
            'core_revenue': quote.core_revenue,
            'customer_total': quote.customer_total,
            'materials_cost': quote.materials_cost,
            'profit': quote.profit,
            'deposit_due': quote.deposit_due,
            'lift_total': quote.lift_total,
            'kit_footage': quote.total_kit_footage,
            'leftover': quote.leftover_footage,
            'kits': ", ".join(describe_kits(quote)),
            'min_applied': quote.min_applied,
        })

    return pd.DataFrame(rows, columns=RATE_SHEET_COLUMNS)


def export_rate_sheet(df: pd.DataFrame, path: Path) -> Path:
    """Write the rate sheet to CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    return path
