"""
Quote summary tests: currency formatting, badges and labelled stats.
"""
import os
import sys
from dataclasses import replace
from pathlib import Path

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from lighting_quote.config.settings import Settings
from lighting_quote.engine import MinimumRule, QuoteRequest, compute_quote
from lighting_quote.services.quote_summary import (
    build_badges,
    build_stats,
    deposit_label,
    format_currency,
    format_minimum,
    summarize_quote,
)


@pytest.fixture
def cfg():
    return Settings(project_root=Path(__file__).parent).pricing_config()


@pytest.mark.parametrize("value, expected", [
    (1234.5, "$1,234.50"),
    (3303.564, "$3,303.56"),
    (-12.5, "-$12.50"),
    (0, "$0.00"),
    (-0.001, "$0.00"),
    (None, "$0.00"),
])
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_minimum_drops_whole_cents():
    assert format_minimum(2000) == "$2,000"
    assert format_minimum(1999.5) == "$1,999.50"


def test_badges_with_minimum_and_lift(cfg):
    quote = compute_quote(QuoteRequest(footage=50), cfg)
    badges = build_badges(quote, cfg)
    
    assert [b["text"] for b in badges] == ["Under 100 ft", "$2,000 minimum applied", "Lift: 1 day(s)"]
    assert [b["intent"] for b in badges] == ["ok", "warn", "ok"]


def test_badges_without_lift(cfg):
    config = replace(cfg, use_lift=False)
    quote = compute_quote(QuoteRequest(footage=159), config)
    badges = build_badges(quote, config)
    
    assert badges == [
        {"text": "100–199 ft", "intent": "ok"},
        {"text": "Lift: Off", "intent": "muted"},
    ]


def test_badges_with_unset_rule_values_and_lift_days(cfg):
    config = replace(cfg, lift_days=None, min_rule=MinimumRule(threshold_ft=None, minimum=None))
    quote = compute_quote(QuoteRequest(footage=50), config)

    assert [b["text"] for b in build_badges(quote, config)] == [
        "Under 100 ft",
        "$2,000 minimum applied",
        "Lift: 0 day(s)",
    ]


def test_deposit_label(cfg):
    assert deposit_label(cfg) == "Deposit (kits + lift × 1.10)"
    assert deposit_label(replace(cfg, use_lift=False)) == "Deposit (kits × 1.10)"


def test_stats_order_and_values(cfg):
    quote = compute_quote(QuoteRequest(footage=159), cfg)
    stats = build_stats(quote)
    by_label = {s["label"]: s["value"] for s in stats}
    
    assert [s["label"] for s in stats] == [
        "Requested footage", "Applied rate", "Core revenue", "Customer total",
        "Materials cost", "Profit (excl. lift)", "Total kit footage",
        "Leftover inventory", "Lift total",
    ]
    assert [s["label"] for s in stats if s["highlight"]] == ["Customer total"]
    assert by_label["Requested footage"] == "159 ft"
    assert by_label["Applied rate"] == "$25.00/ft"
    assert by_label["Customer total"] == "$4,464.00"
    assert by_label["Leftover inventory"] == "41 ft"


def test_summarize_quote(cfg):
    quote = compute_quote(QuoteRequest(footage=250), cfg)
    summary = summarize_quote(quote, cfg)
    
    assert summary["deposit_due"] == "$4,417.91"
    assert summary["kits"] == ["1 × 100 ft", "1 × 150 ft"]
    assert len(summary["stats"]) == 9
