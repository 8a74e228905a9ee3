"""
Rate sheet tests: footage sweeps into a DataFrame and CSV export.
"""
import os
import sys
from pathlib import Path

import pandas as pd
import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from lighting_quote.config.settings import Settings
from lighting_quote.engine import QuoteEngine
from lighting_quote.services.rate_sheet import (
    RATE_SHEET_COLUMNS,
    build_rate_sheet,
    export_rate_sheet,
    footage_range,
)


@pytest.fixture
def engine():
    return QuoteEngine(Settings(project_root=Path(__file__).parent))


@pytest.mark.parametrize("args, expected", [
    ((0, 100, 30), [0, 30, 60, 90, 100]),
    ((-50, 9999, 100), [0, 100, 200, 300, 400]),
    ((10, 13, 0), [10, 11, 12, 13]),
    ((200, 100, 25), []),
])
def test_footage_range(args, expected):
    assert footage_range(*args) == expected


def test_default_range_covers_full_domain():
    footages = footage_range()
    
    assert footages[0] == 0
    assert footages[-1] == 400
    assert len(footages) == 17


def test_build_rate_sheet(engine):
    df = build_rate_sheet(footages=[50, 159, 250], engine=engine)
    
    assert list(df.columns) == RATE_SHEET_COLUMNS
    assert len(df) == 3
    
    rows = df.set_index('footage')
    assert bool(rows.loc[50, 'min_applied']) is True
    assert rows.loc[50, 'core_revenue'] == 2000.0
    assert rows.loc[159, 'kits'] == "1 × 200 ft"
    assert rows.loc[159, 'leftover'] == 41
    assert rows.loc[250, 'kits'] == "1 × 100 ft, 1 × 150 ft"
    assert rows.loc[250, 'tier'] == "200 ft+"


def test_build_rate_sheet_with_explicit_config(engine):
    config = engine.default_config
    
    df = build_rate_sheet(config, footages=footage_range(0, 400, 100))
    
    assert df['footage'].tolist() == [0, 100, 200, 300, 400]
    assert df['customer_total'].is_monotonic_increasing


def test_export_rate_sheet(engine, tmp_path):
    df = build_rate_sheet(footages=[0, 200, 400], engine=engine)
    
    path = export_rate_sheet(df, tmp_path / 'out' / 'rate_sheet.csv')
    loaded = pd.read_csv(path)
    
    assert path.exists()
    assert loaded['footage'].tolist() == [0, 200, 400]
    assert loaded['deposit_due'].tolist() == [537.9, 3303.56, 5722.33]
