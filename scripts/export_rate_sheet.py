#!/usr/bin/env python
"""
Export a rate sheet (quotes across a footage range) to CSV.

Usage:
    python scripts/export_rate_sheet.py [output.csv] [--start 0] [--stop 400] [--step 25]
"""
import argparse
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from lighting_quote.engine import QuoteEngine
from lighting_quote.services.rate_sheet import build_rate_sheet, export_rate_sheet, footage_range


def main():
    parser = argparse.ArgumentParser(description="Export a lighting quote rate sheet")
    parser.add_argument('output', nargs='?', default=str(project_root / 'rate_sheet.csv'))
    parser.add_argument('--start', type=int, default=0)
    parser.add_argument('--stop', type=int, default=400)
    parser.add_argument('--step', type=int, default=25)
    args = parser.parse_args()

    engine = QuoteEngine()
    footages = footage_range(args.start, args.stop, args.step)
    print(f"Quoting {len(footages)} footages ({args.start}-{args.stop} ft, step {args.step})...")

    df = build_rate_sheet(footages=footages, engine=engine)
    path = export_rate_sheet(df, Path(args.output))

    print(f"Output: {path}")
    print()
    print(df.head(10).to_string(index=False))


if __name__ == "__main__":
    main()
