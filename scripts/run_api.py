#!/usr/bin/env python
"""
Run the Lighting Quote API with uvicorn.

Usage:
    python scripts/run_api.py [--host 127.0.0.1] [--port 8000] [--reload] [--defaults pricing_defaults.json]
"""
import argparse
import os
import sys
from pathlib import Path

import uvicorn

# Add src to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from lighting_quote.config.settings import DEFAULTS_ENV_VAR

APP = "lighting_quote.api.main:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the lighting quote API")
    parser.add_argument('--host', default='127.0.0.1')
    parser.add_argument('--port', type=int, default=8000)
    parser.add_argument('--reload', action='store_true', help="Restart on source changes")
    parser.add_argument('--defaults', type=Path, help="JSON file with pricing defaults")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.defaults is not None:
        if not args.defaults.exists():
            print(f"ERROR: defaults file not found at {args.defaults}")
            return 1
        # Read by Settings in the server process
        os.environ[DEFAULTS_ENV_VAR] = str(args.defaults.resolve())

    print(f"Starting Lighting Quote API on http://{args.host}:{args.port}")
    try:
        uvicorn.run(
            APP,
            host=args.host,
            port=args.port,
            reload=args.reload,
            app_dir=str(project_root / 'src'),
        )
    except KeyboardInterrupt:
        print("\nAPI stopped.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
