#!/usr/bin/env python
"""
Run Campaign Estimation Engine Demo

This script runs the demo requests through every calculator without
starting the HTTP service.

Usage:
    python run_demo.py                    # Run full demo
    python run_demo.py --summary-only     # Print summaries only (no tables)
    python run_demo.py --budget 5000      # Allocate a different budget
    python run_demo.py --config FILE      # Use a YAML engine configuration

Examples:
    python run_demo.py
    python run_demo.py --summary-only --budget 10000
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from campaign_engine.analysis.demo import DEMO_BUDGET, create_demo_scenario, run_full_demo
from campaign_engine.config import ConfigLoader

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    parser = argparse.ArgumentParser(
        description="Run Campaign Estimation Engine Demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--summary-only",
        action="store_true",
        help="Print summaries only (no tables)"
    )
    parser.add_argument(
        "--budget",
        type=float,
        default=DEMO_BUDGET,
        help=f"Total budget for the allocation demo (default: {DEMO_BUDGET:g})"
    )
    parser.add_argument(
        "--config",
        type=str,
        metavar="FILE",
        help="YAML engine configuration"
    )

    args = parser.parse_args()
    config = ConfigLoader.from_yaml(args.config) if args.config else None

    if args.summary_only or args.budget != DEMO_BUDGET:
        demo = create_demo_scenario(config, total_budget=args.budget)
        demo.print_all_summaries()
        if not args.summary_only:
            for name, df in demo.get_all_dataframes().items():
                print(f"\n{name}:")
                print(df.to_string(index=False))
    else:
        run_full_demo(config)


if __name__ == "__main__":
    main()
