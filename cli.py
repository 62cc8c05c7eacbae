#!/usr/bin/env python
"""
Command-line interface for the campaign estimation engine.

Usage:
    python cli.py forecast --budget 500 --creators 3 --followers 10000 --engagement 4 \
        --duration 14 --content-type video --industry fashion
    python cli.py allocate --budget 2500 --min-followers 8000 --content-type image
    python cli.py classify 92 71.5 40
    python cli.py classify emma=92 sophie=85 olivia=81
    python cli.py template --output engine.yaml
    python cli.py serve --port 8000
"""

import argparse
import json
import sys
import logging

import yaml

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with one subcommand per calculator."""
    parser = argparse.ArgumentParser(
        description="Campaign Estimation Engine CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Optional: Path to YAML engine configuration"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Forecast command
    forecast_parser = subparsers.add_parser("forecast", help="Forecast campaign performance")
    forecast_parser.add_argument("--budget", type=float, required=True, help="Budget per creator")
    forecast_parser.add_argument("--creators", type=int, required=True, help="Number of creators")
    forecast_parser.add_argument("--followers", type=int, required=True, help="Average followers per creator")
    forecast_parser.add_argument("--engagement", type=float, required=True, help="Average engagement (percent)")
    forecast_parser.add_argument("--duration", type=int, default=14, help="Campaign duration in days")
    forecast_parser.add_argument(
        "--content-type",
        type=str,
        choices=["image", "video", "story", "multiple"],
        default="image",
        help="Content format"
    )
    forecast_parser.add_argument("--industry", type=str, default="default", help="Advertiser industry")
    forecast_parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    forecast_parser.add_argument("--output", "-o", type=str, help="Also save a JSON report to this path")

    # Allocate command
    allocate_parser = subparsers.add_parser("allocate", help="Split a budget across creator tiers")
    allocate_parser.add_argument("--budget", type=float, required=True, help="Total budget")
    allocate_parser.add_argument("--min-followers", type=int, default=0, help="Offer's minimum followers")
    allocate_parser.add_argument("--min-engagement", type=float, default=0, help="Offer's minimum engagement")
    allocate_parser.add_argument("--content-type", type=str, default="image", help="Offer's content type")
    allocate_parser.add_argument("--timeframe", type=int, default=0, help="Offer's timeframe in days")
    allocate_parser.add_argument("--json", action="store_true", help="Print JSON instead of a summary")

    # Classify command
    classify_parser = subparsers.add_parser("classify", help="Match-quality badges for scores")
    classify_parser.add_argument(
        "scores",
        nargs="+",
        help="Scores, or creator=score pairs to rank"
    )
    classify_parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    # Template command
    template_parser = subparsers.add_parser("template", help="Print a configuration template")
    template_parser.add_argument("--output", "-o", type=str, help="Write the template to this path")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP service")
    serve_parser.add_argument("--host", type=str, default="127.0.0.1")
    serve_parser.add_argument("--port", "-p", type=int, default=8000, help="Port to listen on")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    from campaign_engine.core import InvalidParameterError

    handlers = {
        "forecast": cmd_forecast,
        "allocate": cmd_allocate,
        "classify": cmd_classify,
        "template": cmd_template,
        "serve": cmd_serve,
    }

    try:
        handlers[args.command](args)
    except InvalidParameterError as e:
        logger.error("Invalid input:")
        for error in e.errors:
            logger.error(f"  - {error}")
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


def _load_config(args):
    from campaign_engine.config import ConfigLoader, default_config

    if args.config:
        logger.info(f"Loading configuration from: {args.config}")
        return ConfigLoader.from_yaml(args.config)
    return default_config()


def cmd_forecast(args):
    """Forecast a campaign from command line."""
    from campaign_engine.analysis.reporting import ReportGenerator, summarize_forecast
    from campaign_engine.core import CampaignParameters
    from campaign_engine.forecasting import ForecastCalculator

    params = CampaignParameters(
        budget_per_creator=args.budget,
        creator_count=args.creators,
        average_followers=args.followers,
        average_engagement_percent=args.engagement,
        campaign_duration_days=args.duration,
        content_type=args.content_type,
        industry=args.industry,
    )
    forecast = ForecastCalculator(_load_config(args)).forecast(params)

    if args.json:
        print(json.dumps(forecast.to_dict(), indent=2))
    else:
        print(summarize_forecast(forecast))

    if args.output:
        ReportGenerator(parameters=params, forecast=forecast).save_json(args.output)


def cmd_allocate(args):
    """Allocate a budget from command line."""
    from campaign_engine.analysis.reporting import summarize_budget
    from campaign_engine.core import OfferCriteria
    from campaign_engine.optimization import BudgetTierAllocator

    criteria = OfferCriteria(
        min_followers=args.min_followers,
        min_engagement=args.min_engagement,
        content_type=args.content_type,
        timeframe=args.timeframe,
    )
    result = BudgetTierAllocator(_load_config(args)).allocate(args.budget, criteria)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(summarize_budget(result))


def _parse_score(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Not a match score: '{text}'") from None


def cmd_classify(args):
    """Classify (or rank) match scores from command line."""
    from campaign_engine.matching import MatchQualityClassifier

    classifier = MatchQualityClassifier(_load_config(args))

    if any("=" in item for item in args.scores):
        scores = {}
        for item in args.scores:
            creator_id, sep, score = item.partition("=")
            if not sep:
                raise ValueError(f"Expected creator=score, got '{item}'")
            scores[creator_id] = _parse_score(score)
        ranked = classifier.rank(scores)
        if args.json:
            print(json.dumps([match.to_dict() for match in ranked], indent=2))
            return
        for position, match in enumerate(ranked, start=1):
            print(f"{position:>3}. {match.creator_id:<20} {match.match_score:>6.1f}  {match.quality.label}")
        return

    qualities = [(score, classifier.classify(score)) for score in map(_parse_score, args.scores)]
    if args.json:
        print(json.dumps([{"matchScore": s, **q.to_dict()} for s, q in qualities], indent=2))
        return
    for score, quality in qualities:
        print(f"{score:>6.1f}  {quality.label:<16} {quality.rating}")


def cmd_template(args):
    """Print or save a configuration template."""
    from campaign_engine.config import ConfigLoader

    template = ConfigLoader.get_template()
    if args.output:
        ConfigLoader.to_yaml(ConfigLoader.from_dict(template), args.output)
        return
    print(yaml.dump(template, default_flow_style=False, sort_keys=False))


def cmd_serve(args):
    """Run the HTTP service with uvicorn."""
    import os
    import uvicorn
    from campaign_engine.api.server import CONFIG_ENV_VAR

    if args.config:
        os.environ[CONFIG_ENV_VAR] = args.config

    logger.info(f"Serving estimation API at http://{args.host}:{args.port}")
    uvicorn.run("campaign_engine.api.server:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
