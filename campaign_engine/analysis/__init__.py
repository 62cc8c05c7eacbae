"""Reporting helpers and the demo scenario for estimation results."""

from .reporting import (
    ReportGenerator,
    format_compact,
    format_interval,
    summarize_forecast,
    summarize_budget,
)
from .demo import DemoScenario, create_demo_scenario, run_full_demo

__all__ = [
    "ReportGenerator",
    "format_compact",
    "format_interval",
    "summarize_forecast",
    "summarize_budget",
    # Demo
    "DemoScenario",
    "create_demo_scenario",
    "run_full_demo",
]
