"""
Report generation for forecasts and budget allocations.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Optional, Union
import logging

from ..core.parameters import CampaignParameters
from ..forecasting.forecast_engine import CampaignForecast, Interval
from ..optimization.results import BudgetOptimization

logger = logging.getLogger(__name__)


def format_compact(value: float) -> str:
    """
    Short display form of a count: 1.2M, 22.5K, 950.

    Examples
    --------
    >>> format_compact(22500)
    '22.5K'
    >>> format_compact(950)
    '950'
    """
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if value >= 1_000:
        return f"{value / 1_000:.1f}K"
    return str(value)


def format_interval(interval: Interval) -> str:
    """Expected value followed by its range, e.g. ``22.5K (13.5K - 31.5K)``."""
    return (
        f"{format_compact(interval.expected)} "
        f"({format_compact(interval.lower)} - {format_compact(interval.upper)})"
    )


def summarize_forecast(forecast: CampaignForecast) -> str:
    """Multi-line text summary of a forecast."""
    lines = [
        "Campaign Forecast",
        "=" * 40,
        f"Reach:        {format_interval(forecast.reach)}",
        f"Engagement:   {format_interval(forecast.engagement)}",
        f"Actions:      {format_interval(forecast.clicks)}",
        f"Results:      {format_interval(forecast.conversions)}",
        f"ROI:          {forecast.roi.percentage.expected}% "
        f"({forecast.roi.percentage.lower}% to {forecast.roi.percentage.upper}%)",
        f"Net value:    ${forecast.roi.value.expected:,}",
        f"Confidence:   {forecast.confidence}%",
        "",
        f"First results after {forecast.time_to_results.first_results} days, "
        f"peak around day {forecast.time_to_results.peak_performance}, "
        f"effects last {forecast.time_to_results.longevity} days",
        "",
        f"- {forecast.insights.industry}",
        f"- {forecast.insights.content}",
        "",
        "Risks:",
    ]
    lines.extend(
        f"  [{risk.severity.value}] {risk.name}: {risk.mitigation}"
        for risk in forecast.risk_factors
    )
    lines.append("Tips:")
    lines.extend(
        f"  ({tip.impact.value} impact, {tip.difficulty.value}) {tip.tip}"
        for tip in forecast.optimization_tips
    )
    return "\n".join(lines)


def summarize_budget(optimization: BudgetOptimization) -> str:
    """Multi-line text summary of a budget allocation."""
    metrics = optimization.projected_metrics
    criteria = optimization.recommended_criteria

    lines = [
        f"Budget Allocation (${optimization.total_budget:,.2f})",
        "=" * 40,
    ]
    for name, tier in optimization.allocation.as_dict().items():
        label = name.replace("_", " ").title()
        lines.append(
            f"{label:<18} {tier.percentage:>5.0f}%  ${tier.amount:>10,.2f}  "
            f"{tier.count:>3} creators  reach {format_compact(tier.estimated_reach)}"
        )
    lines.extend([
        "",
        f"Total reach:     {format_compact(metrics.total_reach)}",
        f"Engagement:      {format_compact(metrics.estimated_engagement)}",
        f"Conversions:     {metrics.estimated_conversions}",
        f"Estimated ROI:   {metrics.estimated_roi}%",
        f"Confidence:      {metrics.confidence_score}%",
        "",
        f"Recommended: {criteria.min_followers:,}+ followers, "
        f"{criteria.min_engagement}%+ engagement, "
        f"{' + '.join(criteria.content_types)}, {criteria.ideal_timeframe} days",
    ])
    return "\n".join(lines)


class ReportGenerator:
    """
    Bundle estimation results into a report.

    Supports:
    - Summary dictionaries for programmatic access
    - JSON files for export
    - Plain-text summaries for the terminal
    """

    def __init__(
        self,
        parameters: Optional[CampaignParameters] = None,
        forecast: Optional[CampaignForecast] = None,
        optimization: Optional[BudgetOptimization] = None,
    ):
        if forecast is None and optimization is None:
            raise ValueError("ReportGenerator needs a forecast, an optimization, or both")
        self.parameters = parameters
        self.forecast = forecast
        self.optimization = optimization

    def generate_summary(self) -> dict:
        """
        Generate a summary dictionary.

        Returns
        -------
        dict
            JSON-serializable report content.
        """
        summary = {
            "metadata": {"generated_at": datetime.now().isoformat()},
        }
        if self.parameters is not None:
            summary["parameters"] = self.parameters.to_dict()
        if self.forecast is not None:
            summary["forecast"] = self.forecast.to_dict()
        if self.optimization is not None:
            summary["budgetOptimization"] = self.optimization.to_dict()
        return summary

    def to_text(self) -> str:
        sections = []
        if self.forecast is not None:
            sections.append(summarize_forecast(self.forecast))
        if self.optimization is not None:
            sections.append(summarize_budget(self.optimization))
        return "\n\n".join(sections)

    def save_json(self, path: Union[str, Path]) -> Path:
        """
        Write the summary to a JSON file.

        Parameters
        ----------
        path : str or Path
            Output file path. Parent directories are created.

        Returns
        -------
        Path
            The written path.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.generate_summary(), f, indent=2)
        logger.info(f"Saved report to {path}")
        return path
