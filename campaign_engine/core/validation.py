"""
Precondition checks for calculator inputs.
"""

import math
import numbers
from dataclasses import dataclass, field
import logging

from .exceptions import InvalidParameterError
from .parameters import CampaignParameters, OfferCriteria

logger = logging.getLogger(__name__)

# Campaigns longer than this are accepted but flagged
LONG_CAMPAIGN_DAYS = 90


@dataclass
class ValidationResult:
    """Result of a validation check."""
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another validation result into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        if not other.valid:
            self.valid = False

    def raise_if_invalid(self) -> None:
        """
        Log warnings and raise if any error was collected.

        Raises
        ------
        InvalidParameterError
            Carrying every collected error message.
        """
        for warning in self.warnings:
            logger.warning(warning)
        if not self.valid:
            raise InvalidParameterError(self.errors)

    def __str__(self) -> str:
        lines = ["Validation PASSED" if self.valid else "Validation FAILED"]

        if self.errors:
            lines.append(f"  Errors ({len(self.errors)}):")
            lines.extend(f"    - {err}" for err in self.errors)

        if self.warnings:
            lines.append(f"  Warnings ({len(self.warnings)}):")
            lines.extend(f"    - {warn}" for warn in self.warnings)

        return "\n".join(lines)


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integer(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    return _is_number(value) and math.isfinite(value) and float(value).is_integer()


class ParameterValidator:
    """Validate inputs before any calculator touches them."""

    def validate_parameters(self, params: CampaignParameters) -> ValidationResult:
        """
        Check every numeric precondition of a forecast request.

        Parameters
        ----------
        params : CampaignParameters
            Parameters to check.

        Returns
        -------
        ValidationResult
            All problems found; nothing is raised here.
        """
        result = ValidationResult(valid=True)

        result.merge(self._check_number("budget_per_creator", params.budget_per_creator, minimum=0))
        result.merge(self._check_integer("creator_count", params.creator_count, minimum=1))
        result.merge(self._check_integer("average_followers", params.average_followers, minimum=0))
        result.merge(self._check_number(
            "average_engagement_percent", params.average_engagement_percent, minimum=0, maximum=100,
        ))
        result.merge(self._check_integer("campaign_duration_days", params.campaign_duration_days, minimum=1))

        # ROI percentage divides by total cost
        if result.valid and params.total_cost <= 0:
            result.add_error(
                "Total campaign cost (budget_per_creator x creator_count) must be greater "
                "than zero; ROI is undefined for a free campaign"
            )

        if result.valid:
            if params.average_followers == 0:
                result.add_warning("average_followers is 0 - every reach figure will be 0")
            if params.campaign_duration_days > LONG_CAMPAIGN_DAYS:
                result.add_warning(
                    f"Campaign runs {params.campaign_duration_days} days - "
                    f"forecasts are calibrated on campaigns under {LONG_CAMPAIGN_DAYS} days"
                )

        return result

    def validate_budget(self, total_budget: float) -> ValidationResult:
        """Check that a total budget can be split and divided by."""
        result = ValidationResult(valid=True)
        if not _is_number(total_budget) or not math.isfinite(total_budget):
            result.add_error(f"total_budget must be a finite number, got {total_budget!r}")
        elif total_budget <= 0:
            result.add_error(f"total_budget must be greater than zero, got {total_budget}")
        return result

    def validate_criteria(self, criteria: OfferCriteria) -> ValidationResult:
        """Check the source criteria handed to the budget allocator."""
        result = ValidationResult(valid=True)
        result.merge(self._check_number("min_followers", criteria.min_followers, minimum=0))
        result.merge(self._check_number("min_engagement", criteria.min_engagement, minimum=0))
        result.merge(self._check_number("timeframe", criteria.timeframe, minimum=0))
        if not criteria.content_type:
            result.add_error("content_type must not be empty")
        return result

    def validate_match_score(self, match_score: float) -> ValidationResult:
        """Match scores are not clamped, but they must be orderable."""
        result = ValidationResult(valid=True)
        if not _is_number(match_score) or math.isnan(match_score):
            result.add_error(f"match_score must be a number, got {match_score!r}")
        elif not 0 <= match_score <= 100:
            result.add_warning(f"match_score {match_score} is outside 0-100")
        return result

    @staticmethod
    def _check_number(name: str, value, minimum=None, maximum=None) -> ValidationResult:
        result = ValidationResult(valid=True)
        if not _is_number(value) or not math.isfinite(value):
            result.add_error(f"{name} must be a finite number, got {value!r}")
            return result
        if minimum is not None and value < minimum:
            result.add_error(f"{name} must be >= {minimum}, got {value}")
        if maximum is not None and value > maximum:
            result.add_error(f"{name} must be <= {maximum}, got {value}")
        return result

    @classmethod
    def _check_integer(cls, name: str, value, minimum=None) -> ValidationResult:
        if not _is_integer(value):
            result = ValidationResult(valid=True)
            result.add_error(f"{name} must be a whole number, got {value!r}")
            return result
        return cls._check_number(name, value, minimum=minimum)


def require_valid_parameters(params: CampaignParameters) -> None:
    """Raise ``InvalidParameterError`` unless ``params`` satisfies every precondition."""
    ParameterValidator().validate_parameters(params).raise_if_invalid()
