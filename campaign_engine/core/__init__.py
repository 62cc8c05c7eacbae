"""Core value objects and validation for the campaign estimation engine."""

from .exceptions import EstimationError, InvalidParameterError
from .parameters import CampaignParameters, ContentType, Industry, OfferCriteria
from .validation import ParameterValidator, ValidationResult

__all__ = [
    "EstimationError",
    "InvalidParameterError",
    "CampaignParameters",
    "ContentType",
    "Industry",
    "OfferCriteria",
    "ParameterValidator",
    "ValidationResult",
]
