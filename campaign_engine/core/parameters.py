"""
Input value objects for the estimation engine.

``CampaignParameters`` is what the campaign wizard assembles before asking for
a forecast; ``OfferCriteria`` is the slice of an existing offer the budget
planning panel hands to the tier allocator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .exceptions import InvalidParameterError


class ContentType(str, Enum):
    """Content format a campaign asks creators to produce."""
    IMAGE = "image"
    VIDEO = "video"
    STORY = "story"
    MULTIPLE = "multiple"

    @classmethod
    def parse(cls, value: "ContentType | str") -> "ContentType":
        """Parse a content type label, rejecting unknown formats."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(c.value for c in cls)
            raise InvalidParameterError(
                f"Unknown content type '{value}'. Expected one of: {allowed}"
            ) from None


class Industry(str, Enum):
    """Business category of the advertiser."""
    RETAIL = "retail"
    RESTAURANT = "restaurant"
    FASHION = "fashion"
    BEAUTY = "beauty"
    TECHNOLOGY = "technology"
    DEFAULT = "default"

    @classmethod
    def from_value(cls, value: "Industry | str | None") -> "Industry":
        """Map a category label to an Industry; unknown labels fall back to DEFAULT."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.DEFAULT
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.DEFAULT


def _whole_number(value):
    """Integral floats (JSON's ``14.0``) become ``int``; anything else is left for validation."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# camelCase wire name -> dataclass field
_PARAMETER_ALIASES = {
    "budgetPerCreator": "budget_per_creator",
    "creatorCount": "creator_count",
    "averageFollowers": "average_followers",
    "averageEngagementPercent": "average_engagement_percent",
    "campaignDurationDays": "campaign_duration_days",
    "contentType": "content_type",
    "industry": "industry",
}

# Offer draft key -> (parameter field, value used when the key is absent)
_OFFER_FIELDS = {
    "reward": ("budget_per_creator", 500.0),
    "postsRequired": ("creator_count", 3),
    "minFollowers": ("average_followers", 10000),
    "minEngagement": ("average_engagement_percent", 3.0),
    "timeframe": ("campaign_duration_days", 14),
    "contentType": ("content_type", ContentType.IMAGE),
    "category": ("industry", Industry.FASHION),
}


@dataclass(frozen=True)
class CampaignParameters:
    """
    Parameters of a single estimation request.

    Numeric preconditions are checked by ``ParameterValidator`` when a
    calculator runs, so an invalid record can still be built and reported on.
    Enum fields accept plain strings and are coerced on construction.
    """
    budget_per_creator: float
    creator_count: int
    average_followers: int
    average_engagement_percent: float
    campaign_duration_days: int
    content_type: ContentType = ContentType.IMAGE
    industry: Industry = Industry.DEFAULT

    def __post_init__(self):
        object.__setattr__(self, "content_type", ContentType.parse(self.content_type))
        object.__setattr__(self, "industry", Industry.from_value(self.industry))
        for name in ("creator_count", "average_followers", "campaign_duration_days"):
            object.__setattr__(self, name, _whole_number(getattr(self, name)))

    @property
    def total_potential_reach(self) -> int:
        """Combined follower count of every creator on the campaign."""
        return self.average_followers * self.creator_count

    @property
    def total_cost(self) -> float:
        """Total spend across all creators."""
        return self.budget_per_creator * self.creator_count

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CampaignParameters":
        """
        Build parameters from a mapping using snake_case or camelCase keys.

        Raises
        ------
        InvalidParameterError
            If required keys are missing or unknown keys are present.
        """
        kwargs = {}
        unknown = []
        for key, value in data.items():
            field_name = _PARAMETER_ALIASES.get(key, key)
            if field_name not in cls.__dataclass_fields__:
                unknown.append(key)
                continue
            kwargs[field_name] = value

        errors = [f"Unknown parameter '{key}'" for key in unknown]
        required = [
            name for name, f in cls.__dataclass_fields__.items()
            if name not in ("content_type", "industry")
        ]
        errors.extend(
            f"Missing required parameter '{name}'" for name in required if name not in kwargs
        )
        if errors:
            raise InvalidParameterError(errors)

        return cls(**kwargs)

    @classmethod
    def from_offer(cls, offer: Mapping[str, Any]) -> "CampaignParameters":
        """
        Build parameters from an offer draft the way the campaign wizard does.

        Offer fields map as ``reward -> budget_per_creator``,
        ``postsRequired -> creator_count``, ``minFollowers -> average_followers``,
        ``minEngagement -> average_engagement_percent``,
        ``timeframe -> campaign_duration_days``, ``contentType`` and
        ``category -> industry``. Only absent (or null) keys take the wizard's
        starting values; a present value is passed through untouched and is
        still subject to validation.
        """
        kwargs = {}
        for offer_key, (field_name, fallback) in _OFFER_FIELDS.items():
            value = offer.get(offer_key)
            kwargs[field_name] = fallback if value is None else value

        # Rewards are stored as free-text amounts on offers
        reward = kwargs["budget_per_creator"]
        if isinstance(reward, str):
            try:
                kwargs["budget_per_creator"] = float(reward.replace("$", "").replace(",", ""))
            except ValueError:
                raise InvalidParameterError(f"Offer reward '{reward}' is not a number") from None

        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Serialise with the camelCase field names used by the display layer."""
        return {
            "budgetPerCreator": self.budget_per_creator,
            "creatorCount": self.creator_count,
            "averageFollowers": self.average_followers,
            "averageEngagementPercent": self.average_engagement_percent,
            "campaignDurationDays": self.campaign_duration_days,
            "contentType": self.content_type.value,
            "industry": self.industry.value,
        }


@dataclass(frozen=True)
class OfferCriteria:
    """Existing offer criteria used as the floor for budget recommendations."""
    min_followers: int
    min_engagement: float
    content_type: str
    timeframe: int

    def __post_init__(self):
        object.__setattr__(self, "min_followers", _whole_number(self.min_followers))
        object.__setattr__(self, "timeframe", _whole_number(self.timeframe))

    @classmethod
    def from_offer(cls, offer: Mapping[str, Any]) -> "OfferCriteria":
        """Extract criteria from an offer record (camelCase keys)."""
        missing = [
            key for key in ("minFollowers", "minEngagement", "contentType", "timeframe")
            if offer.get(key) is None
        ]
        if missing:
            raise InvalidParameterError(
                [f"Offer is missing '{key}'" for key in missing]
            )
        return cls(
            min_followers=offer["minFollowers"],
            min_engagement=offer["minEngagement"],
            content_type=str(offer["contentType"]),
            timeframe=offer["timeframe"],
        )

    def to_dict(self) -> dict:
        return {
            "minFollowers": self.min_followers,
            "minEngagement": self.min_engagement,
            "contentType": self.content_type,
            "timeframe": self.timeframe,
        }
