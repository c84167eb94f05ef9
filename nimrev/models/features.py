"""Feature bundle schema consumed by the scoring models.

Every measurement is required to be present but may be ``None`` when the
provider could not observe it. Values are never clamped or coerced; a wrongly
typed or out-of-range value fails validation with a per-field error.
"""
from typing import Annotated, Any, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ..error_handling.scan_errors import ValidationError


def _require_number(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {type(value).__name__}")
    return value


def _require_int(value: Any) -> Any:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {type(value).__name__}")
    return value


def _require_bool(value: Any) -> Any:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {type(value).__name__}")
    return value


def _require_str(value: Any) -> Any:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    return value


Number = Annotated[float, Field(allow_inf_nan=False), BeforeValidator(_require_number)]
NonNegative = Annotated[float, Field(ge=0, allow_inf_nan=False), BeforeValidator(_require_number)]
UnitInterval = Annotated[float, Field(ge=0, le=1, allow_inf_nan=False), BeforeValidator(_require_number)]
SignedUnit = Annotated[float, Field(ge=-1, le=1, allow_inf_nan=False), BeforeValidator(_require_number)]
Percent = Annotated[float, Field(ge=0, le=100, allow_inf_nan=False), BeforeValidator(_require_number)]
MentionGrowth = Annotated[float, Field(ge=-1000, allow_inf_nan=False), BeforeValidator(_require_number)]
GrowthMultiple = Annotated[float, Field(ge=-1e6, allow_inf_nan=False), BeforeValidator(_require_number)]
Integer = Annotated[int, BeforeValidator(_require_int)]
Count = Annotated[int, Field(ge=0), BeforeValidator(_require_int)]
Flag = Annotated[bool, BeforeValidator(_require_bool)]
Text = Annotated[str, BeforeValidator(_require_str)]


class FeatureGroup(BaseModel):
    """Base for all schema models: immutable, camelCase on the wire"""
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class HolderDistribution(FeatureGroup):
    top1_percent: Optional[Percent] = Field(alias="top1Percent")
    top10_percent: Optional[Percent] = Field(alias="top10Percent")
    unique_holders: Optional[Count]


class TransactionPatterns(FeatureGroup):
    bot_like_activity: Optional[UnitInterval]
    human_like_activity: Optional[UnitInterval]
    suspicious_transfers: Optional[Count]


class CrossChainActivity(FeatureGroup):
    bridge_tx_count: Optional[Count]
    multi_chain_presence: Optional[Flag]


class VolumeSpikes(FeatureGroup):
    """Volume as a multiple of baseline"""
    last_24h: Optional[NonNegative] = Field(alias="last24h")
    last_7d: Optional[NonNegative] = Field(alias="last7d")


class SocialSentiment(FeatureGroup):
    score: Optional[SignedUnit]
    mentions_24h: Optional[Count] = Field(alias="mentions24h")


class SocialMentions(FeatureGroup):
    """Mention growth over the last day, in percent"""
    growth_24h: Optional[MentionGrowth] = Field(alias="growth24h")


class WhaleActivity(FeatureGroup):
    accumulating: Optional[UnitInterval]
    selling: Optional[UnitInterval]
    new_whales: Optional[Count]


class DevelopmentActivity(FeatureGroup):
    commits: Optional[Count]
    active_devs: Optional[Count]


class MarketCapGrowth(FeatureGroup):
    """Market cap growth as a multiple"""
    last_7d: Optional[GrowthMultiple] = Field(alias="last7d")


class InfluencerActivity(FeatureGroup):
    big_followers: Optional[Count]


class SearchTrends(FeatureGroup):
    spike: Optional[NonNegative]


class NetworkEffect(FeatureGroup):
    velocity: Optional[UnitInterval]


class Transaction(FeatureGroup):
    hash: Text
    from_address: Text = Field(alias="from")
    to_address: Text = Field(alias="to")
    value: Number
    timestamp: Integer
    gas_used: Count


class Features(FeatureGroup):
    """Canonical feature bundle describing one address"""
    liquidity_ratio: Optional[NonNegative]
    holder_distribution: HolderDistribution
    contract_age_sec: Optional[Count]
    transaction_patterns: TransactionPatterns
    cross_chain_activity: CrossChainActivity
    volume_spikes: VolumeSpikes
    social_sentiment: SocialSentiment
    social_mentions: SocialMentions
    whale_activity: WhaleActivity
    development_activity: DevelopmentActivity
    market_cap_growth: MarketCapGrowth
    influencer_activity: InfluencerActivity
    search_trends: SearchTrends
    network_effect: NetworkEffect
    meme_potential: Optional[UnitInterval]
    transaction_data: Tuple[Transaction, ...] = ()

    @property
    def key_count(self) -> int:
        """Number of top-level feature fields"""
        return len(type(self).model_fields)


def parse_features(raw: Union[Features, Mapping[str, Any]]) -> Features:
    """Validate untrusted feature data.

    Args:
        raw: Mapping (camelCase or snake_case keys) or an existing bundle,
            which is dumped and validated again

    Returns:
        Features: Validated, immutable bundle

    Raises:
        ValidationError: With one detail per failing field
    """
    if isinstance(raw, Features):
        raw = raw.model_dump(by_alias=True)
    elif not isinstance(raw, Mapping):
        raise ValidationError(
            "Feature bundle must be a mapping",
            [{"field": "", "message": f"expected a mapping, got {type(raw).__name__}", "type": "model_type"}]
        )

    try:
        return Features.model_validate(dict(raw))
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e, "Feature bundle failed validation") from e
