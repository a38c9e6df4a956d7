"""Data models consumed and produced by the asset scoring functions."""
from __future__ import annotations

import math
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class SlippageTier(IntEnum):
    """Notional trade sizes (USD) with recorded slippage figures."""

    USD_100 = 100
    USD_1K = 1_000
    USD_10K = 10_000
    USD_100K = 100_000
    USD_1M = 1_000_000


class QualityTag(str, Enum):
    """Coarse quality tag attached to an asset listing on an exchange."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


_FROZEN = ConfigDict(frozen=True, extra="ignore")


class Tokenomics(BaseModel):
    circulating_supply: float | None = Field(None, description="Tokens currently in circulation.")
    total_supply: float | None = Field(None, description="Total token supply.")

    model_config = _FROZEN


class ExchangeScore(BaseModel):
    total_score: float | None = Field(None, description="Aggregated exchange quality score (0-100).")

    model_config = _FROZEN


class Exchange(BaseModel):
    """Reference data for a trading venue."""

    coingecko_trust_score: float | None = Field(None, description="CoinGecko trust score of the venue.")
    exchange_score: ExchangeScore | None = Field(None, description="Nested quality score used for exchange scoring.")
    quality_score: float | None = Field(None, description="Legacy flat quality score (unused by scoring).")

    model_config = _FROZEN


class ExchangeListing(BaseModel):
    """One asset listed on one exchange, with venue-specific slippage."""

    exchange: Exchange | None = Field(None, description="Venue the asset is listed on.")
    quality_score: QualityTag | None = Field(None, description="Coarse quality tag of the listing.")
    slippage_10000USD: float | None = Field(None, description="Fractional slippage for a $10k trade.")
    slippage_100000USD: float | None = Field(None, description="Fractional slippage for a $100k trade.")
    slippage_1000000USD: float | None = Field(None, description="Fractional slippage for a $1M trade.")

    model_config = _FROZEN

    def slippage_at(self, tier: SlippageTier) -> float | None:
        """Return the listing slippage recorded for ``tier`` (None for tiers below $10k)."""

        return _LISTING_SLIPPAGE[SlippageTier(tier)](self)


class Asset(BaseModel):
    """Immutable view of the market data used for scoring a token."""

    asset_id: str = Field(..., description="Asset identifier, e.g. 'bitcoin-btc'.")
    exchanges_data: tuple[ExchangeListing, ...] = Field(default=(), description="Per-exchange listings.")
    tokenomics: Tokenomics | None = Field(None, description="Supply figures, if known.")
    market_cap_usd: float | None = Field(None, description="Market capitalisation in USD.")
    volume_24h_usd: float | None = Field(None, description="Aggregated 24h trading volume in USD.")
    slippage_100USD: float | None = Field(None, description="Asset-wide fractional slippage for a $100 trade.")
    slippage_1000USD: float | None = Field(None, description="Asset-wide fractional slippage for a $1k trade.")
    slippage_10000USD: float | None = Field(None, description="Asset-wide fractional slippage for a $10k trade.")
    slippage_100000USD: float | None = Field(None, description="Asset-wide fractional slippage for a $100k trade.")
    slippage_1000000USD: float | None = Field(None, description="Asset-wide fractional slippage for a $1M trade.")

    model_config = _FROZEN

    def slippage_at(self, tier: SlippageTier) -> float | None:
        """Return the asset-wide slippage recorded for ``tier``."""

        return _ASSET_SLIPPAGE[SlippageTier(tier)](self)


class SentimentData(BaseModel):
    """Social sentiment signal for an asset.

    Ranges are a caller contract and are not validated here:
    ``weighted_sentiment`` lies in [-1, 1] and
    ``social_volume_normalization_factor`` in [0, 10].
    """

    weighted_sentiment: float = Field(..., alias="weightedSentiment")
    social_volume_normalization_factor: float = Field(..., alias="socialVolumeNormalizationFactor")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Score(BaseModel):
    """Composite score and its five sub-scores, each rounded to 2 decimals."""

    total_score: float = Field(..., description="Weighted average of the sub-scores.")
    volume_score: float = Field(..., description="Trading volume relative to the BTC reference.")
    real_liquidity_score: float = Field(..., description="Order-book liquidity derived from slippage.")
    exchanges_score: float = Field(..., description="Average quality of the listing exchanges.")
    supply_score: float = Field(..., description="Circulating vs total supply ratio.")
    sentiment_score: float = Field(..., description="Social sentiment weighted by reach.")

    model_config = {
        "frozen": True,
    }


_LISTING_SLIPPAGE = {
    SlippageTier.USD_100: lambda listing: None,
    SlippageTier.USD_1K: lambda listing: None,
    SlippageTier.USD_10K: lambda listing: listing.slippage_10000USD,
    SlippageTier.USD_100K: lambda listing: listing.slippage_100000USD,
    SlippageTier.USD_1M: lambda listing: listing.slippage_1000000USD,
}

_ASSET_SLIPPAGE = {
    SlippageTier.USD_100: lambda asset: asset.slippage_100USD,
    SlippageTier.USD_1K: lambda asset: asset.slippage_1000USD,
    SlippageTier.USD_10K: lambda asset: asset.slippage_10000USD,
    SlippageTier.USD_100K: lambda asset: asset.slippage_100000USD,
    SlippageTier.USD_1M: lambda asset: asset.slippage_1000000USD,
}


def is_present(value: float | None) -> bool:
    """Return True for a usable number: not None, not zero and not NaN."""

    return value is not None and not math.isnan(value) and value != 0
