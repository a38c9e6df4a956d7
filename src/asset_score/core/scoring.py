"""Composite quality score for crypto assets."""
from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from pydantic import BaseModel, Field

from ..config import get_settings
from .models import Asset, SentimentData, Score, SlippageTier, is_present
from .slippage import SCORE_MAX_VALUE, liquidity_from_slippage

logger = logging.getLogger(__name__)

SCORE_UNDEFINED = 0.0
# Bitcoin is compared against 80% of its own all-time-high volume.
BTC_ATH_VOLUME_SHARE = 0.8
SENTIMENT_BASE = SCORE_MAX_VALUE / 2
# Spreads the [-10, 10] sentiment * reach product over [0, 100].
SENTIMENT_RANGE_FACTOR = SENTIMENT_BASE / 10


class ScoreWeights(BaseModel):
    """Relative weight of each sub-score in the total."""

    volume: int = Field(1, ge=0)
    liquidity: int = Field(2, ge=0)
    exchanges: int = Field(1, ge=0)
    supply: int = Field(1, ge=0)
    social: int = Field(2, ge=0)

    model_config = {
        "frozen": True,
    }

    @property
    def total(self) -> int:
        return self.volume + self.liquidity + self.exchanges + self.supply + self.social


WEIGHTS = ScoreWeights()


def round_score(value: float) -> float:
    """Round to 2 decimals: ``value * 100`` rounded half away from zero, then divided by 100.

    The half test applies to the float product, so 1.005 (100.49999999999999
    after scaling) rounds down to 1.0 while 33.335 (exactly 3333.5) rounds up.
    """

    if not math.isfinite(value):
        return value
    scaled = value * 100
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 100


def volume_score(asset: Asset, volume_ath_btc: float | None, volume_btc: float | None) -> float:
    if not (
        is_present(asset.market_cap_usd)
        and is_present(asset.volume_24h_usd)
        and is_present(volume_ath_btc)
        and is_present(volume_btc)
    ):
        return SCORE_UNDEFINED

    if asset.asset_id == get_settings().bitcoin_asset_id:
        score = (asset.volume_24h_usd / (BTC_ATH_VOLUME_SHARE * volume_ath_btc)) * SCORE_MAX_VALUE
    else:
        score = (asset.volume_24h_usd / volume_btc) * SCORE_MAX_VALUE
    # Capped from above only; a negative volume stays negative.
    return min(score, SCORE_MAX_VALUE)


def exchanges_score(asset: Asset) -> float:
    """Average nested exchange score over ALL listings.

    Listings without a nested ``total_score`` add nothing to the sum but still
    count in the denominator.
    """

    listings = asset.exchanges_data
    if not listings:
        return SCORE_UNDEFINED
    total = 0.0
    for listing in listings:
        exchange = listing.exchange
        nested = exchange.exchange_score if exchange is not None else None
        if nested is not None and is_present(nested.total_score):
            total += nested.total_score
    return total / len(listings)


def asset_liquidity_score(asset: Asset) -> float:
    """Liquidity from the asset-wide slippage; requires at least one listing."""

    if not asset.exchanges_data:
        return SCORE_UNDEFINED
    return liquidity_from_slippage(
        asset.slippage_at(SlippageTier.USD_10K),
        asset.slippage_at(SlippageTier.USD_100K),
        asset.slippage_at(SlippageTier.USD_1M),
    )


def supply_score(asset: Asset) -> float:
    tokenomics = asset.tokenomics
    if tokenomics is None:
        return SCORE_UNDEFINED
    if not (is_present(tokenomics.circulating_supply) and is_present(tokenomics.total_supply)):
        return SCORE_UNDEFINED
    return (tokenomics.circulating_supply / tokenomics.total_supply) * SCORE_MAX_VALUE


def sentiment_score(sentiment_data: SentimentData | None) -> float:
    """Sentiment shifted around 50; within [0, 100] only for in-range inputs."""

    if sentiment_data is None:
        return SCORE_UNDEFINED
    return SENTIMENT_BASE + (
        sentiment_data.weighted_sentiment
        * sentiment_data.social_volume_normalization_factor
        * SENTIMENT_RANGE_FACTOR
    )


def compute_score(
    asset: Asset | Mapping[str, Any],
    sentiment_data: SentimentData | Mapping[str, Any] | None,
    volume_ath_btc: float | None,
    volume_btc: float | None,
) -> Score:
    """Return the composite score of ``asset``.

    Every sub-score falls back to 0 when its inputs are missing, and that 0
    still takes part in the weighted average.
    """

    if not isinstance(asset, Asset):
        asset = Asset.model_validate(asset)
    if sentiment_data is not None and not isinstance(sentiment_data, SentimentData):
        sentiment_data = SentimentData.model_validate(sentiment_data)

    volume = volume_score(asset, volume_ath_btc, volume_btc)
    exchanges = exchanges_score(asset)
    liquidity = asset_liquidity_score(asset)
    supply = supply_score(asset)
    social = sentiment_score(sentiment_data)

    total = (
        WEIGHTS.volume * volume
        + WEIGHTS.liquidity * liquidity
        + WEIGHTS.exchanges * exchanges
        + WEIGHTS.supply * supply
        + WEIGHTS.social * social
    ) / WEIGHTS.total

    logger.debug(
        "Scored %s: total=%.4f volume=%.4f liquidity=%.4f exchanges=%.4f supply=%.4f sentiment=%.4f",
        asset.asset_id,
        total,
        volume,
        liquidity,
        exchanges,
        supply,
        social,
    )

    return Score(
        total_score=round_score(total),
        volume_score=round_score(volume),
        real_liquidity_score=round_score(liquidity),
        exchanges_score=round_score(exchanges),
        supply_score=round_score(supply),
        sentiment_score=round_score(social),
    )
