"""Composite quality scoring for crypto assets."""
from .core.models import (
    Asset,
    Exchange,
    ExchangeListing,
    ExchangeScore,
    QualityTag,
    Score,
    SentimentData,
    SlippageTier,
    Tokenomics,
)
from .core.scoring import WEIGHTS, ScoreWeights, compute_score
from .core.slippage import NO_SLIPPAGE_DATA, liquidity_from_slippage, listing_liquidity, min_slippage_at_tier

__all__ = [
    "Asset",
    "Exchange",
    "ExchangeListing",
    "ExchangeScore",
    "NO_SLIPPAGE_DATA",
    "QualityTag",
    "Score",
    "ScoreWeights",
    "SentimentData",
    "SlippageTier",
    "Tokenomics",
    "WEIGHTS",
    "compute_score",
    "liquidity_from_slippage",
    "listing_liquidity",
    "min_slippage_at_tier",
]
