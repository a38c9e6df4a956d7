"""Liquidity scoring from order-book slippage."""
from __future__ import annotations

from .models import Asset, ExchangeListing, SlippageTier, is_present

SCORE_MAX_VALUE = 100.0

# Unknown slippage counts as poor liquidity for the base tier.
DEFAULT_SLIPPAGE_10K = 0.25
DEFAULT_SLIPPAGE_100K = 0.5
SLIPPAGE_100K_WEIGHT = 1.5
BASE_SHARE = 0.9
TOP_SHARE = 0.1

NO_SLIPPAGE_DATA = float("-inf")


def liquidity_from_slippage(
    slippage_10k: float | None = None,
    slippage_100k: float | None = None,
    slippage_1000k: float | None = None,
) -> float:
    """Map fractional slippage at $10k/$100k/$1M into a 0-100 liquidity score.

    The $10k and $100k figures drive the base score (0-90 share of the result),
    the $1M figure only adds the top 10 points. A missing $1M figure leaves the
    top score at 0 while an explicit 0 slippage earns the full top score.
    """

    s10k = DEFAULT_SLIPPAGE_10K if slippage_10k is None else slippage_10k
    s100k = DEFAULT_SLIPPAGE_100K if slippage_100k is None else slippage_100k
    base_factor = s10k + SLIPPAGE_100K_WEIGHT * s100k

    base_score = SCORE_MAX_VALUE - base_factor * SCORE_MAX_VALUE
    top_score = 0.0
    if slippage_1000k is not None:
        top_score = SCORE_MAX_VALUE - slippage_1000k * SCORE_MAX_VALUE

    if base_score < 0:
        base_score = 0.0
    if top_score < 0:
        top_score = 0.0

    liquidity = base_score * BASE_SHARE + top_score * TOP_SHARE
    if liquidity < 0:
        liquidity = 0.0
    return liquidity


def listing_liquidity(listing: ExchangeListing) -> float:
    """Liquidity score of a single exchange listing from its own slippage figures."""

    return liquidity_from_slippage(
        listing.slippage_10000USD,
        listing.slippage_100000USD,
        listing.slippage_1000000USD,
    )


def min_slippage_at_tier(asset: Asset, usd_tier: SlippageTier | int) -> float:
    """Return the lowest listing slippage at ``usd_tier``.

    Listings without a figure at the tier are skipped; a recorded 0 counts as
    missing. Returns ``NO_SLIPPAGE_DATA`` (-inf) when no listing qualifies, so
    callers must check for it before using the value as a slippage.

    Raises:
        ValueError: ``usd_tier`` is not one of the ``SlippageTier`` values.
    """

    tier = SlippageTier(usd_tier)
    values = [listing.slippage_at(tier) for listing in asset.exchanges_data]
    present = [value for value in values if is_present(value)]
    if not present:
        return NO_SLIPPAGE_DATA
    return min(present)
