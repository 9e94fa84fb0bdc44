"""Transaction risk scoring.

The score is a sum of independent factors, each contributing a fixed
weight when its condition holds:
  - large amount:     amount > amount_threshold       (+5 by default)
  - foreign currency: currency != home_currency       (+3 by default)

New factors can be appended to RISK_FACTORS without changing the scores
existing factors produce. The total never goes below zero.
"""

import logging
from typing import Callable

from finrecord.models import RiskConfig, RiskFactors

logger = logging.getLogger(__name__)


def large_amount(details: RiskFactors, config: RiskConfig) -> int:
    """Weight for transactions above the amount threshold."""
    if details.amount > config.amount_threshold:
        return config.large_amount_weight
    return 0


def foreign_currency(details: RiskFactors, config: RiskConfig) -> int:
    """Weight for transactions not in the home currency."""
    if details.currency != config.home_currency:
        return config.foreign_currency_weight
    return 0


RISK_FACTORS: tuple[Callable[[RiskFactors, RiskConfig], int], ...] = (
    large_amount,
    foreign_currency,
)


def calculate_risk_score(details: RiskFactors, config: RiskConfig) -> int:
    """Sum every risk factor's contribution, floored at zero."""
    score = sum(factor(details, config) for factor in RISK_FACTORS)
    score = max(score, 0)

    logger.info(f"Risk score computed: {score}")
    return score
