"""
Distribution Progress - Sampling/scan counters for a campaign detail view
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict

from models.campaign import Campaign

logger = logging.getLogger(__name__)


def _non_negative(value, label: str, campaign_id: str) -> int:
    try:
        number = int(value or 0)
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Campaign {campaign_id}: non-numeric {label} {value!r}, using 0")
        return 0
    if isinstance(value, float) and value != number:
        logger.warning(f"Campaign {campaign_id}: fractional {label} {value!r}, truncated to {number}")
    if number < 0:
        logger.warning(f"Campaign {campaign_id}: negative {label} ({number}), clamped to 0")
        return 0
    return number


@dataclass
class DistributionProgress:
    total_products: int = 0
    total_distributed: int = 0
    total_remaining: int = 0
    percent: int = 0

    @classmethod
    def for_campaign(cls, campaign: Campaign) -> 'DistributionProgress':
        products = _non_negative(campaign.target_samplings, "targetSamplings", campaign.id)
        distributed = _non_negative(campaign.target_scans, "targetScans", campaign.id)

        remaining = products - distributed
        if remaining < 0:
            logger.warning(
                f"Campaign {campaign.id}: distributed {distributed} exceeds products {products}, remaining clamped to 0"
            )
            remaining = 0

        # Half-up, so 12.5% shows as 13
        percent = math.floor(distributed / products * 100 + 0.5) if products > 0 else 0
        return cls(
            total_products=products,
            total_distributed=distributed,
            total_remaining=remaining,
            percent=percent,
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalProducts": self.total_products,
            "totalDistributed": self.total_distributed,
            "totalRemaining": self.total_remaining,
            "percent": self.percent,
        }
