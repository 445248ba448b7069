"""
Campaigns Module - Status classification, aggregation and dashboard loading
"""
from .status import to_datetime, classify, aggregate, CampaignStats
from .progress import DistributionProgress
from .dashboard import calculate_dashboard_stats, get_campaign_details

__all__ = [
    'to_datetime',
    'classify',
    'aggregate',
    'CampaignStats',
    'DistributionProgress',
    'calculate_dashboard_stats',
    'get_campaign_details',
]
