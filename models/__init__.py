"""
Data Models - Typed dataclasses for platform entities
"""
from .campaign import Campaign, CampaignStatus
from .promoter import Promoter

__all__ = ['Campaign', 'CampaignStatus', 'Promoter']
