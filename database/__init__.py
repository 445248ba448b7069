"""
Database module - exports for the dashboard services
"""
from database.db import init_db, close_db, get_connection

from database.methods import (
    # Promoters
    get_promoter,
    # Campaigns
    get_assigned_campaigns, get_campaign,
)
