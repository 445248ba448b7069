"""
Campaign Status - Lifecycle classification by calendar day

Dates arrive from the document store either as structural timestamps
({"seconds": ..., "nanoseconds": ...}) or as directly parseable values.
to_datetime() is the single place that knows about those shapes; the
classification below only ever sees instants.
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional

from models.campaign import Campaign, CampaignStatus
import config

logger = logging.getLogger(__name__)


def _from_epoch(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, config.TIMEZONE)


def to_datetime(value: Any) -> Optional[datetime]:
    """Normalize an upstream date value to a datetime, or None if absent/malformed"""
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)

        if isinstance(value, dict):
            if value.get('seconds') is None:
                return None
            return _from_epoch(float(value['seconds']) + float(value.get('nanoseconds') or 0) / 1e9)
        if getattr(value, 'seconds', None) is not None:
            return _from_epoch(float(value.seconds) + float(getattr(value, 'nanoseconds', 0) or 0) / 1e9)

        if isinstance(value, (int, float)):
            # Bare numbers are epoch milliseconds
            return _from_epoch(value / 1000)

        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        logger.debug(f"Unparseable date value {value!r}: {e}")
        return None

    logger.debug(f"Unsupported date value type: {type(value).__name__}")
    return None


def _calendar_day(value: Any) -> Optional[date]:
    """Truncate to the calendar day in the configured timezone"""
    instant = to_datetime(value)
    if instant is None:
        return None
    if instant.tzinfo is not None:
        try:
            instant = instant.astimezone(config.TIMEZONE)
        except (OverflowError, ValueError) as e:
            # Instants at the edge of the supported range
            logger.debug(f"Date value {value!r} out of range in {config.TIMEZONE}: {e}")
            return None
    return instant.date()


def classify(start_date: Any, end_date: Any, now: Any = None) -> CampaignStatus:
    """Classify a campaign by comparing today against its start/end days.

    Time of day is ignored: a campaign is ACTIVE on every day from its
    start day through its end day inclusive. Missing or malformed dates
    yield UNKNOWN, as does a start day after the end day.
    """
    start = _calendar_day(start_date)
    end = _calendar_day(end_date)
    if start is None or end is None:
        return CampaignStatus.UNKNOWN

    today = _calendar_day(now if now is not None else config.get_now())
    if today is None:
        return CampaignStatus.UNKNOWN

    if today < start:
        return CampaignStatus.UPCOMING
    if start <= today <= end:
        return CampaignStatus.ACTIVE
    if today > end:
        return CampaignStatus.COMPLETED
    return CampaignStatus.UNKNOWN


@dataclass
class CampaignStats:
    """Campaigns partitioned by status, in input order"""
    active: List[Campaign] = field(default_factory=list)
    completed: List[Campaign] = field(default_factory=list)
    upcoming: List[Campaign] = field(default_factory=list)
    unknown: List[Campaign] = field(default_factory=list)

    @property
    def buckets(self) -> Dict[CampaignStatus, List[Campaign]]:
        return {
            CampaignStatus.ACTIVE: self.active,
            CampaignStatus.COMPLETED: self.completed,
            CampaignStatus.UPCOMING: self.upcoming,
            CampaignStatus.UNKNOWN: self.unknown,
        }

    @property
    def counts(self) -> Dict[str, int]:
        return {
            "assigned": len(self.active) + len(self.completed) + len(self.upcoming) + len(self.unknown),
            "active": len(self.active),
            "completed": len(self.completed),
            "upcoming": len(self.upcoming),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "campaigns": {
                "active": [c.to_dict() for c in self.active],
                "completed": [c.to_dict() for c in self.completed],
                "upcoming": [c.to_dict() for c in self.upcoming],
                "unknown": [c.to_dict() for c in self.unknown],
            },
            "stats": self.counts,
        }


def aggregate(campaigns: Iterable[Campaign], now: Any = None) -> CampaignStats:
    """Classify each campaign and partition them into status buckets.

    `now` is resolved once so every campaign is judged against the same day.
    Input campaigns are not mutated; each bucket holds copies carrying
    the derived status.
    """
    if now is None:
        now = config.get_now()

    stats = CampaignStats()
    buckets = stats.buckets
    for campaign in campaigns:
        status = classify(campaign.start_date, campaign.end_date, now)
        buckets[status].append(campaign.with_status(status))
    return stats
