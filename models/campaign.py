"""
Campaign Model - Typed representation of campaign documents
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any


class CampaignStatus(str, Enum):
    """Lifecycle status, derived from the campaign dates"""
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    UPCOMING = "UPCOMING"
    UNKNOWN = "UNKNOWN"


@dataclass
class Campaign:
    """Promotional campaign assigned to promoters"""
    id: str
    name: str = "N/A"
    description: str = ""
    category: str = "N/A"
    format: str = "N/A"
    objective: str = "N/A"
    reward: str = "N/A"
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    budget: float = 0
    target_samplings: int = 0
    target_scans: int = 0
    status: CampaignStatus = CampaignStatus.UNKNOWN  # never stored
    full_data: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_document(cls, doc_id: str, data: Optional[dict]) -> 'Campaign':
        """Create Campaign from a stored document"""
        from campaigns.status import to_datetime

        data = data if isinstance(data, dict) else {}
        start_date = to_datetime(data.get('startDate'))
        end_date = to_datetime(data.get('endDate'))
        categories = data.get('campaignCategries')

        return cls(
            id=doc_id,
            name=data.get('campaignName') or "N/A",
            description=data.get('description') or "",
            category=(categories[0] if isinstance(categories, list) and categories else None) or "N/A",
            format=data.get('campaignFormat') or "N/A",
            objective=data.get('campaignObjective') or "N/A",
            reward=data.get('reward') or "N/A",
            start_date=start_date,
            end_date=end_date,
            budget=data.get('campaignBudget') or 0,
            target_samplings=data.get('targetSamplings') or 0,
            target_scans=data.get('targetScans') or 0,
            full_data={**data, 'startDate': start_date, 'endDate': end_date},
        )

    def with_status(self, status: CampaignStatus) -> 'Campaign':
        """Copy of this campaign carrying the derived status"""
        return replace(self, status=status)

    def to_dict(self, include_full_data: bool = False) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "budget": self.budget,
            "targetSamplings": self.target_samplings,
            "targetScans": self.target_scans,
            "category": self.category,
            "format": self.format,
            "objective": self.objective,
            "reward": self.reward,
        }
        if include_full_data:
            # Raw document as stored, with the normalized dates rendered as ISO strings
            payload["fullData"] = {
                key: value.isoformat() if isinstance(value, datetime) else value
                for key, value in self.full_data.items()
            }
        return payload
