"""
Community prayer requests (an extension row of a post).
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from widget_core.community.profile import CommunityProfileSummary


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CommunityPrayerUrgency(str, Enum):
    URGENT = "urgent"
    NORMAL = "normal"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class CommunityPrayerCategory(str, Enum):
    HEALTH = "health"
    FAMILY = "family"
    WORK = "work"
    ANXIETY = "anxiety"
    FINANCES = "finances"
    RELATIONSHIPS = "relationships"
    SPIRITUAL = "spiritual"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class CommunityPrayerRequest(BaseModel):
    post_id: UUID
    category: CommunityPrayerCategory = CommunityPrayerCategory.OTHER
    urgency: CommunityPrayerUrgency = CommunityPrayerUrgency.NORMAL
    duration_days: int = 7
    expires_at: Optional[datetime] = None
    is_answered: bool = False
    answered_at: Optional[datetime] = None
    answered_note: Optional[str] = None
    prayer_count: int = 0
    created_at: datetime = Field(default_factory=_utcnow)

    # Joined data from posts
    post: Optional[Dict[str, Any]] = None
    prayer_circle: Optional[List[CommunityProfileSummary]] = None

    @property
    def id(self) -> UUID:
        return self.post_id

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at < (now or _utcnow())

    def is_active(self, now: Optional[datetime] = None) -> bool:
        return not self.is_answered and not self.is_expired(now)

    def days_remaining(self, now: Optional[datetime] = None) -> Optional[int]:
        if self.expires_at is None:
            return None
        delta = self.expires_at - (now or _utcnow())
        return max(0, delta.days)

    def days_since_created(self, now: Optional[datetime] = None) -> int:
        return ((now or _utcnow()) - self.created_at).days
