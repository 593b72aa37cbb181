"""
Follow, block and mute relationships between community members.
"""

import calendar
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from widget_core.community.profile import CommunityProfileSummary


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FollowState(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    BLOCKED = "blocked"


class Follow(BaseModel):
    follower_id: UUID
    followee_id: UUID
    state: FollowState = FollowState.ACTIVE
    created_at: datetime = Field(default_factory=_utcnow)

    # Joined data
    follower: Optional[CommunityProfileSummary] = None
    followee: Optional[CommunityProfileSummary] = None


class FollowStatus(BaseModel):
    """Relationship between the current user and another user."""
    is_following: bool = False
    is_followed_by: bool = False
    is_pending: bool = False
    is_blocked: bool = False

    @property
    def is_mutual(self) -> bool:
        return self.is_following and self.is_followed_by


NOT_FOLLOWING = FollowStatus()


class FollowListItem(BaseModel):
    id: UUID
    profile: CommunityProfileSummary
    follow_status: FollowStatus
    followed_at: datetime


class Block(BaseModel):
    blocker_id: UUID
    blocked_id: UUID
    created_at: datetime = Field(default_factory=_utcnow)

    blocked: Optional[CommunityProfileSummary] = None


class MuteType(str, Enum):
    USER = "user"
    GROUP = "group"
    TOPIC = "topic"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class MuteDuration(str, Enum):
    ONE_HOUR = "one_hour"
    ONE_DAY = "one_day"
    ONE_WEEK = "one_week"
    ONE_MONTH = "one_month"
    FOREVER = "forever"

    @property
    def display_name(self) -> str:
        return {
            MuteDuration.ONE_HOUR: "1 hour",
            MuteDuration.ONE_DAY: "1 day",
            MuteDuration.ONE_WEEK: "1 week",
            MuteDuration.ONE_MONTH: "1 month",
            MuteDuration.FOREVER: "Forever",
        }[self]

    def expires_at(self, now: Optional[datetime] = None) -> Optional[datetime]:
        """Expiry for a mute starting at ``now``; None means it never expires."""
        if now is None:
            now = _utcnow()
        if self is MuteDuration.ONE_HOUR:
            return now + timedelta(hours=1)
        if self is MuteDuration.ONE_DAY:
            return now + timedelta(days=1)
        if self is MuteDuration.ONE_WEEK:
            return now + timedelta(weeks=1)
        if self is MuteDuration.ONE_MONTH:
            return _add_month(now)
        return None


def _add_month(moment: datetime) -> datetime:
    year = moment.year + moment.month // 12
    month = moment.month % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class Mute(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    muted_id: UUID
    mute_type: MuteType
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow)

    muted_user: Optional[CommunityProfileSummary] = None
    muted_group: Optional[Dict[str, Any]] = None

    def is_active(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return True
        return self.expires_at > (now or _utcnow())
