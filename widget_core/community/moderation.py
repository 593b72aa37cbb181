"""
Content reports and the moderation queue ordering.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from widget_core.community.profile import CommunityProfileSummary, GroupSummary


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReportTargetType(str, Enum):
    POST = "post"
    COMMENT = "comment"
    USER = "user"
    GROUP = "group"
    ROOM = "room"
    MESSAGE = "message"

    @property
    def display_name(self) -> str:
        if self is ReportTargetType.ROOM:
            return "Live Room"
        return self.value.capitalize()


class ReportReason(str, Enum):
    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE = "hate"
    MISINFORMATION = "misinformation"
    SELF_HARM = "self_harm"
    INAPPROPRIATE = "inappropriate"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _REASON_INFO[self][0]

    @property
    def description(self) -> str:
        return _REASON_INFO[self][1]

    @property
    def priority(self) -> int:
        """Moderation queue priority; lower is reviewed first."""
        return _REASON_INFO[self][2]


_REASON_INFO = {
    ReportReason.SPAM: ("Spam", "Unwanted commercial content or repetitive posts", 6),
    ReportReason.HARASSMENT: ("Harassment", "Bullying, threats, or targeted harassment", 3),
    ReportReason.HATE: ("Hate Speech", "Content promoting hatred against groups", 2),
    ReportReason.MISINFORMATION: ("Misinformation", "False or misleading information", 4),
    ReportReason.SELF_HARM: ("Self-Harm Content", "Content promoting self-harm or suicide", 1),
    ReportReason.INAPPROPRIATE: ("Inappropriate Content", "Content not appropriate for this community", 5),
    ReportReason.OTHER: ("Other", "Something else not listed above", 7),
}


class ReportStatus(str, Enum):
    PENDING = "pending"
    REVIEWING = "reviewing"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"

    @property
    def display_name(self) -> str:
        if self is ReportStatus.REVIEWING:
            return "Under Review"
        return self.value.capitalize()


class Report(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    reporter_id: UUID
    target_type: ReportTargetType
    target_id: UUID
    reason: ReportReason
    description: Optional[str] = None
    status: ReportStatus = ReportStatus.PENDING
    # Free-form classifier output; never read from or written to the wire
    ai_flags: Optional[Dict[str, Any]] = Field(default=None, exclude=True)
    assigned_to: Optional[UUID] = None
    resolution: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)
    resolved_at: Optional[datetime] = None

    # Joined data, decoded but not encoded
    reporter: Optional[CommunityProfileSummary] = Field(default=None, exclude=True)
    target_post: Optional[Dict[str, Any]] = Field(default=None, exclude=True)
    target_comment: Optional[Dict[str, Any]] = Field(default=None, exclude=True)
    target_user: Optional[CommunityProfileSummary] = Field(default=None, exclude=True)
    target_group: Optional[GroupSummary] = Field(default=None, exclude=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "Report":
        payload = {k: v for k, v in data.items() if k != "ai_flags"}
        return cls.model_validate(payload)

    @property
    def is_pending(self) -> bool:
        return self.status == ReportStatus.PENDING

    @property
    def is_resolved(self) -> bool:
        return self.status in (ReportStatus.RESOLVED, ReportStatus.DISMISSED)


class CreateReportRequest(BaseModel):
    target_type: ReportTargetType
    target_id: UUID
    reason: ReportReason
    description: Optional[str] = None


def moderation_queue(reports: List[Report]) -> List[Report]:
    """Pending and in-review reports, most urgent reason first, oldest first within a reason."""
    open_reports = [r for r in reports if not r.is_resolved]
    return sorted(open_reports, key=lambda r: (r.reason.priority, r.created_at))
