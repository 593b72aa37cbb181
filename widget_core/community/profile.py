"""
Community profile summaries and small shared value types.
"""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class VerificationType(str, Enum):
    CHURCH = "church"
    LEADER = "leader"
    NOTABLE = "notable"

    @property
    def display_name(self) -> str:
        return {
            VerificationType.CHURCH: "Verified Church",
            VerificationType.LEADER: "Verified Leader",
            VerificationType.NOTABLE: "Notable Member",
        }[self]


class CommunityProfileSummary(BaseModel):
    """Profile fields joined onto follows, messages and reports."""
    id: UUID
    display_name: str
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    is_verified: bool = False
    verification_type: Optional[VerificationType] = None


class GroupSummary(BaseModel):
    id: UUID
    name: str
    type: str
    privacy: str
    avatar_url: Optional[str] = None
    member_count: int = 0
    is_member: bool = False


class PostVerseRef(BaseModel):
    book: str
    chapter: int
    start_verse: int
    end_verse: Optional[int] = None
    translation_id: str

    @property
    def short_reference(self) -> str:
        """e.g. "John 3:16" or "John 3:16-18"."""
        if self.end_verse is not None and self.end_verse != self.start_verse:
            return f"{self.book} {self.chapter}:{self.start_verse}-{self.end_verse}"
        return f"{self.book} {self.chapter}:{self.start_verse}"
