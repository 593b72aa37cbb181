"""
Direct and group conversations.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from widget_core.community.profile import CommunityProfileSummary, GroupSummary, PostVerseRef


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ConversationType(str, Enum):
    DIRECT = "direct"
    GROUP_CHAT = "group_chat"

    @property
    def display_name(self) -> str:
        return "Direct Message" if self is ConversationType.DIRECT else "Group Chat"


class Message(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    conversation_id: UUID
    sender_id: UUID
    content: str
    media_url: Optional[str] = None
    verse_ref: Optional[PostVerseRef] = None
    is_read: bool = False
    read_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow)
    deleted_at: Optional[datetime] = None

    sender: Optional[CommunityProfileSummary] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def has_media(self) -> bool:
        return self.media_url is not None

    @property
    def has_verse(self) -> bool:
        return self.verse_ref is not None

    def is_sent_by(self, user_id: UUID) -> bool:
        return self.sender_id == user_id


class SendMessageRequest(BaseModel):
    conversation_id: UUID
    content: str
    media_url: Optional[str] = None
    verse_ref: Optional[PostVerseRef] = None


class Conversation(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    type: ConversationType = ConversationType.DIRECT
    participant_ids: List[UUID]
    group_id: Optional[UUID] = None
    last_message_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_utcnow)

    # Joined data
    participants: Optional[List[CommunityProfileSummary]] = None
    last_message: Optional[Message] = None
    unread_count: Optional[int] = None
    group: Optional[GroupSummary] = None

    def other_participant(self, current_user_id: UUID) -> Optional[CommunityProfileSummary]:
        for p in self.participants or []:
            if p.id != current_user_id:
                return p
        return None

    def display_name(self, current_user_id: UUID) -> str:
        if self.group is not None:
            return self.group.name
        other = self.other_participant(current_user_id)
        if other is not None:
            return other.display_name
        return "Conversation"

    @property
    def has_unread(self) -> bool:
        return (self.unread_count or 0) > 0
