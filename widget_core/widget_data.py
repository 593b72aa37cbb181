"""
Widget display data: the shared record the main app syncs for widget timelines.
"""

import json
import logging
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from widget_core.container import SharedContainer
from widget_core.errors import NotFound, WidgetStorageError
from widget_core.models import StoredDate

logger = logging.getLogger(__name__)

WIDGET_DATA_KEY = "widget_data"

DEFAULT_VERSE_TEXT = (
    "\"For God so loved the world, that he gave his only Son, that whoever "
    "believes in him should not perish but have eternal life.\""
)
DEFAULT_VERSE_REFERENCE = "John 3:16"
DEFAULT_COUNTDOWN_DAYS = 14


def _now() -> datetime:
    return datetime.now(timezone.utc)


class FavoriteVerse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    reference: str
    text: str
    book_name: str = Field(alias="bookName")
    chapter: int
    verse: int


class WidgetDataStorage(BaseModel):
    """Stored shape; every field may be missing."""
    model_config = ConfigDict(populate_by_name=True)

    verse_of_day_text: Optional[str] = Field(default=None, alias="verseOfDayText")
    verse_of_day_reference: Optional[str] = Field(default=None, alias="verseOfDayReference")
    reading_plan_name: Optional[str] = Field(default=None, alias="readingPlanName")
    reading_progress: Optional[float] = Field(default=None, alias="readingProgress")
    reading_streak: Optional[int] = Field(default=None, alias="readingStreak")
    current_day: Optional[int] = Field(default=None, alias="currentDay")
    total_days: Optional[int] = Field(default=None, alias="totalDays")
    active_prayer_count: Optional[int] = Field(default=None, alias="activePrayerCount")
    answered_prayer_count: Optional[int] = Field(default=None, alias="answeredPrayerCount")
    last_prayer_time: Optional[StoredDate] = Field(default=None, alias="lastPrayerTime")
    today_habit_progress: Optional[float] = Field(default=None, alias="todayHabitProgress")
    completed_habits: Optional[int] = Field(default=None, alias="completedHabits")
    total_habits: Optional[int] = Field(default=None, alias="totalHabits")
    habit_streak: Optional[int] = Field(default=None, alias="habitStreak")
    favorite_verses: Optional[List[FavoriteVerse]] = Field(default=None, alias="favoriteVerses")
    last_mood: Optional[str] = Field(default=None, alias="lastMood")
    last_mood_date: Optional[StoredDate] = Field(default=None, alias="lastMoodDate")
    gratitude_streak: Optional[int] = Field(default=None, alias="gratitudeStreak")
    today_gratitude_completed: Optional[bool] = Field(default=None, alias="todayGratitudeCompleted")
    countdown_target_date: Optional[StoredDate] = Field(default=None, alias="countdownTargetDate")
    countdown_title: Optional[str] = Field(default=None, alias="countdownTitle")
    last_updated: Optional[StoredDate] = Field(default=None, alias="lastUpdated")
    app_theme: Optional[str] = Field(default=None, alias="appTheme")


class WidgetDisplayData(BaseModel):
    """Display-ready data with every gap filled in."""
    verse_of_day_text: str
    verse_of_day_reference: str
    reading_plan_name: str
    reading_progress: float
    reading_streak: int
    current_day: int
    total_days: int
    active_prayer_count: int
    answered_prayer_count: int
    today_habit_progress: float
    completed_habits: int
    total_habits: int
    habit_streak: int
    countdown_title: str
    countdown_date: datetime
    last_mood: str
    gratitude_streak: int
    today_gratitude_completed: bool
    favorite_verses: List[FavoriteVerse] = Field(default_factory=list)
    last_updated: datetime

    def days_remaining(self, today: Optional[date] = None) -> int:
        """Whole calendar days from today until the countdown date."""
        if today is None:
            today = datetime.now().date()
        target = self.countdown_date.astimezone().date() if self.countdown_date.tzinfo else self.countdown_date.date()
        return (target - today).days

    @classmethod
    def from_storage(cls, stored: WidgetDataStorage) -> "WidgetDisplayData":
        now = _now()
        return cls(
            verse_of_day_text=_or(stored.verse_of_day_text, DEFAULT_VERSE_TEXT),
            verse_of_day_reference=_or(stored.verse_of_day_reference, DEFAULT_VERSE_REFERENCE),
            reading_plan_name=_or(stored.reading_plan_name, "Getting Started"),
            reading_progress=_or(stored.reading_progress, 0.0),
            reading_streak=_or(stored.reading_streak, 0),
            current_day=_or(stored.current_day, 1),
            total_days=_or(stored.total_days, 7),
            active_prayer_count=_or(stored.active_prayer_count, 0),
            answered_prayer_count=_or(stored.answered_prayer_count, 0),
            today_habit_progress=_or(stored.today_habit_progress, 0.0),
            completed_habits=_or(stored.completed_habits, 0),
            total_habits=_or(stored.total_habits, 0),
            habit_streak=_or(stored.habit_streak, 0),
            countdown_title=_or(stored.countdown_title, "Countdown"),
            countdown_date=_or(stored.countdown_target_date, now + timedelta(days=DEFAULT_COUNTDOWN_DAYS)),
            last_mood=_or(stored.last_mood, "😊"),
            gratitude_streak=_or(stored.gratitude_streak, 0),
            today_gratitude_completed=_or(stored.today_gratitude_completed, False),
            favorite_verses=_or(stored.favorite_verses, []),
            last_updated=_or(stored.last_updated, now),
        )

    @classmethod
    def placeholder(cls) -> "WidgetDisplayData":
        """Sample data shown before the app has synced anything."""
        now = _now()
        return cls(
            verse_of_day_text=DEFAULT_VERSE_TEXT,
            verse_of_day_reference=DEFAULT_VERSE_REFERENCE,
            reading_plan_name="Getting Started",
            reading_progress=0.4,
            reading_streak=7,
            current_day=12,
            total_days=30,
            active_prayer_count=5,
            answered_prayer_count=12,
            today_habit_progress=0.6,
            completed_habits=3,
            total_habits=5,
            habit_streak=7,
            countdown_title="Easter",
            countdown_date=now + timedelta(days=DEFAULT_COUNTDOWN_DAYS),
            last_mood="😊",
            gratitude_streak=5,
            today_gratitude_completed=False,
            favorite_verses=[
                FavoriteVerse(reference="John 3:16", text="For God so loved...", book_name="John", chapter=3, verse=16),
                FavoriteVerse(reference="Psalm 23:1", text="The Lord is my shepherd...", book_name="Psalms", chapter=23, verse=1),
            ],
            last_updated=now,
        )


def _or(value, default):
    return default if value is None else value


class WidgetDataProvider:
    """Reads the synced widget record from the app group preferences."""

    def __init__(self, container: SharedContainer, key: str = WIDGET_DATA_KEY):
        self.container = container
        self.key = key

    def fetch_widget_data(self) -> WidgetDisplayData:
        try:
            raw = self.container.preferences().get(self.key)
            if isinstance(raw, (str, bytes)):
                raw = json.loads(raw)
            if raw is None:
                return WidgetDisplayData.placeholder()
            stored = WidgetDataStorage.model_validate(raw)
        except NotFound:
            logger.debug("Widget data not synced yet")
            return WidgetDisplayData.placeholder()
        except (WidgetStorageError, OSError, ValueError) as e:
            # ValidationError and JSONDecodeError are ValueErrors
            logger.warning(f"Failed to read widget data: {e}")
            return WidgetDisplayData.placeholder()
        return WidgetDisplayData.from_storage(stored)
