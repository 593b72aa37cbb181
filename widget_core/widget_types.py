"""
Widget catalog: the widget kinds the app ships and the sizes they come in.
"""

from enum import Enum
from typing import List


class WidgetSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def grid_description(self) -> str:
        return _GRID[self]


_GRID = {
    WidgetSize.SMALL: "2×2",
    WidgetSize.MEDIUM: "4×2",
    WidgetSize.LARGE: "4×4",
}


class BibleWidgetType(str, Enum):
    VERSE_OF_DAY = "verse_of_day"
    READING_PROGRESS = "reading_progress"
    PRAYER_REMINDER = "prayer_reminder"
    HABIT_TRACKER = "habit_tracker"
    SCRIPTURE_QUOTE = "scripture_quote"
    COUNTDOWN = "countdown"
    MOOD_GRATITUDE = "mood_gratitude"
    FAVORITES = "favorites"

    @property
    def display_name(self) -> str:
        return _TYPE_INFO[self][0]

    @property
    def description(self) -> str:
        return _TYPE_INFO[self][1]

    @property
    def icon(self) -> str:
        return _TYPE_INFO[self][2]

    @property
    def supported_sizes(self) -> List[WidgetSize]:
        if self is BibleWidgetType.MOOD_GRATITUDE:
            return [WidgetSize.SMALL, WidgetSize.MEDIUM]
        if self is BibleWidgetType.FAVORITES:
            return [WidgetSize.MEDIUM, WidgetSize.LARGE]
        return list(WidgetSize)

    def to_dict(self) -> dict:
        return {
            "id": self.value,
            "name": self.display_name,
            "description": self.description,
            "icon": self.icon,
            "sizes": [s.value for s in self.supported_sizes],
        }


# (display name, description, icon)
_TYPE_INFO = {
    BibleWidgetType.VERSE_OF_DAY: ("Verse of the Day", "Daily scripture to inspire your day", "sparkles"),
    BibleWidgetType.READING_PROGRESS: ("Reading Progress", "Track your Bible reading plan", "book.fill"),
    BibleWidgetType.PRAYER_REMINDER: ("Prayer Reminder", "Quick access to your prayers", "hands.sparkles"),
    BibleWidgetType.HABIT_TRACKER: ("Habit Tracker", "Monitor your daily spiritual habits", "checkmark.circle.fill"),
    BibleWidgetType.SCRIPTURE_QUOTE: ("Scripture Quote", "Display your favorite verse", "quote.opening"),
    BibleWidgetType.COUNTDOWN: ("Countdown", "Days until your event or fasting end", "calendar.badge.clock"),
    BibleWidgetType.MOOD_GRATITUDE: ("Mood & Gratitude", "Check in with mood & gratitude", "heart.fill"),
    BibleWidgetType.FAVORITES: ("Favorites", "Quick access to saved verses", "star.fill"),
}
