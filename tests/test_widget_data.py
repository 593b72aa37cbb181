import json
from datetime import date, datetime, timezone

from widget_core.widget_data import DEFAULT_VERSE_REFERENCE, WidgetDataProvider, WidgetDisplayData, WidgetDataStorage


def test_placeholder_when_nothing_synced(container):
    data = WidgetDataProvider(container).fetch_widget_data()
    assert data.countdown_title == "Easter"
    assert data.reading_streak == 7
    assert len(data.favorite_verses) == 2


def test_placeholder_when_container_missing(missing_container):
    data = WidgetDataProvider(missing_container).fetch_widget_data()
    assert data.verse_of_day_reference == DEFAULT_VERSE_REFERENCE


def test_placeholder_on_malformed_record(container):
    container.preferences(create=True).set("widget_data", "{broken")
    assert WidgetDataProvider(container).fetch_widget_data().countdown_title == "Easter"


def test_stored_fields_with_per_field_defaults(container):
    container.preferences(create=True).set("widget_data", json.dumps({
        "verseOfDayText": "The Lord is my shepherd; I shall not want.",
        "verseOfDayReference": "Psalm 23:1",
        "readingStreak": 12,
        "favoriteVerses": [
            {"reference": "Romans 8:28", "text": "And we know...", "bookName": "Romans", "chapter": 8, "verse": 28},
        ],
        "lastUpdated": 0,
    }))
    data = WidgetDataProvider(container).fetch_widget_data()

    assert data.verse_of_day_reference == "Psalm 23:1"
    assert data.reading_streak == 12
    assert data.reading_plan_name == "Getting Started"
    assert data.total_days == 7
    assert data.current_day == 1
    assert data.countdown_title == "Countdown"
    assert data.last_mood == "😊"
    assert data.today_gratitude_completed is False
    assert data.favorite_verses[0].book_name == "Romans"
    assert data.last_updated == datetime(2001, 1, 1, tzinfo=timezone.utc)


def test_empty_string_is_kept():
    data = WidgetDisplayData.from_storage(WidgetDataStorage(reading_plan_name=""))
    assert data.reading_plan_name == ""


def test_days_remaining():
    data = WidgetDisplayData.from_storage(WidgetDataStorage(countdown_target_date=datetime(2025, 4, 20, 12, 0)))
    assert data.days_remaining(today=date(2025, 4, 6)) == 14
    assert data.days_remaining(today=date(2025, 4, 21)) == -1


def test_placeholder_on_out_of_range_date(container):
    container.preferences(create=True).set("widget_data", {"countdownTargetDate": 1e13, "readingStreak": 40})
    data = WidgetDataProvider(container).fetch_widget_data()
    assert data.countdown_title == "Easter"
    assert data.reading_streak == 7
