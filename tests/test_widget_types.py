from widget_core.widget_types import BibleWidgetType, WidgetSize


def test_sizes():
    assert WidgetSize.MEDIUM.display_name == "Medium"
    assert WidgetSize.LARGE.grid_description == "4×4"


def test_supported_sizes():
    assert BibleWidgetType.MOOD_GRATITUDE.supported_sizes == [WidgetSize.SMALL, WidgetSize.MEDIUM]
    assert BibleWidgetType.VERSE_OF_DAY.supported_sizes == [WidgetSize.SMALL, WidgetSize.MEDIUM, WidgetSize.LARGE]


def test_catalog_entry():
    info = BibleWidgetType("verse_of_day").to_dict()
    assert info["name"] == "Verse of the Day"
    assert info["icon"] == "sparkles"
