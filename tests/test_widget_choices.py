from unittest.mock import MagicMock

from helpers import PROJECT_A, PROJECT_B, write_index, write_legacy_configs, write_project, write_raw
from widget_core.models import DEFAULT_WIDGET, DisplayEntity
from widget_core.widget_choices import WidgetChoiceResolver, first_non_empty


def _resolver(container):
    return WidgetChoiceResolver.from_container(container)


def test_first_non_empty_picks_first_hit():
    calls = []

    def empty():
        calls.append("empty")
        return []

    def hit():
        calls.append("hit")
        return [1, 2]

    def never():
        calls.append("never")
        return [3]

    assert first_non_empty([empty, hit, never], [0]) == [1, 2]
    assert calls == ["empty", "hit"]


def test_first_non_empty_falls_back_to_default():
    assert first_non_empty([list, list], ["d"]) == ["d"]


def test_primary_path_wins(container):
    write_project(container, PROJECT_A, name="Morning")
    write_index(container, [PROJECT_A])
    write_legacy_configs(container, [{"id": "cfg-1", "name": "Legacy", "widgetType": "countdown"}])

    choices = _resolver(container).resolve_widget_choices()
    assert [c.id for c in choices] == [PROJECT_A]


def test_malformed_blob_skipped_in_result(container):
    write_project(container, PROJECT_A, name="Morning")
    write_raw(container, f"widget_projects/{PROJECT_B}.json", "garbage")
    write_index(container, [PROJECT_A, PROJECT_B])

    choices = _resolver(container).resolve_widget_choices()
    assert choices == [DisplayEntity(id=PROJECT_A, name="Morning", widget_type="Verse of Day", size="Medium")]


def test_missing_index_uses_legacy_in_order(container):
    write_legacy_configs(container, [
        {"id": "cfg-1", "name": "First", "widgetType": "verse_of_day", "size": "small"},
        {"id": "cfg-2", "name": "Second", "widgetType": "favorites", "size": "large"},
    ])

    choices = _resolver(container).resolve_widget_choices()
    assert [c.id for c in choices] == ["cfg-1", "cfg-2"]


def test_index_with_no_decodable_projects_falls_through(container):
    write_index(container, [PROJECT_A])
    write_legacy_configs(container, [{"id": "cfg-1", "name": "Legacy", "widgetType": "countdown"}])

    choices = _resolver(container).resolve_widget_choices()
    assert [c.id for c in choices] == ["cfg-1"]


def test_nothing_saved_returns_default(container):
    choices = _resolver(container).resolve_widget_choices()
    assert choices == [DEFAULT_WIDGET]
    assert choices[0].model_dump(by_alias=True) == {
        "id": "default",
        "name": "Default Style",
        "widgetType": "Verse of Day",
        "size": "Medium",
    }


def test_missing_container_returns_default(missing_container):
    assert _resolver(missing_container).resolve_widget_choices() == [DEFAULT_WIDGET]


def test_legacy_not_consulted_when_primary_has_results():
    projects = MagicMock()
    projects.resolve.return_value = [DEFAULT_WIDGET.model_copy(update={"id": "p1"})]
    legacy = MagicMock()

    choices = WidgetChoiceResolver(projects, legacy).resolve_widget_choices()
    assert [c.id for c in choices] == ["p1"]
    legacy.resolve.assert_not_called()


def test_title_and_subtitle():
    entity = DisplayEntity(id="x", name="Evening Psalm", widget_type="Scripture Quote", size="Large")
    assert entity.title == "Evening Psalm"
    assert entity.subtitle == "Scripture Quote • Large"
    assert entity.to_display()["subtitle"] == "Scripture Quote • Large"


def test_query_surface(container):
    write_project(container, PROJECT_A, name="Morning")
    write_project(container, PROJECT_B, name="Evening")
    write_index(container, [PROJECT_A, PROJECT_B])
    resolver = _resolver(container)

    assert [e.id for e in resolver.entities_for([PROJECT_B])] == [PROJECT_B]
    assert len(resolver.suggested_entities()) == 2
    assert resolver.default_result().id == PROJECT_A


def test_default_result_without_saved_widgets(container):
    assert _resolver(container).default_result() == DEFAULT_WIDGET


def test_unreadable_index_and_ids_fall_back_to_default(container):
    write_project(container, PROJECT_A)
    write_index(container, [PROJECT_A], last_modified=float("inf"))
    assert _resolver(container).resolve_widget_choices() == [DEFAULT_WIDGET]

    write_index(container, ["bad\x00id"])
    assert _resolver(container).resolve_widget_choices() == [DEFAULT_WIDGET]


def test_reading_choices_leaves_container_untouched(container):
    assert _resolver(container).resolve_widget_choices() == [DEFAULT_WIDGET]
    assert list(container.url.iterdir()) == []
