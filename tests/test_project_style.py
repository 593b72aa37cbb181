import pytest

from helpers import PROJECT_A, write_raw
from widget_core.project_style import (
    ACCENT_ON_DARK,
    ACCENT_ON_LIGHT,
    BLACK,
    WHITE,
    ProjectStyleLoader,
    SavedProjectData,
    StyleColor,
    create_style_config,
    unit_point,
)


def color(r, g, b, a=1.0):
    return {"red": r, "green": g, "blue": b, "opacity": a}


def project(background, layers=None):
    data = {"id": PROJECT_A, "name": "Styled", "background": background}
    if layers is not None:
        data["layers"] = layers
    return SavedProjectData.model_validate(data)


def test_brightness_weights():
    assert StyleColor.rgb(1, 1, 1).brightness == pytest.approx(1.0)
    assert StyleColor.rgb(0, 1, 0).brightness == pytest.approx(0.587)


def test_light_solid_background_gets_dark_text():
    style = create_style_config(project({"solid": {"_0": {"color": color(1, 1, 1), "opacity": 0.5}}}))
    assert style.text_color == BLACK
    assert style.secondary_text_color == BLACK.with_opacity(0.7)
    assert style.accent_color == ACCENT_ON_LIGHT
    assert style.background.kind == "solid"
    assert style.background.colors[0].opacity == pytest.approx(0.5)


def test_dark_solid_background_without_wrapper():
    style = create_style_config(project({"solid": {"color": color(0.1, 0.1, 0.2)}}))
    assert style.text_color == WHITE
    assert style.accent_color == ACCENT_ON_DARK
    assert style.background.colors[0].opacity == pytest.approx(1.0)


def test_gradient_uses_first_stop():
    bg = {"gradient": {"_0": {
        "type": "linear",
        "stops": [{"color": color(0.05, 0.05, 0.1), "location": 0}, {"color": color(1, 1, 1), "location": 1}],
        "startPoint": "topLeading",
        "endPoint": "bottomTrailing",
        "angle": 45,
    }}}
    style = create_style_config(project(bg))
    assert style.text_color == WHITE
    assert style.accent_color == WHITE.with_opacity(0.9)
    assert style.background.start_point == (0.0, 0.0)
    assert style.background.end_point == (1.0, 1.0)
    assert len(style.background.colors) == 2


def test_glassmorphism_on_light_tint():
    bg = {"glassmorphism": {"_0": {
        "preset": "frosted",
        "blurRadius": 20,
        "tintColor": color(0.9, 0.9, 0.9),
        "tintOpacity": 0.4,
    }}}
    style = create_style_config(project(bg))
    assert style.text_color == BLACK.with_opacity(0.85)
    assert style.secondary_text_color == BLACK.with_opacity(0.6)
    assert style.accent_color == ACCENT_ON_LIGHT


def test_image_background_uses_overlay():
    style = create_style_config(project({"image": {"_0": {"imageId": "img-1"}}}))
    assert style.text_color == WHITE
    assert style.secondary_text_color == WHITE.with_opacity(0.8)
    assert style.background.kind == "image"
    assert style.background.image_id == "img-1"


def test_first_text_layer_overrides_text_color():
    layers = [
        {"element": {"icon": {"_0": {"primaryColor": color(1, 0, 0)}}}},
        {"element": {"text": {"_0": {"textColor": color(0.2, 0.3, 0.4)}}}},
        {"element": {"text": {"_0": {"textColor": color(0.9, 0.9, 0.9)}}}},
    ]
    style = create_style_config(project({"solid": {"color": color(1, 1, 1)}}, layers))
    assert style.text_color == StyleColor.rgb(0.2, 0.3, 0.4)


def test_undecodable_layers_are_ignored():
    p = project({"solid": {"color": color(1, 1, 1)}}, layers="not a list")
    assert p.layers is None
    assert create_style_config(p).text_color == BLACK


def test_unknown_background_kind_fails_to_decode():
    with pytest.raises(ValueError):
        project({"pattern": {"_0": {}}})


def test_unit_point_defaults_to_center():
    assert unit_point("sideways") == (0.5, 0.5)


def test_loader_default_id_returns_none(container):
    assert ProjectStyleLoader(container).load_style_config("default") is None


def test_loader_missing_and_malformed(container):
    loader = ProjectStyleLoader(container)
    assert loader.load_style_config(PROJECT_A) is None

    write_raw(container, f"widget_projects/{PROJECT_A}.json", "{]")
    assert loader.load_style_config(PROJECT_A) is None


def test_loader_reads_saved_project(container):
    container.write_json(f"widget_projects/{PROJECT_A}.json", {
        "id": PROJECT_A,
        "name": "Night",
        "widgetType": "verse_of_day",
        "size": "medium",
        "createdAt": 750000000.5,
        "background": {"solid": {"_0": {"color": color(0, 0, 0), "opacity": 1}}},
        "layers": [],
    })
    style = ProjectStyleLoader(container).load_style_config(PROJECT_A)
    assert style is not None
    assert style.text_color == WHITE
