"""Writers that play the main app's part when seeding a shared container."""

import json

from widget_core.container import SharedContainer

GROUP_ID = "group.test.Bible-v1"

PROJECT_A = "0D7E1C2A-5B1F-4F43-9C55-1B0E7D6A9A01"
PROJECT_B = "6C2F0E9B-8D3A-4E21-A7F4-52C1D0B3E802"
PROJECT_C = "A4B8C3D2-1E0F-4A5B-9C8D-7E6F5A4B3C03"


def write_index(container: SharedContainer, project_ids, last_modified=782000000.0):
    container.write_json(
        "widget_projects/index.json",
        {"projectIds": list(project_ids), "lastModified": last_modified},
    )


def write_project(container: SharedContainer, project_id, name="My Widget", widget_type="Verse of Day", size="Medium", **extra):
    payload = {"id": project_id, "name": name, "widgetType": widget_type, "size": size}
    payload.update(extra)
    container.write_json(f"widget_projects/{project_id}.json", payload)


def write_raw(container: SharedContainer, relative, text):
    path = container.url / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def write_legacy_configs(container: SharedContainer, configs, as_text=False):
    value = json.dumps(configs) if as_text else configs
    container.preferences(create=True).set("widget_configs_simplified", value)
