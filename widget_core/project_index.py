"""
Project index resolver: lists saved widget projects from the shared container.

The index file names projects by id; each project lives in its own blob. A
blob that is missing or malformed is skipped, the rest keep index order.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError

from widget_core.container import SharedContainer
from widget_core.errors import NotFound, WidgetStorageError
from widget_core.models import DisplayEntity, ProjectIndex, WidgetProjectRecord

logger = logging.getLogger(__name__)

PROJECTS_FOLDER = "widget_projects"
INDEX_FILE = "index.json"


class ProjectIndexResolver:
    """Reads ``widget_projects/index.json`` and the project blobs it points to."""

    def __init__(self, container: SharedContainer, projects_folder: str = PROJECTS_FOLDER, index_file: str = INDEX_FILE):
        self.container = container
        self.projects_folder = projects_folder
        self.index_file = index_file

    @property
    def index_path(self) -> str:
        return f"{self.projects_folder}/{self.index_file}"

    def project_path(self, project_id: str) -> str:
        return f"{self.projects_folder}/{project_id}.json"

    def load_index(self) -> Optional[ProjectIndex]:
        """Load the project index, or None when it is absent or unreadable."""
        try:
            raw = self.container.read_json(self.index_path)
            return ProjectIndex.model_validate(raw)
        except NotFound:
            logger.debug(f"Project index not found: {self.index_path}")
        except (WidgetStorageError, ValidationError) as e:
            logger.warning(f"Failed to load project index: {e}")
        return None

    def load_project(self, project_id: str) -> Optional[WidgetProjectRecord]:
        """Load one project blob, or None when it is missing or malformed."""
        try:
            raw = self.container.read_json(self.project_path(project_id))
            return WidgetProjectRecord.model_validate(raw)
        except NotFound:
            logger.debug(f"[{project_id}] Project file not found")
        except (WidgetStorageError, ValidationError) as e:
            logger.warning(f"[{project_id}] Failed to decode project: {e}")
        return None

    def load_projects(self) -> List[WidgetProjectRecord]:
        """Load every project the index references, in index order."""
        index = self.load_index()
        if index is None:
            return []

        projects = []
        for project_id in index.project_ids:
            project = self.load_project(project_id)
            if project is not None:
                projects.append(project)
        return projects

    def resolve(self) -> List[DisplayEntity]:
        return [DisplayEntity.from_project(p) for p in self.load_projects()]
