"""Project persistence."""
import random
from typing import Optional
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from site_renderer.constants import ProjectStatus
from site_renderer.models import Project
from site_renderer.utils.exceptions import ValidationError, not_found_error
from site_renderer.utils.logger import get_logger

logger = get_logger("projects")

HOSTNAME_ADJECTIVES = ["bright", "swift", "calm", "bold", "fresh", "prime", "smart", "clear"]
HOSTNAME_NOUNS = ["dental", "clinic", "care", "health", "smile", "wellness", "medical", "beauty"]


def generate_hostname() -> str:
    """Generate a random ``{adjective}-{noun}-{number}`` hostname label."""
    adjective = random.choice(HOSTNAME_ADJECTIVES)
    noun = random.choice(HOSTNAME_NOUNS)
    return f"{adjective}-{noun}-{random.randint(1000, 9999)}"


class ProjectRepository:
    """Reads and writes ``projects`` rows through an explicit session."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, project_id: UUID) -> Optional[Project]:
        return self.db.query(Project).filter(Project.id == project_id).first()

    def get_by_hostname(self, hostname: str) -> Optional[Project]:
        """Look up a project by its generated ``{label}.sites.*`` label."""
        return self.db.query(Project).filter(Project.generated_hostname == hostname).first()

    def get_by_custom_domain(self, domain: str) -> Optional[Project]:
        """
        Look up a project by custom domain.

        Only verified domains match; an unverified domain resolves to None.

        Args:
            domain: Host without port, e.g. ``www.acmeclinic.com``

        Returns:
            Project instance or None
        """
        return self.db.query(Project).filter(
            or_(Project.custom_domain == domain, Project.custom_domain_alt == domain),
            Project.domain_verified_at.isnot(None),
        ).first()

    def create(self, user_id: str, hostname: Optional[str] = None) -> Project:
        """Create an empty project in the ``CREATED`` state."""
        project = Project(
            user_id=user_id,
            generated_hostname=hostname or generate_hostname(),
            status=ProjectStatus.CREATED,
        )
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        logger.info(f"Created project {project.id} at {project.generated_hostname}")
        return project

    def advance_status(self, project_id: UUID, status: str) -> Project:
        """
        Move a project forward through the pipeline.

        Args:
            project_id: Project to update
            status: New status, at or after the current one

        Returns:
            Updated project

        Raises:
            NotFoundError: If the project does not exist
            ValidationError: If the status is unknown or would move backwards
        """
        if status not in ProjectStatus.ORDER:
            raise ValidationError(f"Unknown project status: {status}")

        project = self.get_by_id(project_id)
        if not project:
            raise not_found_error("Project", str(project_id))

        if project.status not in ProjectStatus.ORDER:
            raise ValidationError(f"Project {project_id} has unknown status: {project.status}")

        current = ProjectStatus.ORDER.index(project.status)
        if ProjectStatus.ORDER.index(status) < current:
            raise ValidationError(f"Cannot move project from {project.status} back to {status}")

        previous = project.status
        project.status = status
        self.db.commit()
        self.db.refresh(project)
        logger.info(f"Project {project_id}: {previous} -> {status}")
        return project
