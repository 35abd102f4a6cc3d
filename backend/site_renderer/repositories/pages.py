"""Page version persistence.

Only one ``published`` and one ``draft`` row may exist per (project, path).
Superseding the previous row and writing the new one happen in a single
transaction, and the partial unique indexes on ``pages`` reject any
concurrent write that would break this.
"""
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from site_renderer.constants import PageStatus
from site_renderer.models import Page
from site_renderer.utils.exceptions import not_found_error
from site_renderer.utils.logger import get_logger

logger = get_logger("pages")


class PageRepository:
    """Reads and writes ``pages`` rows through an explicit session."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, page_id: UUID) -> Optional[Page]:
        return self.db.query(Page).filter(Page.id == page_id).first()

    def _get_with_status(self, project_id: UUID, path: str, status: str) -> Optional[Page]:
        return self.db.query(Page).filter(
            Page.project_id == project_id,
            Page.path == path,
            Page.status == status,
        ).order_by(Page.version.desc()).first()

    def get_published(self, project_id: UUID, path: str) -> Optional[Page]:
        return self._get_with_status(project_id, path, PageStatus.PUBLISHED)

    def get_draft(self, project_id: UUID, path: str) -> Optional[Page]:
        return self._get_with_status(project_id, path, PageStatus.DRAFT)

    def get_page_to_render(self, project_id: UUID, path: str) -> Optional[Page]:
        """Published version of the path if there is one, else its draft."""
        return self.get_published(project_id, path) or self.get_draft(project_id, path)

    def has_published_pages(self, project_id: UUID) -> bool:
        """True if any path of the project has a published page."""
        row = self.db.query(Page.id).filter(
            Page.project_id == project_id,
            Page.status == PageStatus.PUBLISHED,
        ).first()
        return row is not None

    def list_versions(self, project_id: UUID, path: str) -> List[Page]:
        """All versions of a path, newest first."""
        return self.db.query(Page).filter(
            Page.project_id == project_id,
            Page.path == path,
        ).order_by(Page.version.desc()).all()

    def create_version(self, project_id: UUID, path: str, sections: Any) -> Page:
        """
        Create a new draft version of a page.

        The current draft for the path, if any, is marked inactive.

        Args:
            project_id: Owning project
            path: Page path, e.g. ``/`` or ``/services``
            sections: Section list (or ``{"sections": [...]}``) to store

        Returns:
            The new draft page
        """
        try:
            latest = self.db.query(func.max(Page.version)).filter(
                Page.project_id == project_id,
                Page.path == path,
            ).scalar()

            self.db.query(Page).filter(
                Page.project_id == project_id,
                Page.path == path,
                Page.status == PageStatus.DRAFT,
            ).update({Page.status: PageStatus.INACTIVE}, synchronize_session="fetch")

            page = Page(
                project_id=project_id,
                path=path,
                version=(latest or 0) + 1,
                status=PageStatus.DRAFT,
                sections=sections,
            )
            self.db.add(page)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(page)
        logger.info(f"Created draft v{page.version} of {path} for project {project_id}")
        return page

    def publish(self, page_id: UUID) -> Page:
        """
        Publish a page version, superseding the currently published one.

        Args:
            page_id: Page version to publish

        Returns:
            The published page

        Raises:
            NotFoundError: If the page does not exist
        """
        page = self.get_by_id(page_id)
        if not page:
            raise not_found_error("Page", str(page_id))

        try:
            self.db.query(Page).filter(
                Page.project_id == page.project_id,
                Page.path == page.path,
                Page.status == PageStatus.PUBLISHED,
                Page.id != page.id,
            ).update({Page.status: PageStatus.INACTIVE}, synchronize_session="fetch")

            page.status = PageStatus.PUBLISHED
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(page)
        logger.info(f"Published v{page.version} of {page.path} for project {page.project_id}")
        return page
