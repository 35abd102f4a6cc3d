"""Template persistence."""
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from site_renderer.constants import TemplateStatus
from site_renderer.models import Template
from site_renderer.utils.exceptions import not_found_error


class TemplateRepository:
    """Reads and writes ``templates`` rows through an explicit session."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, template_id: UUID) -> Optional[Template]:
        return self.db.query(Template).filter(Template.id == template_id).first()

    def get_active(self) -> Optional[Template]:
        return self.db.query(Template).filter(Template.is_active.is_(True)).first()

    def _deactivate_all(self) -> None:
        self.db.query(Template).filter(Template.is_active.is_(True)).update(
            {Template.is_active: False}, synchronize_session="fetch"
        )

    def create(
        self,
        name: str,
        wrapper: str = "",
        header: str = "",
        footer: str = "",
        is_active: bool = False,
    ) -> Template:
        """Create a draft template, optionally making it the active one."""
        try:
            if is_active:
                self._deactivate_all()
            template = Template(
                name=name,
                wrapper=wrapper,
                header=header,
                footer=footer,
                status=TemplateStatus.DRAFT,
                is_active=is_active,
            )
            self.db.add(template)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(template)
        return template

    def set_active(self, template_id: UUID) -> Template:
        """Make one template active; every other template is deactivated."""
        template = self.get_by_id(template_id)
        if not template:
            raise not_found_error("Template", str(template_id))
        try:
            self._deactivate_all()
            template.is_active = True
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(template)
        return template

    def _set_status(self, template_id: UUID, status: str) -> Template:
        template = self.get_by_id(template_id)
        if not template:
            raise not_found_error("Template", str(template_id))
        template.status = status
        self.db.commit()
        self.db.refresh(template)
        return template

    def publish(self, template_id: UUID) -> Template:
        return self._set_status(template_id, TemplateStatus.PUBLISHED)

    def unpublish(self, template_id: UUID) -> Template:
        return self._set_status(template_id, TemplateStatus.DRAFT)
