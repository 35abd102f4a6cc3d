"""Code snippet persistence."""
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from site_renderer.models import CodeSnippet


class SnippetRepository:
    """Reads ``code_snippets`` rows through an explicit session."""

    def __init__(self, db: Session):
        self.db = db

    def list_for_template(self, template_id: UUID) -> List[CodeSnippet]:
        return self.db.query(CodeSnippet).filter(
            CodeSnippet.template_id == template_id,
        ).order_by(CodeSnippet.order_index, CodeSnippet.created_at).all()

    def list_for_project(self, project_id: UUID) -> List[CodeSnippet]:
        return self.db.query(CodeSnippet).filter(
            CodeSnippet.project_id == project_id,
        ).order_by(CodeSnippet.order_index, CodeSnippet.created_at).all()
