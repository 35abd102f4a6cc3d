"""Code snippet model for injected third-party scripts and styles."""
from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, CheckConstraint, Index, Uuid, func
from sqlalchemy.orm import relationship
import uuid
from site_renderer.database import Base
from site_renderer.models.project import JSONType


class CodeSnippet(Base):
    """Snippet attached to either a template or a project."""
    __tablename__ = "code_snippets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    template_id = Column(Uuid, ForeignKey("templates.id", ondelete="CASCADE"), nullable=True, index=True)
    project_id = Column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=True, index=True)
    name = Column(String, nullable=False)  # override key together with location
    location = Column(String(16), nullable=False)  # head_start|head_end|body_start|body_end
    order_index = Column(Integer, nullable=False, default=0)
    is_enabled = Column(Boolean, nullable=False, default=True)
    page_ids = Column(JSONType, nullable=True)  # empty/null = all pages
    code = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    template = relationship("Template", back_populates="code_snippets")
    project = relationship("Project", back_populates="code_snippets")

    __table_args__ = (
        CheckConstraint(
            "(template_id IS NULL) <> (project_id IS NULL)",
            name="ck_code_snippets_single_owner",
        ),
        Index("idx_code_snippets_location_order", "location", "order_index"),
    )
