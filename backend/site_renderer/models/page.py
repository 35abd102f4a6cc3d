"""Page model for versioned page content."""
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Index, Uuid, func, text
from sqlalchemy.orm import relationship
import uuid
from site_renderer.constants import PageStatus
from site_renderer.database import Base
from site_renderer.models.project import JSONType


class Page(Base):
    """One version of a page. Rows are superseded, never edited in place."""
    __tablename__ = "pages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id = Column(Uuid, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    path = Column(String, nullable=False, default="/")
    version = Column(Integer, nullable=False, default=1)
    status = Column(String(16), nullable=False, default=PageStatus.DRAFT, index=True)  # draft|published|inactive
    sections = Column(JSONType, nullable=True)  # [{name, content}] or {"sections": [...]}
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    project = relationship("Project", back_populates="pages")

    # At most one live published and one live draft row per (project, path)
    __table_args__ = (
        Index("idx_pages_project_path", "project_id", "path"),
        Index(
            "uq_pages_published_path",
            "project_id",
            "path",
            unique=True,
            postgresql_where=text("status = 'published'"),
            sqlite_where=text("status = 'published'"),
        ),
        Index(
            "uq_pages_draft_path",
            "project_id",
            "path",
            unique=True,
            postgresql_where=text("status = 'draft'"),
            sqlite_where=text("status = 'draft'"),
        ),
    )
