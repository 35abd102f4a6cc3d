"""Template model for reusable site layouts."""
from sqlalchemy import Column, String, Text, Boolean, DateTime, Uuid, func
from sqlalchemy.orm import relationship
import uuid
from site_renderer.constants import TemplateStatus
from site_renderer.database import Base


class Template(Base):
    """Reusable wrapper/header/footer bundle."""
    __tablename__ = "templates"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    wrapper = Column(Text, nullable=True)
    header = Column(Text, nullable=True)
    footer = Column(Text, nullable=True)
    status = Column(String(16), nullable=False, default=TemplateStatus.DRAFT)  # draft|published
    is_active = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    code_snippets = relationship("CodeSnippet", back_populates="template", cascade="all, delete-orphan")
