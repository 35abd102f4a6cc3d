"""Project model for generated websites."""
from sqlalchemy import JSON, Column, String, Text, DateTime, ForeignKey, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
import uuid
from site_renderer.constants import ProjectStatus
from site_renderer.database import Base

JSONType = JSON().with_variant(JSONB(), "postgresql")


class Project(Base):
    """Generated website for one business (tenant)."""
    __tablename__ = "projects"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String, nullable=False, index=True)
    generated_hostname = Column(String, unique=True, nullable=False, index=True)  # {label}.sites.*
    custom_domain = Column(String, nullable=True, index=True)
    custom_domain_alt = Column(String, nullable=True, index=True)  # e.g. the www. variant
    domain_verified_at = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(32), nullable=False, default=ProjectStatus.CREATED, index=True)
    selected_place_id = Column(String, nullable=True)
    selected_website_url = Column(Text, nullable=True)
    template_id = Column(Uuid, ForeignKey("templates.id", ondelete="SET NULL"), nullable=True)

    # Layout, copied from a template and edited per project
    wrapper = Column(Text, nullable=True)  # must contain {{slot}}
    header = Column(Text, nullable=True)
    footer = Column(Text, nullable=True)

    # Pipeline step outputs
    step_gbp_scrape = Column(JSONType, nullable=True)
    step_website_scrape = Column(JSONType, nullable=True)
    step_image_analysis = Column(JSONType, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    template = relationship("Template")
    pages = relationship("Page", back_populates="project", cascade="all, delete-orphan")
    code_snippets = relationship("CodeSnippet", back_populates="project", cascade="all, delete-orphan")

    @property
    def business_name(self):
        """Business name captured by the GBP scrape step, if any."""
        if isinstance(self.step_gbp_scrape, dict):
            name = self.step_gbp_scrape.get("name")
            if isinstance(name, str) and name.strip():
                return name.strip()
        return None
