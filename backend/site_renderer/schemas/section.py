"""Schemas for page content sections."""
from pydantic import BaseModel, Field


class Section(BaseModel):
    """One named HTML fragment of a page body."""
    name: str = Field("", description="Section name, e.g. 'hero'")
    content: str = Field("", description="Raw HTML of the section")
