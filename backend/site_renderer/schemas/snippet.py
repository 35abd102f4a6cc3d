"""Schemas for injectable code snippets."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional

from site_renderer.constants import SnippetLocation


class Snippet(BaseModel):
    """A code snippet as seen by the merge engine (template- or project-owned)."""
    model_config = ConfigDict(from_attributes=True)

    name: str
    location: str = Field(..., description="head_start, head_end, body_start or body_end")
    order_index: int = 0
    is_enabled: bool = True
    page_ids: Optional[List[str]] = Field(None, description="Page IDs the snippet targets; empty means all")
    code: str = ""

    @field_validator("page_ids", mode="before")
    @classmethod
    def _stringify_page_ids(cls, value: Any) -> Optional[List[str]]:
        if not value:
            return None
        if isinstance(value, (list, tuple)):
            return [str(v) for v in value]
        return [str(value)]

    @field_validator("location")
    @classmethod
    def _known_location(cls, value: str) -> str:
        if value not in SnippetLocation.ALL:
            raise ValueError(f"Unknown snippet location: {value}")
        return value

    @property
    def override_key(self) -> tuple:
        """Identity used when a project snippet replaces a template snippet."""
        return (self.name, self.location)
