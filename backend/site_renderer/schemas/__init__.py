"""Pydantic schemas for render pipeline values."""
from site_renderer.schemas.section import Section
from site_renderer.schemas.snippet import Snippet

__all__ = ["Section", "Snippet"]
