"""Models package."""
from site_renderer.models.template import Template
from site_renderer.models.project import Project
from site_renderer.models.page import Page
from site_renderer.models.code_snippet import CodeSnippet

__all__ = ["Template", "Project", "Page", "CodeSnippet"]
