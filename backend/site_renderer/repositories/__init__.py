"""Repositories wrapping an explicit SQLAlchemy session."""
from site_renderer.repositories.projects import ProjectRepository
from site_renderer.repositories.pages import PageRepository
from site_renderer.repositories.templates import TemplateRepository
from site_renderer.repositories.snippets import SnippetRepository

__all__ = ["ProjectRepository", "PageRepository", "TemplateRepository", "SnippetRepository"]
