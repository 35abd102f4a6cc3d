"""Shared pytest fixtures for site renderer tests."""
import os

# Settings are read at import time; point them at an in-memory database first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from site_renderer.constants import PageStatus, ProjectStatus
from site_renderer.database import Base, SessionLocal, engine, get_db
from site_renderer.main import app
from site_renderer.models import CodeSnippet, Page, Project, Template

SIMPLE_WRAPPER = "<html><head></head><body>{{slot}}</body></html>"


@pytest.fixture
def db():
    """Fresh schema and session per test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """TestClient sharing the test's database session."""
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_project(db):
    """Factory for persisted projects."""
    def _make(**fields) -> Project:
        fields.setdefault("user_id", "user-1")
        fields.setdefault("generated_hostname", f"site-{uuid.uuid4().hex[:8]}")
        fields.setdefault("status", ProjectStatus.READY)
        fields.setdefault("wrapper", SIMPLE_WRAPPER)
        if fields.pop("verified", False):
            fields["domain_verified_at"] = datetime.now(timezone.utc)
        project = Project(**fields)
        db.add(project)
        db.commit()
        db.refresh(project)
        return project
    return _make


@pytest.fixture
def make_page(db):
    """Factory for persisted page versions."""
    def _make(project: Project, path: str = "/", status: str = PageStatus.PUBLISHED, sections=None, version: int = 1) -> Page:
        page = Page(
            project_id=project.id,
            path=path,
            status=status,
            version=version,
            sections=sections if sections is not None else [{"name": "main", "content": f"<p>{path}</p>"}],
        )
        db.add(page)
        db.commit()
        db.refresh(page)
        return page
    return _make


@pytest.fixture
def make_template(db):
    """Factory for persisted templates."""
    def _make(**fields) -> Template:
        fields.setdefault("name", "Default")
        template = Template(**fields)
        db.add(template)
        db.commit()
        db.refresh(template)
        return template
    return _make


@pytest.fixture
def make_snippet(db):
    """Factory for persisted code snippets."""
    def _make(**fields) -> CodeSnippet:
        fields.setdefault("location", "head_end")
        fields.setdefault("order_index", 0)
        fields.setdefault("is_enabled", True)
        snippet = CodeSnippet(**fields)
        db.add(snippet)
        db.commit()
        db.refresh(snippet)
        return snippet
    return _make
