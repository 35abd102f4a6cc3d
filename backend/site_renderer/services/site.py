"""Visitor request pipeline: resolve, gate, compose, inject."""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from pydantic import ValidationError

from site_renderer.constants import ProjectStatus, SUCCESS_PATH
from site_renderer.schemas.snippet import Snippet
from site_renderer.services.composer import compose_page
from site_renderer.services.form_handler import inject_form_handler
from site_renderer.services.resolution import normalize_path, parse_host, resolve_page, resolve_project
from site_renderer.services.sections import normalize_sections
from site_renderer.services.snippets import merge_snippets
from site_renderer.services import status_pages
from site_renderer.utils.logger import get_logger

logger = get_logger("render")


@dataclass
class SiteResponse:
    """Rendered HTML plus the HTTP status to send it with."""
    status_code: int
    html: str


def to_snippets(rows: Iterable) -> List[Snippet]:
    """Convert snippet rows to ``Snippet`` values, skipping malformed rows."""
    snippets = []
    for row in rows:
        try:
            snippets.append(Snippet.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping invalid code snippet {getattr(row, 'id', '?')}: {e}")
    return snippets


class SiteRenderer:
    """
    Renders generated sites for visitors.

    Holds no per-request state; the repositories are the only collaborators,
    so the renderer can be exercised with in-memory fakes.
    """

    def __init__(self, projects, pages, snippets, form_endpoint: Optional[str] = None):
        self.projects = projects
        self.pages = pages
        self.snippets = snippets
        self.form_endpoint = form_endpoint

    def is_servable(self, project) -> bool:
        """
        Readiness gate.

        A finished project is always served. An unfinished one is served only
        when it already has published output (a live site being regenerated).
        """
        if project.status in ProjectStatus.SERVABLE:
            return True
        return self.pages.has_published_pages(project.id)

    def load_snippets(self, project) -> List[Snippet]:
        """Template snippets merged with the project's own snippets."""
        template_rows = self.snippets.list_for_template(project.template_id) if project.template_id else []
        project_rows = self.snippets.list_for_project(project.id)
        return merge_snippets(to_snippets(template_rows), to_snippets(project_rows))

    def build_page(self, project, page) -> str:
        """Compose a page of a project and append the form handler."""
        page_id = str(page.id) if page.id is not None else None
        html = compose_page(
            project.wrapper,
            project.header,
            project.footer,
            normalize_sections(page.sections),
            self.load_snippets(project),
            page_id,
        )
        if self.form_endpoint:
            html = inject_form_handler(html, str(project.id), self.form_endpoint)
        return html

    def render(self, host: Optional[str], path: Optional[str]) -> SiteResponse:
        """
        Render the response for a visitor request.

        Args:
            host: Raw ``Host`` header
            path: Request path

        Returns:
            SiteResponse with 200 (page or not-ready) or 404 (unknown site or page)
        """
        site_host = parse_host(host)
        project = resolve_project(self.projects, site_host)
        if project is None:
            logger.info(f"No project for host {site_host.host!r}")
            return SiteResponse(404, status_pages.site_not_found_page(site_host.host))

        business_name = project.business_name
        if not self.is_servable(project):
            logger.debug(f"Project {project.id} not ready (status: {project.status})")
            return SiteResponse(200, status_pages.site_not_ready_page(project.status, business_name))

        page_path = normalize_path(path)
        page = resolve_page(self.pages, project.id, page_path)
        if page is None:
            logger.info(f"No page for {page_path} in project {project.id}")
            return SiteResponse(404, status_pages.page_not_found_page(business_name))

        return SiteResponse(200, self.build_page(project, page))

    def render_success(self, host: Optional[str]) -> SiteResponse:
        """
        Render the post-submission page.

        A project's own ``/success`` page wins over the built-in thank-you page.
        """
        site_host = parse_host(host)
        project = resolve_project(self.projects, site_host)
        if project is None:
            return SiteResponse(404, status_pages.site_not_found_page(site_host.host))

        if self.is_servable(project):
            page = self.pages.get_page_to_render(project.id, SUCCESS_PATH)
            if page is not None:
                return SiteResponse(200, self.build_page(project, page))

        return SiteResponse(200, status_pages.success_page(project.business_name))

    def verify_domain(self, domain: str) -> bool:
        """True if ``domain`` is a known generated subdomain or a verified custom domain."""
        return resolve_project(self.projects, parse_host(domain)) is not None
