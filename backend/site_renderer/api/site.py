"""Visitor-facing site rendering endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from site_renderer.config import settings
from site_renderer.database import get_db
from site_renderer.repositories import PageRepository, ProjectRepository, SnippetRepository
from site_renderer.services.site import SiteRenderer
from site_renderer.services.status_pages import error_page
from site_renderer.utils.exceptions import validation_error
from site_renderer.utils.logger import logger

router = APIRouter(tags=["site"])


def get_site_renderer(db: Session = Depends(get_db)) -> SiteRenderer:
    """Dependency building a renderer bound to the request's database session."""
    return SiteRenderer(
        projects=ProjectRepository(db),
        pages=PageRepository(db),
        snippets=SnippetRepository(db),
        form_endpoint=settings.form_submission_endpoint if settings.form_handler_enabled else None,
    )


def _error_response() -> HTMLResponse:
    return HTMLResponse(error_page(), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/favicon.ico", include_in_schema=False)
async def favicon() -> Response:
    """Favicons are not served by generated sites."""
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/verify-domain")
async def verify_domain(
    domain: Optional[str] = Query(None, description="Domain the proxy wants a certificate for"),
    renderer: SiteRenderer = Depends(get_site_renderer),
) -> Response:
    """
    On-demand TLS admission check for the reverse proxy.

    Args:
        domain: ``{hostname}.sites.*`` subdomain or custom domain
        renderer: Site renderer

    Returns:
        Empty 200 if the domain belongs to a project, empty 404 otherwise
    """
    if not domain:
        raise validation_error("domain query parameter is required")

    if renderer.verify_domain(domain):
        return Response(status_code=status.HTTP_200_OK)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/success", response_class=HTMLResponse)
async def success(
    request: Request,
    renderer: SiteRenderer = Depends(get_site_renderer),
) -> HTMLResponse:
    """Landing page after a successful form submission."""
    host = request.headers.get("host")
    try:
        result = renderer.render_success(host)
        return HTMLResponse(result.html, status_code=result.status_code)
    except Exception as e:
        logger.error(f"Failed to render success page for {host}: {e}", exc_info=True)
        return _error_response()


@router.get("/{full_path:path}", response_class=HTMLResponse)
async def render_site(
    request: Request,
    full_path: str,
    renderer: SiteRenderer = Depends(get_site_renderer),
) -> HTMLResponse:
    """
    Render a generated site page for the requesting host.

    Args:
        request: Incoming request (the Host header selects the project)
        full_path: Requested page path
        renderer: Site renderer

    Returns:
        The composed page, or a status page
    """
    host = request.headers.get("host")
    try:
        result = renderer.render(host, request.url.path)
        return HTMLResponse(result.html, status_code=result.status_code)
    except Exception as e:
        logger.error(f"Failed to render {host}{request.url.path}: {e}", exc_info=True)
        return _error_response()
