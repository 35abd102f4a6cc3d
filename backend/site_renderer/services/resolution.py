"""Resolution of inbound hosts to projects and request paths to pages."""
import re
from dataclasses import dataclass
from typing import Optional

from site_renderer.constants import HOME_PATH

SITE_SUBDOMAIN_RE = re.compile(r"^([^.]+)\.sites\.")


@dataclass(frozen=True)
class SiteHost:
    """Parsed ``Host`` header: either a generated hostname label or a custom domain."""
    host: str
    hostname: Optional[str] = None
    custom_domain: Optional[str] = None


def parse_host(host: Optional[str]) -> SiteHost:
    """
    Split a ``Host`` header into a generated hostname or a custom domain.

    ``acme-clinic-4821.sites.example.com`` yields the hostname label
    ``acme-clinic-4821``; anything else is a custom domain with the port
    stripped.

    Args:
        host: Raw ``Host`` header value

    Returns:
        SiteHost
    """
    host = (host or "").strip().lower()
    match = SITE_SUBDOMAIN_RE.match(host)
    if match:
        return SiteHost(host=host, hostname=match.group(1))

    domain = host.split(":")[0].rstrip(".")
    return SiteHost(host=host, custom_domain=domain or None)


def normalize_path(path: Optional[str]) -> str:
    """Canonical page path: leading slash, no trailing slash except for ``/``."""
    path = (path or "").split("?")[0].split("#")[0].strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or HOME_PATH
    return path


def resolve_project(projects, site_host: SiteHost):
    """
    Find the project served at a host.

    Args:
        projects: Project repository
        site_host: Parsed host

    Returns:
        Project instance or None
    """
    if site_host.hostname:
        return projects.get_by_hostname(site_host.hostname)
    if site_host.custom_domain:
        return projects.get_by_custom_domain(site_host.custom_domain)
    return None


def resolve_page(pages, project_id, path: str):
    """
    Find the page to render for a path.

    Published beats draft. Unknown non-root paths fall back to the home page.

    Args:
        pages: Page repository
        project_id: Project being served
        path: Normalized request path

    Returns:
        Page instance or None
    """
    page = pages.get_page_to_render(project_id, path)
    if page is None and path != HOME_PATH:
        page = pages.get_page_to_render(project_id, HOME_PATH)
    return page
