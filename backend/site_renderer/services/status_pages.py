"""Branded status pages shown instead of a generated site."""
from typing import Optional

from site_renderer.constants import ProjectStatus
from site_renderer.services.templating import render_template

BRAND_COLOR = "#d66853"
BRAND_COLOR_LIGHT = "#fdf3f1"

_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48" viewBox="0 0 24 24" fill="none" '
    'stroke="' + BRAND_COLOR + '" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">{}</svg>'
)

ICONS = {
    "rocket": _ICON.format(
        '<path d="M4.5 16.5c-1.5 1.26-2 5-2 5s3.74-.5 5-2c.71-.84.7-2.13-.09-2.91a2.18 2.18 0 0 0-2.91-.09z"/>'
        '<path d="m12 15-3-3a22 22 0 0 1 2-3.95A12.88 12.88 0 0 1 22 2c0 2.72-.78 7.5-6 11a22.35 22.35 0 0 1-4 2z"/>'
        '<path d="M9 12H4s.55-3.03 2-4c1.62-1.08 5 0 5 0"/><path d="M12 15v5s3.03-.55 4-2c1.08-1.62 0-5 0-5"/>'
    ),
    "search": _ICON.format('<circle cx="11" cy="11" r="8"/><path d="m21 21-4.3-4.3"/>'),
    "sparkles": _ICON.format(
        '<path d="M9.937 15.5A2 2 0 0 0 8.5 14.063l-6.135-1.582a.5.5 0 0 1 0-.962L8.5 9.936A2 2 0 0 0 '
        '9.937 8.5l1.582-6.135a.5.5 0 0 1 .963 0L14.063 8.5A2 2 0 0 0 15.5 9.937l6.135 1.581a.5.5 0 0 1 '
        '0 .964L15.5 14.063a2 2 0 0 0-1.437 1.437l-1.582 6.135a.5.5 0 0 1-.963 0z"/>'
        '<path d="M20 3v4"/><path d="M22 5h-4"/><path d="M4 17v2"/><path d="M5 18H3"/>'
    ),
    "clock": _ICON.format('<circle cx="12" cy="12" r="10"/><polyline points="12 6 12 12 16 14"/>'),
}

# (heading, message, icon) per pipeline stage
STATUS_MESSAGES = {
    ProjectStatus.CREATED: (
        "Getting Started",
        "We're setting up your website. This usually takes just a moment.",
        "rocket",
    ),
    ProjectStatus.GBP_SELECTED: (
        "Building Your Site",
        "We're gathering information about your business to create the perfect website.",
        "search",
    ),
    ProjectStatus.GBP_SCRAPED: (
        "Building Your Site",
        "We're gathering information about your business to create the perfect website.",
        "search",
    ),
    ProjectStatus.WEBSITE_SCRAPED: (
        "Creating Your Website",
        "Our AI is crafting a beautiful, custom website just for you.",
        "sparkles",
    ),
    ProjectStatus.IMAGES_ANALYZED: (
        "Creating Your Website",
        "Our AI is crafting a beautiful, custom website just for you.",
        "sparkles",
    ),
}
DEFAULT_STATUS_MESSAGE = (
    "Almost There",
    "Your website is being prepared. Please check back in a few moments.",
    "clock",
)


def _render(template: str, title: str, **context) -> str:
    return render_template(
        template,
        title=title,
        brand_color=BRAND_COLOR,
        brand_color_light=BRAND_COLOR_LIGHT,
        **context,
    )


def site_not_found_page(host: str) -> str:
    """Page for a hostname or domain that resolves to no project."""
    return _render("site_not_found.html", "Site Not Found", host=host or "")


def site_not_ready_page(status: str, business_name: Optional[str] = None) -> str:
    """
    Informational page for a project whose pipeline has not finished.

    Args:
        status: Project status value
        business_name: Optional business name for the heading

    Returns:
        HTML document
    """
    heading, message, icon = STATUS_MESSAGES.get(status, DEFAULT_STATUS_MESSAGE)
    title = f"{business_name} - Coming Soon" if business_name else "Coming Soon"
    return _render(
        "site_not_ready.html",
        title,
        heading=heading,
        message=message,
        icon=ICONS[icon],
        status_label=ProjectStatus.label(status),
        business_name=business_name,
    )


def page_not_found_page(business_name: Optional[str] = None) -> str:
    """Page for a path with no page and no home page to fall back to."""
    title = f"{business_name} - Page Not Found" if business_name else "Page Not Found"
    return _render("page_not_found.html", title, business_name=business_name)


def success_page(business_name: Optional[str] = None) -> str:
    """Thank-you page shown after a form submission."""
    title = f"{business_name} - Thank You" if business_name else "Thank You"
    return _render("success.html", title)


def error_page() -> str:
    """Generic page for unexpected failures."""
    return _render("error.html", "Error")
