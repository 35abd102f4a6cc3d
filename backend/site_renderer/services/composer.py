"""Page composition: wrapper + header + sections + footer + snippets."""
from typing import Iterable, Optional

from site_renderer.constants import SLOT_MARKER
from site_renderer.schemas.section import Section
from site_renderer.schemas.snippet import Snippet
from site_renderer.services.snippets import inject_snippets
from site_renderer.services.visibility import is_hidden_fragment, strip_hidden_elements

CONFIGURATION_ERROR_HTML = "\n".join([
    '<!doctype html><html><head><meta charset="UTF-8"></head><body>',
    '<div style="max-width:600px;margin:80px auto;font-family:system-ui;text-align:center">',
    '<h1 style="font-size:1.5rem;color:#991b1b">Configuration Error</h1>',
    '<p style="color:#6b7280;margin-top:12px">The site wrapper is missing the <code>{{slot}}</code> '
    'placeholder. Page content cannot be rendered.</p>',
    '</div></body></html>',
])


def compose_body(header: str, footer: str, sections: Iterable[Section]) -> str:
    """
    Build the page body: header, visible sections in order, footer.

    Top-level hidden sections are dropped, nested hidden elements are stripped
    from every part, and empty parts are left out of the newline join.

    Args:
        header: Project header HTML
        footer: Project footer HTML
        sections: Normalized page sections

    Returns:
        Body content for the wrapper slot
    """
    parts = [strip_hidden_elements(header or "")]
    for section in sections:
        if is_hidden_fragment(section.content):
            continue
        parts.append(strip_hidden_elements(section.content))
    parts.append(strip_hidden_elements(footer or ""))
    return "\n".join(part for part in parts if part)


def compose_page(
    wrapper: Optional[str],
    header: Optional[str],
    footer: Optional[str],
    sections: Iterable[Section],
    snippets: Optional[Iterable[Snippet]] = None,
    current_page_id: Optional[str] = None,
) -> str:
    """
    Assemble a full HTML document from a project's layout and page sections.

    An empty wrapper behaves as a bare ``{{slot}}``. A wrapper without the
    slot marker yields ``CONFIGURATION_ERROR_HTML``. The result is not
    sanitized; section content is generated, trusted HTML.

    Args:
        wrapper: Project wrapper document containing ``{{slot}}``
        header: Project header HTML
        footer: Project footer HTML
        sections: Normalized page sections
        snippets: Merged code snippets, if any
        current_page_id: ID of the page being rendered, None in previews

    Returns:
        Final HTML document
    """
    wrapper = wrapper or SLOT_MARKER
    if SLOT_MARKER not in wrapper:
        return CONFIGURATION_ERROR_HTML

    body = compose_body(header, footer, sections)
    html = wrapper.replace(SLOT_MARKER, body, 1)

    snippets = list(snippets or [])
    if snippets:
        html = inject_snippets(html, snippets, current_page_id)
    return html
