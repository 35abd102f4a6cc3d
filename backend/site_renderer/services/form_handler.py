"""Injection of the client-side form submission handler.

The injected script intercepts every form on the page (except those marked
``data-alloro-ignore``), adds a honeypot field and an attribution badge, and
posts the labeled field values to the form-submission API. The computed
``_jsc`` value is a fixed arithmetic loop: a soft bot signal, not a security
control.
"""
from site_renderer.constants import FORM_HANDLER_MARKER, FORM_IGNORE_ATTRIBUTE
from site_renderer.services.snippets import inject_before_body_close
from site_renderer.services.templating import render_template


def build_form_script(project_id: str, endpoint: str) -> str:
    """
    Render the form handler ``<script>`` for a project.

    Args:
        project_id: Project the submissions are attributed to
        endpoint: Absolute URL of the form-submission API

    Returns:
        Self-contained ``<script>`` element
    """
    return render_template(
        "form_handler.html",
        marker=FORM_HANDLER_MARKER,
        ignore_attribute=FORM_IGNORE_ATTRIBUTE,
        project_id=str(project_id),
        endpoint=endpoint,
    )


def has_form_handler(html: str) -> bool:
    """True when the document already carries a form handler."""
    return FORM_HANDLER_MARKER in html


def inject_form_handler(html: str, project_id: str, endpoint: str) -> str:
    """
    Append the form handler before ``</body>`` unless one is already present.

    Args:
        html: Finished HTML document
        project_id: Project the submissions are attributed to
        endpoint: Absolute URL of the form-submission API

    Returns:
        Document containing exactly one form handler
    """
    if not project_id or not endpoint or has_form_handler(html):
        return html
    return inject_before_body_close(html, build_form_script(project_id, endpoint))
