"""Tests for form handler injection."""
from site_renderer.constants import FORM_HANDLER_MARKER
from site_renderer.schemas.section import Section
from site_renderer.services.composer import compose_page
from site_renderer.services.form_handler import build_form_script, inject_form_handler

ENDPOINT = "https://api.example.com/api/websites/form-submission"
HTML = "<html><head></head><body><main>x</main></body></html>"


def test_script_inserted_before_body_close():
    result = inject_form_handler(HTML, "proj-1", ENDPOINT)
    assert result.startswith(f"<html><head></head><body><main>x</main><script {FORM_HANDLER_MARKER}>")
    assert result.endswith("</script>\n</body></html>")


def test_injection_is_idempotent():
    once = inject_form_handler(HTML, "proj-1", ENDPOINT)
    twice = inject_form_handler(once, "proj-1", ENDPOINT)
    assert twice == once
    assert twice.count(FORM_HANDLER_MARKER) == 1


def test_upstream_handler_is_respected():
    html = f"<html><body><script {FORM_HANDLER_MARKER}></script></body></html>"
    assert inject_form_handler(html, "proj-1", ENDPOINT) == html


def test_requires_project_and_endpoint():
    assert inject_form_handler(HTML, "", ENDPOINT) == HTML
    assert inject_form_handler(HTML, "proj-1", "") == HTML


def test_document_without_body_close_gets_script_appended():
    result = inject_form_handler("<p>fragment</p>", "proj-1", ENDPOINT)
    assert result.startswith("<p>fragment</p><script")
    assert result.count(FORM_HANDLER_MARKER) == 1


def test_script_contents():
    script = build_form_script("proj-1", ENDPOINT)
    assert '"proj-1"' in script
    assert f'"{ENDPOINT}"' in script
    assert "form:not([data-alloro-ignore])" in script
    assert "hp.name='website_url';hp.tabIndex=-1" in script
    assert "_hp:hp.value,_ts:_ts,_jsc:_jsc" in script
    assert "window.location.href='/success'" in script


def test_project_id_cannot_break_out_of_script():
    script = build_form_script('</script><script>alert(1)</script>', ENDPOINT)
    assert script.count("</script>") == 1


def test_composed_page_with_handler():
    html = compose_page(
        "<html><head></head><body>{{slot}}</body></html>",
        "",
        "",
        [Section(name="hero", content="<h1>Welcome</h1>")],
    )
    result = inject_form_handler(html, "proj-1", ENDPOINT)
    assert result.startswith("<html><head></head><body><h1>Welcome</h1><script data-alloro-form-handler>")
    assert result.endswith("</script>\n</body></html>")
