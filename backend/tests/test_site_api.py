"""HTTP tests for the site rendering endpoints."""
from site_renderer.api.site import get_site_renderer
from site_renderer.constants import FORM_HANDLER_MARKER, PageStatus, ProjectStatus
from site_renderer.main import app
from site_renderer.services.site import SiteRenderer

HOST = "acme-clinic-4821.sites.localhost:7777"


def test_end_to_end_home_page(client, make_project, make_page):
    project = make_project(generated_hostname="acme-clinic-4821")
    make_page(project, sections=[{"name": "hero", "content": "<h1>Welcome</h1>"}])

    response = client.get("/", headers={"Host": HOST})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.text.startswith(
        f"<html><head></head><body><h1>Welcome</h1><script {FORM_HANDLER_MARKER}>"
    )
    assert response.text.endswith("</script>\n</body></html>")
    assert response.text.count(FORM_HANDLER_MARKER) == 1


def test_wrapped_sections_shape(client, make_project, make_page):
    project = make_project(generated_hostname="acme-clinic-4821")
    make_page(project, sections={"sections": [{"name": "hero", "content": "<h1>Wrapped</h1>"}]})
    assert "<h1>Wrapped</h1>" in client.get("/", headers={"Host": HOST}).text


def test_unknown_path_falls_back_to_home(client, make_project, make_page):
    project = make_project(generated_hostname="acme-clinic-4821")
    make_page(project, sections=[{"name": "hero", "content": "<h1>Home</h1>"}])

    response = client.get("/nonexistent", headers={"Host": HOST})

    assert response.status_code == 200
    assert "<h1>Home</h1>" in response.text


def test_unknown_site(client):
    response = client.get("/", headers={"Host": "ghost.sites.localhost"})
    assert response.status_code == 404
    assert "Site Not Found" in response.text


def test_site_not_ready(client, make_project):
    make_project(generated_hostname="acme-clinic-4821", status=ProjectStatus.WEBSITE_SCRAPED)
    response = client.get("/", headers={"Host": HOST})
    assert response.status_code == 200
    assert "WEBSITE SCRAPED" in response.text


def test_page_not_found(client, make_project, make_page):
    project = make_project(generated_hostname="acme-clinic-4821")
    make_page(project, path="/about", status=PageStatus.INACTIVE)
    response = client.get("/about", headers={"Host": HOST})
    assert response.status_code == 404
    assert "Page Not Found" in response.text


def test_verified_custom_domain(client, make_project, make_page):
    project = make_project(custom_domain="acmeclinic.com", verified=True)
    make_page(project, sections=[{"name": "hero", "content": "<h1>Custom</h1>"}])
    assert "<h1>Custom</h1>" in client.get("/", headers={"Host": "acmeclinic.com"}).text


def test_success_page(client, make_project):
    make_project(generated_hostname="acme-clinic-4821")
    response = client.get("/success", headers={"Host": HOST})
    assert response.status_code == 200
    assert "Thank You!" in response.text


def test_verify_domain(client, make_project):
    make_project(generated_hostname="acme-clinic-4821", custom_domain="acmeclinic.com", verified=True)
    assert client.get("/verify-domain").status_code == 400
    assert client.get("/verify-domain", params={"domain": "acme-clinic-4821.sites.getalloro.com"}).status_code == 200
    assert client.get("/verify-domain", params={"domain": "acmeclinic.com"}).status_code == 200
    assert client.get("/verify-domain", params={"domain": "elsewhere.com"}).status_code == 404


def test_favicon_and_health(client):
    assert client.get("/favicon.ico").status_code == 204
    assert client.get("/api/health").json() == {"status": "healthy"}


class _BrokenProjects:
    def get_by_hostname(self, hostname):
        raise RuntimeError("database unavailable")

    get_by_custom_domain = get_by_hostname


def test_unexpected_failure_renders_error_page(client):
    app.dependency_overrides[get_site_renderer] = lambda: SiteRenderer(_BrokenProjects(), None, None)

    response = client.get("/", headers={"Host": HOST})

    assert response.status_code == 500
    assert "Something went wrong" in response.text


def test_hidden_elements_removed_from_served_page(client, make_project, make_page):
    project = make_project(
        generated_hostname="acme-clinic-4821",
        header='<div><span data-alloro-hidden="true">X</span><p>Y</p></div>',
    )
    make_page(project, sections=[
        {"name": "hero", "content": "<h1>Welcome</h1>"},
        {"name": "promo", "content": '<div data-alloro-hidden="true">Sale</div>'},
    ])

    response = client.get("/", headers={"Host": HOST})

    assert response.status_code == 200
    assert "<body><div><p>Y</p></div>\n<h1>Welcome</h1><script" in response.text
    assert "Sale" not in response.text
    assert "data-alloro-hidden" not in response.text
