"""Main FastAPI application."""
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from site_renderer.api import site
from site_renderer.config import settings
from site_renderer.services.status_pages import error_page
from site_renderer.utils.logger import logger

# Interactive docs are disabled; every other path belongs to the generated sites
app = FastAPI(
    title="Site Renderer",
    description="Serves generated websites by hostname or custom domain",
    version="0.1.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Catch-all site router must be registered last
app.include_router(site.router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> HTMLResponse:
    """Render the generic error page for anything that escaped a route."""
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return HTMLResponse(error_page(), status_code=500)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("site_renderer.main:app", host=settings.api_host, port=settings.api_port)
