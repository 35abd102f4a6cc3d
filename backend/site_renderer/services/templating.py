"""Jinja2 environment for server-rendered pages and scripts."""
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Shared Jinja2 environment with autoescaping for ``.html`` templates."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        keep_trailing_newline=False,
    )


def render_template(name: str, **context) -> str:
    """Render a package template by file name."""
    return get_environment().get_template(name).render(**context)
