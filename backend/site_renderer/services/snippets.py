"""Code snippet merging, targeting and injection."""
import re
from typing import Dict, Iterable, List, Optional

from site_renderer.constants import SnippetLocation
from site_renderer.schemas.snippet import Snippet

HEAD_OPEN_RE = re.compile(r"<head(?:\s[^>]*)?>", re.IGNORECASE)
HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)
BODY_OPEN_RE = re.compile(r"<body(?:\s[^>]*)?>", re.IGNORECASE)
BODY_CLOSE_RE = re.compile(r"</body\s*>", re.IGNORECASE)


def merge_snippets(
    template_snippets: Iterable[Snippet],
    project_snippets: Iterable[Snippet],
) -> List[Snippet]:
    """
    Merge template and project snippets.

    A project snippet with the same ``(name, location)`` as a template snippet
    takes that snippet's place in the list. Remaining project snippets are
    appended in their own order.

    Args:
        template_snippets: Snippets of the project's template, in stored order
        project_snippets: Snippets attached directly to the project

    Returns:
        Merged snippet list
    """
    project_snippets = list(project_snippets)

    overrides: Dict[tuple, Snippet] = {}
    for snippet in project_snippets:
        overrides.setdefault(snippet.override_key, snippet)

    merged: List[Snippet] = []
    applied = set()
    for snippet in template_snippets:
        override = overrides.get(snippet.override_key)
        if override is not None and id(override) not in applied:
            merged.append(override)
            applied.add(id(override))
        else:
            merged.append(snippet)

    merged.extend(s for s in project_snippets if id(s) not in applied)
    return merged


def applies_to_page(snippet: Snippet, current_page_id: Optional[str]) -> bool:
    """Page targeting; an unknown current page (preview) matches everything."""
    if not snippet.page_ids:
        return True
    if current_page_id is None:
        return True
    return str(current_page_id) in snippet.page_ids


def group_by_location(
    snippets: Iterable[Snippet],
    current_page_id: Optional[str] = None,
) -> Dict[str, List[Snippet]]:
    """
    Filter snippets to the enabled, page-applicable ones and group them.

    Args:
        snippets: Merged snippet list
        current_page_id: ID of the page being rendered, None in previews

    Returns:
        Mapping of every location to its snippets sorted by ``order_index``
    """
    groups: Dict[str, List[Snippet]] = {location: [] for location in SnippetLocation.ALL}
    for snippet in snippets:
        if not snippet.is_enabled or not applies_to_page(snippet, current_page_id):
            continue
        groups[snippet.location].append(snippet)

    for location in groups:
        # sort() is stable, so merge order breaks order_index ties
        groups[location].sort(key=lambda s: s.order_index)
    return groups


def _insert_after(pattern: re.Pattern, html: str, code: str) -> str:
    match = pattern.search(html)
    if not match:
        return html
    return f"{html[:match.end()]}\n{code}{html[match.end():]}"


def _insert_before(pattern: re.Pattern, html: str, code: str, last: bool = False) -> str:
    matches = list(pattern.finditer(html)) if last else [pattern.search(html)]
    match = matches[-1] if matches else None
    if not match:
        return html
    return f"{html[:match.start()]}{code}\n{html[match.start():]}"


def inject_before_body_close(html: str, code: str) -> str:
    """Insert ``code`` before the last ``</body>``, or append it if there is none."""
    if not BODY_CLOSE_RE.search(html):
        return f"{html}{code}\n"
    return _insert_before(BODY_CLOSE_RE, html, code, last=True)


def inject_snippets(
    html: str,
    snippets: Iterable[Snippet],
    current_page_id: Optional[str] = None,
) -> str:
    """
    Inject applicable snippets at their document boundaries.

    ``head_start`` goes right after ``<head>``, ``head_end`` right before
    ``</head>``, ``body_start`` right after ``<body ...>`` (attributes kept)
    and ``body_end`` right before ``</body>``. Empty groups insert nothing.

    Args:
        html: Complete HTML document
        snippets: Merged snippet list
        current_page_id: ID of the page being rendered, None in previews

    Returns:
        Document with snippet code inserted
    """
    groups = group_by_location(snippets, current_page_id)

    def joined(location: str) -> str:
        return "\n".join(s.code for s in groups[location])

    result = html
    if groups[SnippetLocation.HEAD_START]:
        result = _insert_after(HEAD_OPEN_RE, result, joined(SnippetLocation.HEAD_START))
    if groups[SnippetLocation.HEAD_END]:
        result = _insert_before(HEAD_CLOSE_RE, result, joined(SnippetLocation.HEAD_END))
    if groups[SnippetLocation.BODY_START]:
        result = _insert_after(BODY_OPEN_RE, result, joined(SnippetLocation.BODY_START))
    if groups[SnippetLocation.BODY_END]:
        result = _insert_before(BODY_CLOSE_RE, result, joined(SnippetLocation.BODY_END), last=True)
    return result
