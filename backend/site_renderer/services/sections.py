"""Normalization of stored page sections.

Pages written by our own API store ``sections`` as a bare list, while the
generation pipeline writes ``{"sections": [...]}`` directly to the database.
Both shapes stay readable; anything else normalizes to an empty list.
"""
import json
from typing import Any, List

from pydantic import ValidationError

from site_renderer.schemas.section import Section


def _section_name(value: Any) -> str:
    # Stored names may be numbers
    return "" if value is None else str(value)


def normalize_sections(raw: Any) -> List[Section]:
    """
    Unwrap stored sections into an ordered list of ``Section`` values.

    Never raises. Items that are not ``{name, content}`` mappings are skipped.

    Args:
        raw: Value of ``Page.sections`` as loaded from the database

    Returns:
        Ordered list of sections (possibly empty)
    """
    if isinstance(raw, (str, bytes)):
        # JSON columns written as text by older producers
        try:
            raw = json.loads(raw)
        except ValueError:
            return []

    if isinstance(raw, dict):
        raw = raw.get("sections")

    if not isinstance(raw, list):
        return []

    sections = []
    for item in raw:
        if isinstance(item, Section):
            sections.append(item)
            continue
        if not isinstance(item, dict):
            continue
        try:
            sections.append(
                Section(
                    name=_section_name(item.get("name")),
                    content=item.get("content") or "",
                )
            )
        except ValidationError:
            continue
    return sections
