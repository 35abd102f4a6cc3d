"""Application-wide constants."""


class ProjectStatus:
    """Project pipeline status constants, in pipeline order."""
    CREATED = "CREATED"
    GBP_SELECTED = "GBP_SELECTED"
    GBP_SCRAPED = "GBP_SCRAPED"
    WEBSITE_SCRAPED = "WEBSITE_SCRAPED"
    IMAGES_ANALYZED = "IMAGES_ANALYZED"
    HTML_GENERATED = "HTML_GENERATED"
    READY = "READY"

    ORDER = (
        CREATED,
        GBP_SELECTED,
        GBP_SCRAPED,
        WEBSITE_SCRAPED,
        IMAGES_ANALYZED,
        HTML_GENERATED,
        READY,
    )

    # Statuses at which the generated site is served
    SERVABLE = frozenset({HTML_GENERATED, READY})

    @classmethod
    def label(cls, status: str) -> str:
        """Human readable label, e.g. ``WEBSITE_SCRAPED`` -> ``WEBSITE SCRAPED``."""
        return (status or "").replace("_", " ")


class PageStatus:
    """Page version status constants."""
    DRAFT = "draft"
    PUBLISHED = "published"
    INACTIVE = "inactive"


class TemplateStatus:
    """Template status constants."""
    DRAFT = "draft"
    PUBLISHED = "published"


class SnippetLocation:
    """Code snippet injection points."""
    HEAD_START = "head_start"
    HEAD_END = "head_end"
    BODY_START = "body_start"
    BODY_END = "body_end"

    ALL = (HEAD_START, HEAD_END, BODY_START, BODY_END)


# Wrapper placeholder replaced with the composed page body
SLOT_MARKER = "{{slot}}"

# Attribute that hides an element (and its subtree) from rendering
HIDDEN_ATTRIBUTE = "data-alloro-hidden"

# Attribute carried by the injected form handler <script> tag
FORM_HANDLER_MARKER = "data-alloro-form-handler"

# Forms carrying this attribute are left alone by the form handler
FORM_IGNORE_ATTRIBUTE = "data-alloro-ignore"

HOME_PATH = "/"
SUCCESS_PATH = "/success"
