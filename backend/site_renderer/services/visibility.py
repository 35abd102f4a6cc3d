"""Removal of elements flagged ``data-alloro-hidden="true"``.

Fragments are walked with an HTML tokenizer that tracks the open-element
stack, so a hidden element is removed together with its whole subtree even
when it contains elements of the same tag name. End tags that HTML lets
authors omit (``</p>``, ``</li>``, ...) are implied the way a browser implies
them. Everything outside the removed ranges is kept byte for byte.
"""
from html.parser import HTMLParser
from typing import List, Optional, Tuple

from site_renderer.constants import HIDDEN_ATTRIBUTE
from site_renderer.utils.logger import get_logger

logger = get_logger("visibility")

VOID_ELEMENTS = frozenset([
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
])

# Start tags that close an open <p>
P_CLOSERS = frozenset([
    "address", "article", "aside", "blockquote", "details", "dialog", "div",
    "dl", "fieldset", "figcaption", "figure", "footer", "form", "h1", "h2",
    "h3", "h4", "h5", "h6", "header", "hgroup", "hr", "main", "menu", "nav",
    "ol", "p", "pre", "section", "table", "ul",
])

# Elements with an optional end tag -> start tags that imply it
IMPLIED_END = {
    "p": P_CLOSERS,
    "li": frozenset(["li"]),
    "dt": frozenset(["dt", "dd"]),
    "dd": frozenset(["dt", "dd"]),
    "option": frozenset(["option", "optgroup"]),
    "tr": frozenset(["tr"]),
    "td": frozenset(["td", "th", "tr"]),
    "th": frozenset(["td", "th", "tr"]),
}

# An implied end tag never reaches past these open elements
SCOPE_BOUNDARIES = frozenset([
    "button", "caption", "dl", "object", "ol", "select", "table", "template", "tr", "ul",
])


def _is_hidden(attrs: List[Tuple[str, Optional[str]]]) -> bool:
    for name, value in attrs:
        if name == HIDDEN_ATTRIBUTE and value is not None and value.strip().lower() == "true":
            return True
    return False


def _may_contain_hidden(html: str) -> bool:
    return bool(html) and HIDDEN_ATTRIBUTE in html.lower()


class _SourceParser(HTMLParser):
    """HTMLParser that can turn ``getpos()`` into an offset in the fed source."""

    def __init__(self, source: str):
        super().__init__(convert_charrefs=False)
        self.source = source
        self._line_starts = [0]
        for index, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(index + 1)

    # HTMLParser keeps its own ``offset`` attribute; don't shadow it
    def source_offset(self) -> int:
        """Offset of the token currently being handled."""
        line, column = self.getpos()
        return self._line_starts[line - 1] + column

    def run(self) -> bool:
        """Parse the whole source. False if the tokenizer gave up on it."""
        try:
            self.feed(self.source)
            self.close()
        except AssertionError as e:
            # Raised by the tokenizer for unknown marked sections (<![foo[ ... ]]>)
            logger.warning(f"Could not parse fragment for hidden elements: {e}")
            return False
        return True


class _RootTagInspector(_SourceParser):
    """Looks at the first tag of a fragment only."""

    def __init__(self, source: str):
        super().__init__(source)
        self.done = False
        self.hidden = False

    def _first_tag(self, attrs):
        if not self.done:
            # Only leading whitespace may precede the root tag
            self.hidden = not self.source[:self.source_offset()].strip() and _is_hidden(attrs)
            self.done = True

    def handle_starttag(self, tag, attrs):
        self._first_tag(attrs)

    def handle_startendtag(self, tag, attrs):
        self._first_tag(attrs)

    def handle_data(self, data):
        if data.strip():
            self.done = True

    def handle_comment(self, data):
        self.done = True

    def handle_decl(self, decl):
        self.done = True


class _HiddenRangeCollector(_SourceParser):
    """
    Collects ``(start, end)`` source ranges of hidden subtrees.

    A hidden element that is still open when the fragment ends is reported in
    ``unclosed`` (its start tag range) unless its end tag is optional, in which
    case the fragment end closes it.
    """

    def __init__(self, source: str):
        super().__init__(source)
        self.ranges: List[Tuple[int, int]] = []
        self.unclosed: Optional[Tuple[int, int]] = None
        # (tag, start offset, start tag end offset, is outermost hidden element)
        self._stack: List[Tuple[str, int, int, bool]] = []
        self._hidden_depth = 0

    def _pop_to(self, index: int, end: int):
        """Close every open element from the top of the stack down to ``index``."""
        while len(self._stack) > index:
            _tag, open_start, _tag_end, hidden_root = self._stack.pop()
            if self._hidden_depth:
                self._hidden_depth -= 1
            if hidden_root:
                self.ranges.append((open_start, end))

    def _close_implied(self, tag: str, at: int):
        closed = True
        while closed:
            closed = False
            for index in range(len(self._stack) - 1, -1, -1):
                open_tag = self._stack[index][0]
                if tag in IMPLIED_END.get(open_tag, ()):
                    self._pop_to(index, at)
                    closed = True
                    break
                if open_tag in SCOPE_BOUNDARIES:
                    break

    def handle_starttag(self, tag, attrs):
        start = self.source_offset()
        tag_end = start + len(self.get_starttag_text())
        self._close_implied(tag, start)
        hidden_root = self._hidden_depth == 0 and _is_hidden(attrs)

        if tag in VOID_ELEMENTS:
            if hidden_root:
                self.ranges.append((start, tag_end))
            return

        self._stack.append((tag, start, tag_end, hidden_root))
        if hidden_root or self._hidden_depth:
            self._hidden_depth += 1

    def handle_startendtag(self, tag, attrs):
        start = self.source_offset()
        self._close_implied(tag, start)
        if self._hidden_depth == 0 and _is_hidden(attrs):
            self.ranges.append((start, start + len(self.get_starttag_text())))

    def handle_endtag(self, tag):
        index = None
        for position in range(len(self._stack) - 1, -1, -1):
            if self._stack[position][0] == tag:
                index = position
                break
        if index is None:
            # Stray closing tag
            return

        start = self.source_offset()
        close = self.source.find(">", start)
        end = len(self.source) if close == -1 else close + 1

        # Children left open are closed by the ancestor's end tag
        self._pop_to(index + 1, start)
        self._pop_to(index, end)

    def close(self):
        super().close()
        for tag, open_start, tag_end, hidden_root in self._stack:
            if not hidden_root:
                continue
            if tag in IMPLIED_END:
                self.ranges.append((open_start, len(self.source)))
            else:
                self.unclosed = (open_start, tag_end)
            break
        self._stack = []
        self._hidden_depth = 0


def is_hidden_fragment(html: str) -> bool:
    """
    Check whether a fragment's root element is flagged hidden.

    Args:
        html: Section, header or footer HTML

    Returns:
        True if the first tag (after leading whitespace) carries the marker
    """
    if not _may_contain_hidden(html):
        return False
    inspector = _RootTagInspector(html)
    return inspector.run() and inspector.hidden


def strip_hidden_elements(html: str) -> str:
    """
    Remove every element flagged hidden, including its subtree.

    A hidden element whose end tag is required but missing loses only its
    start tag; its content is then checked again on its own.

    Args:
        html: Section, header or footer HTML

    Returns:
        The fragment with hidden subtrees removed; unchanged otherwise
    """
    if not _may_contain_hidden(html):
        return html or ""

    collector = _HiddenRangeCollector(html)
    if not collector.run():
        return html

    limit = len(html)
    tail = ""
    if collector.unclosed is not None:
        limit, tag_end = collector.unclosed
        tail = strip_hidden_elements(html[tag_end:])

    ranges = sorted(r for r in collector.ranges if r[0] < limit)
    if not ranges and collector.unclosed is None:
        return html

    pieces = []
    cursor = 0
    for start, end in ranges:
        if start < cursor:
            continue
        pieces.append(html[cursor:start])
        cursor = end
    pieces.append(html[cursor:limit])
    pieces.append(tail)
    return "".join(pieces)
