"""Table-of-contents insertion between ``<!-- toc -->`` / ``<!-- tocstop -->`` markers.

The generated list is compatible with what ``markdown-toc`` writes::

    <!-- toc -->

    - [class: Browser](#class-browser)
      * [browser.close()](#browserclose)
      * [event: 'disconnected'](#event-disconnected)

    <!-- tocstop -->

Only headings after the markers are listed.  Applying :func:`insert_toc` to
its own output returns the same text, so a file is fresh exactly when the
transform leaves it unchanged.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from markdown.extensions.toc import slugify

logger = logging.getLogger(__name__)

TOC_OPEN = "<!-- toc -->"
TOC_CLOSE = "<!-- tocstop -->"
DEFAULT_MAX_DEPTH = 6

_MARKER_RE = re.compile(r"<!-- toc(?:\s*stop)? -->")
_ATX_RE = re.compile(r"^(#{1,6})[ \t]+(.*?)(?:[ \t]+#+)?[ \t]*$")
_FENCE_RE = re.compile(r"^[ \t]{0,3}(`{3,}|~{3,})(.*)$")
_BULLETS = ("-", "*", "+")


class TocError(ValueError):
    """Raised when a file's TOC markers cannot be interpreted."""


@dataclass(frozen=True)
class TocHeading:
    level: int
    title: str
    slug: str


def _iter_atx_headings(text: str) -> list[tuple[int, str]]:
    """ATX headings as ``(level, title)``, skipping fenced code blocks."""
    headings: list[tuple[int, str]] = []
    fence: str | None = None
    for line in text.splitlines():
        fence_match = _FENCE_RE.match(line)
        if fence_match:
            marker, info = fence_match.groups()
            if fence is None:
                fence = marker
                continue
            # A closing fence has no info string and is at least as long as the opener.
            if marker[0] == fence[0] and len(marker) >= len(fence) and not info.strip():
                fence = None
                continue
        if fence is not None:
            continue
        match = _ATX_RE.match(line)
        if match and match.group(2):
            headings.append((len(match.group(1)), match.group(2)))
    return headings


def collect_headings(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[TocHeading]:
    """Collect TOC entries from *text*.

    The first level-1 heading (the document title) is left out, as are
    headings deeper than *max_depth*.  Repeated slugs get ``-1``, ``-2``...
    """
    result: list[TocHeading] = []
    seen: dict[str, int] = {}
    skipped_title = False
    for level, title in _iter_atx_headings(text):
        if level == 1 and not skipped_title:
            skipped_title = True
            continue
        if level > max_depth:
            continue
        base = slugify(title, "-")
        count = seen.get(base, 0)
        seen[base] = count + 1
        slug = base if count == 0 else f"{base}-{count}"
        result.append(TocHeading(level, title, slug))
    return result


def render_toc(headings: list[TocHeading]) -> str:
    """Render entries as a nested bullet list (two spaces per level)."""
    if not headings:
        return ""
    highest = min(h.level for h in headings)
    lines: list[str] = []
    for heading in headings:
        depth = heading.level - highest
        bullet = _BULLETS[depth % len(_BULLETS)]
        lines.append(f"{'  ' * depth}{bullet} [{heading.title}](#{heading.slug})")
    return "\n".join(lines)


def insert_toc(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Insert or refresh the TOC between the markers of *text*.

    Text without an opening ``<!-- toc -->`` marker is returned unchanged.

    Raises
    ------
    TocError
        When the file has more than one TOC or a ``tocstop`` before ``toc``.
    """
    markers = [m.group(0) for m in _MARKER_RE.finditer(text)]
    if TOC_OPEN not in markers:
        return text
    if markers.count(TOC_OPEN) > 1 or markers.count(TOC_CLOSE) > 1:
        msg = "only one table of contents per file is supported"
        raise TocError(msg)
    if markers[0] != TOC_OPEN:
        msg = f"'{TOC_CLOSE}' appears before '{TOC_OPEN}'"
        raise TocError(msg)

    trailing = text[len(text.rstrip("\n")):]
    sections = [part.strip() for part in _MARKER_RE.split(text)]
    before = sections[0]
    after = sections[-1]

    body = render_toc(collect_headings(after, max_depth=max_depth))
    block = f"{TOC_OPEN}\n\n{body}\n\n{TOC_CLOSE}" if body else f"{TOC_OPEN}\n\n{TOC_CLOSE}"

    parts = [part for part in (before, block, after) if part]
    return "\n\n".join(parts) + trailing


def is_toc_fresh(text: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    """True when regenerating the TOC would not change *text*."""
    return insert_toc(text, max_depth=max_depth) == text
