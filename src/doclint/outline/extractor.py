"""Heading extractor: markdown -> HTML -> raw class/member blocks.

Rendering uses markdown-it-py's CommonMark preset, so a list indented by
two spaces under a bullet nests the way API docs expect.  The HTML is then
walked with BeautifulSoup in document order over ``h3``, ``h4`` and
``h4 + ul > li`` elements.  The
outline builder only depends on the :class:`HeadingExtractor` protocol, so
another HTML engine can be plugged in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag
from markdown_it import MarkdownIt

from doclint.outline.models import RawClassBlock, RawMemberBlock

if TYPE_CHECKING:
    from bs4.element import PageElement

logger = logging.getLogger(__name__)

# Elements that make up an outline, in the order a browser would report them.
_OUTLINE_SELECTOR = "h3, h4, h4 + ul > li"

_RENDERER = MarkdownIt("commonmark")


class HeadingExtractor(Protocol):
    """Anything that turns rendered HTML into raw class blocks."""

    def extract(self, html: str) -> list[RawClassBlock]: ...


def render_markdown(text: str) -> str:
    """Render markdown source to an HTML fragment (CommonMark)."""
    return _RENDERER.render(text)


# ---------------------------------------------------------------------------
# Mutable accumulators used while walking the DOM
# ---------------------------------------------------------------------------


@dataclass
class _MemberDraft:
    heading: str
    args: list[str] = field(default_factory=list)
    has_return: bool = False
    return_text: str | None = None

    def freeze(self) -> RawMemberBlock:
        return RawMemberBlock(
            self.heading, tuple(self.args), self.has_return, self.return_text
        )


@dataclass
class _ClassDraft:
    heading: str
    members: list[_MemberDraft] = field(default_factory=list)

    def freeze(self) -> RawClassBlock:
        return RawClassBlock(self.heading, tuple(m.freeze() for m in self.members))


def _first_child(element: Tag) -> PageElement | None:
    return element.contents[0] if element.contents else None


class SoupHeadingExtractor:
    """BeautifulSoup implementation of :class:`HeadingExtractor`."""

    def __init__(self, parser: str = "html.parser") -> None:
        self.parser = parser

    def extract(self, html: str) -> list[RawClassBlock]:
        soup = BeautifulSoup(html, self.parser)
        classes: list[_ClassDraft] = []
        current_class: _ClassDraft | None = None
        member: _MemberDraft | None = None

        for element in soup.select(_OUTLINE_SELECTOR):
            if element.name == "h3":
                current_class = _ClassDraft(element.get_text())
                classes.append(current_class)
                member = None
            elif element.name == "h4":
                if current_class is None:
                    logger.debug("Member heading before any class: %r", element.get_text())
                    member = None
                    continue
                member = _MemberDraft(element.get_text())
                current_class.members.append(member)
            elif member is not None:
                self._read_bullet(element, member)

        return [c.freeze() for c in classes]

    @staticmethod
    def _read_bullet(item: Tag, member: _MemberDraft) -> None:
        first = _first_child(item)
        if isinstance(first, Tag):
            if first.name == "code":
                member.args.append(first.get_text())
            return
        if isinstance(first, NavigableString) and not isinstance(first, Comment):
            text = str(first)
            if text.lower().startswith("retur"):
                member.has_return = True
                if member.return_text is None:
                    member.return_text = text


def extract_outline(
    text: str, extractor: HeadingExtractor | None = None
) -> list[RawClassBlock]:
    """Render *text* and extract its raw class blocks."""
    extractor = extractor or SoupHeadingExtractor()
    return extractor.extract(render_markdown(text))
