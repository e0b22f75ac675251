"""Documentation model builder: accumulate members per class, flush on boundaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from doclint.outline.grammar import (
    ConstructorHeading,
    EventHeading,
    MethodHeading,
    PropertyHeading,
    classify_class_heading,
    classify_member_heading,
)
from doclint.outline.models import Class
from doclint.outline.validator import validate_event, validate_method, validate_property

if TYPE_CHECKING:
    from collections.abc import Iterable

    from doclint.outline.models import Member, RawClassBlock, RawMemberBlock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outline:
    """Classes and lint errors produced from one file."""

    classes: tuple[Class, ...] = ()
    errors: tuple[str, ...] = ()


@dataclass
class OutlineBuilder:
    """State machine over class and member headings.

    ``current_class`` is the open class (``None`` before the first
    ``class:`` heading); its members are pushed to ``classes`` by
    :meth:`flush`, which runs on the next class heading or at end of input.
    """

    current_class: str | None = None
    current_members: list[Member] = field(default_factory=list)
    classes: list[Class] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def open_class(self, name: str) -> None:
        self.flush()
        self.current_class = name
        self.current_members = []

    def add_member(self, raw: RawMemberBlock) -> Member | None:
        """Classify and validate *raw*; append the member when accepted."""
        heading = classify_member_heading(raw.heading)
        member: Member | None
        if isinstance(heading, (ConstructorHeading, MethodHeading)):
            member = validate_method(raw, heading, self.current_class, self.errors)
        elif isinstance(heading, PropertyHeading):
            member = validate_property(raw, heading, self.current_class, self.errors)
        elif isinstance(heading, EventHeading):
            member = validate_event(raw, heading, self.current_class, self.errors)
        else:
            # Unrecognized member headings are not lint errors.
            logger.debug("Skipping unrecognized member heading: %r", raw.heading)
            return None
        if member is not None:
            self.current_members.append(member)
        return member

    def flush(self) -> None:
        if self.current_class is None:
            return
        self.classes.append(Class(self.current_class, tuple(self.current_members)))
        self.current_class = None
        self.current_members = []

    def result(self) -> Outline:
        return Outline(tuple(self.classes), tuple(self.errors))


def build_outline(raw_classes: Iterable[RawClassBlock]) -> Outline:
    """Run the classifier and validator over extracted blocks of one file."""
    builder = OutlineBuilder()
    for block in raw_classes:
        heading = classify_class_heading(block.heading)
        if heading is None:
            logger.debug("Skipping non-class heading: %r", block.heading)
            continue
        builder.open_class(heading.class_name)
        for raw in block.members:
            builder.add_member(raw)
        builder.flush()
    return builder.result()
