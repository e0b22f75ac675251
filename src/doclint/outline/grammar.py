"""Grammar classifier: map raw heading text to a member or class shape.

Member headings are tried in a fixed order and the first match wins::

    new Browser(options)          -> ConstructorHeading
    Browser.close(force)          -> MethodHeading
    Browser.version               -> PropertyHeading
    event: 'disconnected'         -> EventHeading

Anything else is an ``UnrecognizedHeading``.  Class headings
(``class: Browser``) are classified separately.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_CLASS_RE = re.compile(r"class: (\w+)", re.ASCII)
_CONSTRUCTOR_RE = re.compile(r"new (\w+)\((.*)\)", re.ASCII)
_METHOD_RE = re.compile(r"(\w+)\.(\w+)\((.*)\)", re.ASCII)
_PROPERTY_RE = re.compile(r"(\w+)\.(\w+)", re.ASCII)
_EVENT_RE = re.compile(r"event: '(\w+)'", re.ASCII)


@dataclass(frozen=True)
class ClassHeading:
    class_name: str


@dataclass(frozen=True)
class ConstructorHeading:
    class_name: str
    params: str


@dataclass(frozen=True)
class MethodHeading:
    class_name: str
    method_name: str
    params: str


@dataclass(frozen=True)
class PropertyHeading:
    class_name: str
    property_name: str


@dataclass(frozen=True)
class EventHeading:
    event_name: str


@dataclass(frozen=True)
class UnrecognizedHeading:
    text: str


MemberHeading = (
    ConstructorHeading | MethodHeading | PropertyHeading | EventHeading | UnrecognizedHeading
)


def classify_class_heading(text: str) -> ClassHeading | None:
    """Return the class heading shape, or *None* when *text* is not ``class: Name``."""
    match = _CLASS_RE.fullmatch(text)
    if match is None:
        return None
    return ClassHeading(match.group(1))


def classify_member_heading(text: str) -> MemberHeading:
    """Classify a member heading. Precedence: constructor, method, property, event."""
    if match := _CONSTRUCTOR_RE.fullmatch(text):
        return ConstructorHeading(match.group(1), match.group(2))
    if match := _METHOD_RE.fullmatch(text):
        return MethodHeading(match.group(1), match.group(2), match.group(3))
    if match := _PROPERTY_RE.fullmatch(text):
        return PropertyHeading(match.group(1), match.group(2))
    if match := _EVENT_RE.fullmatch(text):
        return EventHeading(match.group(1))
    return UnrecognizedHeading(text)
