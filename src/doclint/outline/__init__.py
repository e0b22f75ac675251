"""Outline domain: heading extraction, grammar, validation, model building."""

from doclint.outline.builder import Outline, OutlineBuilder, build_outline
from doclint.outline.extractor import (
    HeadingExtractor,
    SoupHeadingExtractor,
    extract_outline,
    render_markdown,
)
from doclint.outline.grammar import (
    ClassHeading,
    ConstructorHeading,
    EventHeading,
    MethodHeading,
    PropertyHeading,
    UnrecognizedHeading,
    classify_class_heading,
    classify_member_heading,
)
from doclint.outline.models import (
    Argument,
    Class,
    Documentation,
    Member,
    MemberKind,
    RawClassBlock,
    RawMemberBlock,
)
from doclint.outline.validator import (
    RETURN_PREFIX,
    check_return_text,
    normalize_parameters,
    validate_event,
    validate_method,
    validate_property,
)

__all__ = [
    "RETURN_PREFIX",
    "Argument",
    "Class",
    "ClassHeading",
    "ConstructorHeading",
    "Documentation",
    "EventHeading",
    "HeadingExtractor",
    "Member",
    "MemberKind",
    "MethodHeading",
    "Outline",
    "OutlineBuilder",
    "PropertyHeading",
    "RawClassBlock",
    "RawMemberBlock",
    "SoupHeadingExtractor",
    "UnrecognizedHeading",
    "build_outline",
    "check_return_text",
    "classify_class_heading",
    "classify_member_heading",
    "extract_outline",
    "normalize_parameters",
    "render_markdown",
    "validate_event",
    "validate_method",
    "validate_property",
]
