"""Consistency validator: cross-check classified headings against their bullets.

Each ``validate_*`` function either returns a :class:`Member` or ``None`` and
appends human-readable lint errors to the caller's list.  Checks never raise
and never stop early, so one malformed heading reports every defect at once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from doclint.outline.grammar import ConstructorHeading, MethodHeading
from doclint.outline.models import Argument, Member

if TYPE_CHECKING:
    from doclint.outline.grammar import EventHeading, PropertyHeading
    from doclint.outline.models import RawMemberBlock

RETURN_PREFIX = "returns: "


def normalize_parameters(params: str) -> str:
    """Trim and drop ``[``/``]`` (optional-parameter markers)."""
    return params.strip().replace("[", "").replace("]", "")


def check_return_text(member_heading: str, text: str) -> str | None:
    """Check that a return bullet starts with exactly ``returns: ``.

    The text is cut at the first ``<`` or just after the first space,
    whichever comes first (a missing character counts as end of string).
    Returns an error message, or *None* when the prefix is correct.
    """
    angle = text.find("<")
    space = text.find(" ")
    angle = len(text) if angle == -1 else angle
    space = len(text) if space == -1 else space + 1
    actual = text[: min(angle, space)]
    if actual == RETURN_PREFIX:
        return None
    return (
        f"{member_heading} has mistyped 'return' type declaration: "
        f"expected exactly '{RETURN_PREFIX}', found '{actual}'."
    )


def _same_class(captured: str, current_class: str | None) -> bool:
    return bool(current_class) and captured.lower() == current_class.lower()


def validate_method(
    raw: RawMemberBlock,
    heading: ConstructorHeading | MethodHeading,
    current_class: str | None,
    errors: list[str],
) -> Member | None:
    """Validate a constructor or method heading against its argument bullets."""
    member: Member | None = None

    if not _same_class(heading.class_name, current_class):
        errors.append(f"Failed to process header as method: {raw.heading}")
    else:
        declared = normalize_parameters(heading.params)
        described = ", ".join(raw.args)
        if declared != described:
            errors.append(
                f'Heading arguments for "{raw.heading}" do not match described ones, '
                f'i.e. "{declared}" != "{described}"'
            )
        args = tuple(Argument(token) for token in raw.args)
        if isinstance(heading, ConstructorHeading):
            member = Member.create_constructor(args, raw.has_return)
        else:
            member = Member.create_method(heading.method_name, args, raw.has_return)

    if raw.has_return and raw.return_text is not None:
        message = check_return_text(raw.heading, raw.return_text)
        if message is not None:
            errors.append(message)

    return member


def validate_property(
    raw: RawMemberBlock,
    heading: PropertyHeading,
    current_class: str | None,
    errors: list[str],
) -> Member | None:
    if not _same_class(heading.class_name, current_class):
        errors.append(f"Failed to process header as property: {raw.heading}")
        return None
    return Member.create_property(heading.property_name)


def validate_event(
    raw: RawMemberBlock,
    heading: EventHeading,
    current_class: str | None,
    errors: list[str],
) -> Member | None:
    if not current_class or not heading.event_name:
        errors.append(f"Failed to process header as event: {raw.heading}")
        return None
    return Member.create_event(heading.event_name)
