"""Value records for raw heading blocks and the documentation model."""

from __future__ import annotations

import enum
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Raw blocks (heading extractor output)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RawMemberBlock:
    """One ``h4`` heading and the bullets directly under it."""

    heading: str
    args: tuple[str, ...] = ()
    has_return: bool = False
    return_text: str | None = None


@dataclass(frozen=True)
class RawClassBlock:
    """One ``h3`` heading and the member blocks that follow it."""

    heading: str
    members: tuple[RawMemberBlock, ...] = ()


# ---------------------------------------------------------------------------
# Documentation model
# ---------------------------------------------------------------------------


class MemberKind(enum.Enum):
    """Kind of a documented class member."""

    CONSTRUCTOR = "constructor"
    METHOD = "method"
    PROPERTY = "property"
    EVENT = "event"


@dataclass(frozen=True)
class Argument:
    """A single raw argument token, e.g. ``options.timeout``."""

    name: str


@dataclass(frozen=True)
class Member:
    """A documented member. Only constructors and methods carry arguments."""

    kind: MemberKind
    name: str
    args: tuple[Argument, ...] = ()
    has_return: bool = False

    @classmethod
    def create_constructor(cls, args: tuple[Argument, ...], has_return: bool) -> Member:
        return cls(MemberKind.CONSTRUCTOR, "constructor", args, has_return)

    @classmethod
    def create_method(
        cls, name: str, args: tuple[Argument, ...], has_return: bool
    ) -> Member:
        return cls(MemberKind.METHOD, name, args, has_return)

    @classmethod
    def create_property(cls, name: str) -> Member:
        return cls(MemberKind.PROPERTY, name)

    @classmethod
    def create_event(cls, name: str) -> Member:
        return cls(MemberKind.EVENT, name)

    @property
    def is_callable(self) -> bool:
        return self.kind in (MemberKind.CONSTRUCTOR, MemberKind.METHOD)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-compatible dict."""
        data: dict[str, object] = {"kind": self.kind.value, "name": self.name}
        if self.is_callable:
            data["args"] = [arg.name for arg in self.args]
            data["has_return"] = self.has_return
        return data


@dataclass(frozen=True)
class Class:
    """A documented class: name plus members in heading order."""

    name: str
    members: tuple[Member, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "members": [m.to_dict() for m in self.members],
        }


@dataclass(frozen=True)
class Documentation:
    """The merged outline of a whole documentation corpus."""

    classes: tuple[Class, ...] = ()

    def class_names(self) -> list[str]:
        """Class names in corpus order. Names may repeat across files."""
        return [c.name for c in self.classes]

    def to_dict(self) -> dict[str, object]:
        return {"classes": [c.to_dict() for c in self.classes]}
