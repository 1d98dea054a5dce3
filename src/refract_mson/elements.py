"""Typed Refract element tree for refract-mson.

Elements are frozen dataclasses with slots, so a tree can be shared freely
and is never modified while it is rendered.

Element Kinds:
ElementKind
├── Scalars: STRING, NUMBER, BOOLEAN, NULL
├── Containers: OBJECT, ARRAY, ENUM, DATA_STRUCTURE
├── Structure: MEMBER (key/value field), REF (inclusion)
├── Variants: SELECT, OPTION (unsupported, reported and skipped)
└── OTHER (named types and unknown tags, rendered array-like)

Content Shapes:
- scalar literal (str, int, float, bool)
- tuple of child Elements
- a single wrapped Element (e.g. the body of a dataStructure)
- MemberContent for ``member``, RefContent for ``ref``
- None when the element declares no content

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ElementKind(Enum):
    """Known Refract element tags."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    OBJECT = "object"
    ARRAY = "array"
    ENUM = "enum"
    MEMBER = "member"
    REF = "ref"
    SELECT = "select"
    OPTION = "option"
    DATA_STRUCTURE = "dataStructure"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: str) -> ElementKind:
        """Map a type tag to its kind, falling back to OTHER."""
        return _KINDS_BY_TAG.get(tag, cls.OTHER)


_KINDS_BY_TAG: dict[str, ElementKind] = {
    kind.value: kind for kind in ElementKind if kind is not ElementKind.OTHER
}

# Tags considered implicit; never written as a type label.
IMPLICIT_TYPES = frozenset({"string", "dataStructure"})


@dataclass(frozen=True, slots=True)
class Meta:
    """Element metadata.

    Values may be plain strings or wrapped string elements (Refract 1.0);
    resolve them through ``to_value`` or the Element accessors.

    """

    id: Any = None
    title: Any = None
    description: Any = None


@dataclass(frozen=True, slots=True)
class MemberContent:
    """Content of a ``member`` element: one object field."""

    key: Element | None
    value: Element | None


@dataclass(frozen=True, slots=True)
class RefContent:
    """Content of a ``ref`` element: the name of an included structure."""

    href: str | None


@dataclass(frozen=True, slots=True)
class Element:
    """A node of the Refract element tree.

    Attributes:
        element: Type tag ("string", "object", "member", a named type, ...)
        meta: Title, description and id
        attributes: Named flags (required, default, sample, typeAttributes);
            None when the node declares none
        content: Scalar literal, tuple of children, wrapped element,
            MemberContent, RefContent or None

    """

    element: str
    meta: Meta = field(default_factory=Meta)
    attributes: Mapping[str, Any] | None = None
    content: Any = None

    @property
    def kind(self) -> ElementKind:
        return ElementKind.from_tag(self.element)

    @property
    def title(self) -> str | None:
        return _resolve_text(self.meta.title)

    @property
    def description(self) -> str | None:
        return _resolve_text(self.meta.description)

    @property
    def id(self) -> str | None:
        return _resolve_text(self.meta.id)

    def attribute(self, name: str) -> Any:
        """Resolved value of attribute ``name``, or None when absent."""
        if not self.attributes or name not in self.attributes:
            return None
        return to_value(self.attributes[name])

    @property
    def has_scalar_content(self) -> bool:
        """True when content is a literal example value."""
        return self.content is not None and not isinstance(
            self.content, (tuple, list, Element, MemberContent, RefContent)
        )

    @property
    def children(self) -> tuple[Element, ...]:
        """Child elements in document order.

        An ``enum`` without sequence content lists its ``enumerations``
        attribute instead.
        """
        content = self.content
        if isinstance(content, (tuple, list)):
            return tuple(content)
        if self.kind is ElementKind.ENUM and self.attributes:
            enumerations = self.attributes.get("enumerations")
            if isinstance(enumerations, Element) and isinstance(
                enumerations.content, (tuple, list)
            ):
                return tuple(enumerations.content)
            if isinstance(enumerations, (tuple, list)):
                return tuple(e for e in enumerations if isinstance(e, Element))
        if isinstance(content, Element):
            return (content,)
        return ()

    def unwrapped(self) -> Element:
        """The element a ``dataStructure`` wraps; self for anything else."""
        if self.kind is not ElementKind.DATA_STRUCTURE:
            return self
        content = self.content
        if isinstance(content, Element):
            return content
        if isinstance(content, (tuple, list)) and len(content) == 1:
            return content[0]
        return self


def to_value(value: Any) -> Any:
    """Resolve a possibly wrapped value to plain Python data.

    Scalars are returned unchanged. Elements resolve to their content:
    sequences become lists, members become single-key dicts, refs their href.
    None means absent.

    Example:
        >>> to_value(Element("string", content="Alice"))
        'Alice'
        >>> to_value(Element("array", content=(Element("number", content=1),)))
        [1]
    """
    if isinstance(value, Element):
        return to_value(value.content)
    if isinstance(value, MemberContent):
        key = to_value(value.key)
        return {key: to_value(value.value)}
    if isinstance(value, RefContent):
        return value.href
    if isinstance(value, (tuple, list)):
        return [to_value(item) for item in value]
    return value


def _resolve_text(value: Any) -> str | None:
    resolved = to_value(value)
    if resolved is None:
        return None
    return str(resolved)


__all__ = [
    "IMPLICIT_TYPES",
    "Element",
    "ElementKind",
    "MemberContent",
    "Meta",
    "RefContent",
    "to_value",
]
