"""MSON renderer — Refract element tree to MSON text.

Single-pass, depth-first rendering. Each ``handle`` call produces one
newline-terminated block (the element's line plus everything nested under
it) which its caller indents:

    handle -> handle_description -> handle_content -> handle -> ...

Example:
    >>> from refract_mson.serialization import from_dict
    >>> element = from_dict({"element": "number", "content": 42})
    >>> MsonRenderer().handle("age", element, RenderOptions())
    '    + age: 42 (number)\\n'

Thread Safety:
    Renderers hold only their frozen config. Output strings are local to
    each call.

"""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any, NamedTuple

from refract_mson.config import RenderConfig, RenderOptions, get_render_config
from refract_mson.elements import (
    IMPLICIT_TYPES,
    Element,
    ElementKind,
    MemberContent,
    RefContent,
    to_value,
)
from refract_mson.errors import MalformedElementError
from refract_mson.utils.logger import get_logger
from refract_mson.utils.text import format_value, indent

logger = get_logger(__name__)

# Parents whose items take their literal without a colon.
_LIST_KINDS = frozenset({ElementKind.ARRAY, ElementKind.ENUM})


class ContentResult(NamedTuple):
    """Rendered children plus the parent's classification.

    ``is_object`` is True when a member child was seen, False for array-like
    content, None when nothing classified the parent.
    """

    text: str
    is_object: bool | None


def type_attributes(
    element: Element, attributes: Mapping[str, Any] | None = None
) -> list[str]:
    """Labels written in parentheses after an element's name.

    The element's own tag comes first unless it is implicit (``string``,
    ``dataStructure``); ``typeAttributes`` from ``attributes`` follow in
    their given order.

    Example:
        >>> type_attributes(Element("number"), {"typeAttributes": ("required",)})
        ['number', 'required']
    """
    labels = [] if element.element in IMPLICIT_TYPES else [element.element]
    if attributes:
        extra = to_value(attributes.get("typeAttributes"))
        if isinstance(extra, str):
            labels.append(extra)
        elif extra:
            labels.extend(str(label) for label in extra)
    return labels


class MsonRenderer:
    """Render element trees to MSON.

    Malformed members and refs are omitted with a warning, or raise
    MalformedElementError when the config is strict.
    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config or get_render_config()

    def render(self, element: Element) -> str:
        """Render a root element.

        A titled root becomes a heading block (Data Structures section); an
        untitled root becomes one indented bullet block for inlining under a
        resource or payload section.
        """
        config = self._config
        options = RenderOptions.from_config(config)
        title = element.title
        if not title and element.kind is ElementKind.DATA_STRUCTURE:
            title = element.unwrapped().id
        if title:
            options = replace(
                options, initial_marker=config.heading_marker, initial_indent=False
            )
            return self.handle(title, element, options)
        return self.handle(config.attributes_label, element, options)

    def handle(self, name: str | None, element: Element, options: RenderOptions) -> str:
        """Render one element and everything nested under it.

        Args:
            name: Display name; falsy to omit
            element: Element providing type and content
            options: Per-call options; ``attributes_element`` supplies the
                attributes and description when set

        Returns:
            Newline-terminated block
        """
        attributes_element = options.attributes_element or element
        parts = [options.initial_marker]
        if name:
            parts.append(f" {name}")
        value = format_value(element.content) if element.has_scalar_content else ""
        if value:
            if name and not _is_list_parent(options.parent):
                parts.append(f": {value}")
            else:
                parts.append(f" {value}")
        labels = type_attributes(element, attributes_element.attributes)
        if labels:
            parts.append(f" ({', '.join(labels)})")
        parts.append(
            self.handle_description(attributes_element.description or "", element, options)
        )

        block = "".join(parts)
        if options.initial_indent:
            block = indent(block, options.spaces, first=True)
        return block.rstrip() + "\n"

    def handle_description(
        self, description: str, element: Element, options: RenderOptions
    ) -> str:
        """Text following an element's name, type and attributes.

        Short form puts the description inline after `` - ``. Long form
        (a default or sample is declared, or the description spans lines)
        writes the description as a paragraph, then Default/Sample lines and
        a Properties/Members/Items section holding the children.
        """
        attributes_element = options.attributes_element or element
        default = _lookup(attributes_element, element, "default")
        samples = _samples(attributes_element, element)
        long_form = default is not None or bool(samples) or "\n" in description
        content = self.handle_content(element, options)
        is_structure = element.kind is ElementKind.DATA_STRUCTURE

        if not long_form:
            out = f" - {description}" if description else ""
            if content.text:
                out += ("\n\n" if is_structure else "\n") + content.text
            return out

        marker = options.marker
        sections: list[str] = []
        if description:
            sections.append(indent(description.strip(), options.spaces, first=True))

        lines: list[str] = []
        if default is not None:
            lines.append(f"{marker} Default: {format_value(default)}")
        for sample in samples:
            lines.append(f"{marker} Sample: {format_value(sample)}")
        if content.text:
            # A structure body is preceded by one extra blank line.
            if is_structure and lines:
                lines.append("")
            lines.append(f"{marker} {_section_label(element, content.is_object)}")
        if lines:
            block = indent("\n".join(lines), options.spaces, first=True)
            if content.text:
                block += "\n" + indent(content.text, options.spaces, first=True)
                if is_structure and len(lines) == 1:
                    block = "\n" + block
            sections.append(block)

        return "\n\n" + "\n\n".join(sections)

    def handle_content(self, element: Element, options: RenderOptions) -> ContentResult:
        """Render an element's children in document order.

        A ``dataStructure`` renders the children of the element it wraps.
        """
        container = element.unwrapped()
        path = options.path
        if container is not element:
            path = _join(path, "content")
        child_options = replace(
            options,
            parent=container,
            initial_marker=options.marker,
            initial_indent=True,
            attributes_element=None,
        )

        parts: list[str] = []
        is_object: bool | None = None
        for index, child in enumerate(container.children):
            child_path = _join(path, f"content[{index}]")
            if not isinstance(child, Element):
                self._malformed(child_path, "child is not an element", container)
                continue
            match child.kind:
                case ElementKind.MEMBER:
                    is_object = True
                    parts.append(self._handle_member(child, replace(child_options, path=child_path)))
                case ElementKind.REF:
                    parts.append(self._handle_ref(child, replace(child_options, path=child_path)))
                case ElementKind.SELECT | ElementKind.OPTION:
                    logger.warning(
                        "Skipping unsupported %r element at %s", child.element, child_path
                    )
                case _:
                    if is_object is None:
                        is_object = False
                    parts.append(
                        self.handle(child.title, child, replace(child_options, path=child_path))
                    )
        return ContentResult("".join(parts), is_object)

    def _handle_member(self, member: Element, options: RenderOptions) -> str:
        """Render a member: key as name, value as element, wrapper as attributes."""
        content = member.content
        if not isinstance(content, MemberContent):
            self._malformed(options.path, "member has no key/value content", member)
            return ""

        name = to_value(content.key)
        if name is None:
            self._malformed(_join(options.path, "content.key"), "member has no key", member)
        value = content.value
        if value is None:
            self._malformed(_join(options.path, "content.value"), "member has no value", member)
            value = Element("string")

        name = format_value(name) if name is not None else None
        options = replace(
            options, attributes_element=member, path=_join(options.path, "content.value")
        )
        return self.handle(name, value, options)

    def _handle_ref(self, ref: Element, options: RenderOptions) -> str:
        content = ref.content
        href = content.href if isinstance(content, RefContent) else to_value(content)
        if not href:
            self._malformed(_join(options.path, "content.href"), "ref has no href", ref)
            return ""
        line = f"{options.marker} Include {href}"
        return indent(line, options.spaces, first=True) + "\n"

    def _malformed(self, path: str, message: str, element: Element) -> None:
        if self._config.strict:
            raise MalformedElementError(path, message, element.element)
        logger.warning("%s at %s; omitted", message, path or "<root>")


def _is_list_parent(parent: Element | None) -> bool:
    return parent is not None and parent.kind in _LIST_KINDS


def _section_label(element: Element, is_object: bool | None) -> str:
    if is_object:
        return "Properties"
    if element.unwrapped().kind is ElementKind.ENUM:
        return "Members"
    return "Items"


def _lookup(primary: Element, secondary: Element, name: str) -> Any:
    value = primary.attribute(name)
    if value is None and secondary is not primary:
        value = secondary.attribute(name)
    return value


def _samples(primary: Element, secondary: Element) -> list[Any]:
    """Declared samples: a single ``sample``, else each entry of ``samples``."""
    sample = _lookup(primary, secondary, "sample")
    if sample is not None:
        return [sample]
    samples = _lookup(primary, secondary, "samples")
    if samples is None:
        return []
    if isinstance(samples, list):
        return samples
    return [samples]


def _join(path: str, part: str) -> str:
    return f"{path}.{part}" if path else part


def render_mson(element: Element, *, config: RenderConfig | None = None) -> str:
    """Render an element tree to MSON.

    Args:
        element: Root element (data structure or attributes description)
        config: Render config; the active context config when None

    Returns:
        Newline-terminated MSON text
    """
    return MsonRenderer(config).render(element)
