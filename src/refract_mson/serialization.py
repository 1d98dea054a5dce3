"""Refract JSON serialization for element trees.

Converts Refract JSON (as produced by API description parsers) to and from
typed ``Element`` trees. This is tree serialization only; MSON text is never
parsed back.

Example:
    from refract_mson.serialization import from_json, to_json

    element = from_json('{"element": "number", "content": 42}')
    assert element.content == 42
    assert from_json(to_json(element)) == element

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from typing import Any

from refract_mson.elements import Element, ElementKind, MemberContent, Meta, RefContent

_META_FIELDS = ("id", "title", "description")


def from_dict(data: dict[str, Any]) -> Element:
    """Build a typed element tree from a Refract dict.

    Nested dicts carrying an ``element`` key inside ``meta``, ``attributes``
    and ``content`` become Elements too.

    Args:
        data: Dict with ``element`` and optional ``meta``, ``attributes``,
            ``content``.

    Returns:
        Element (frozen dataclass).

    Raises:
        ValueError: If ``data`` is not a dict, lacks ``element``, or has
            non-dict ``meta``/``attributes``.

    """
    if not isinstance(data, dict):
        msg = f"Expected a Refract element dict, got {type(data).__name__}"
        raise ValueError(msg)
    tag = data.get("element")
    if not isinstance(tag, str):
        msg = "Missing 'element' field in serialized element"
        raise ValueError(msg)

    raw_meta = data.get("meta") or {}
    if not isinstance(raw_meta, dict):
        msg = f"Expected 'meta' to be a dict, got {type(raw_meta).__name__}"
        raise ValueError(msg)
    meta = Meta(**{name: _deserialize_value(raw_meta.get(name)) for name in _META_FIELDS})

    raw_attributes = data.get("attributes")
    attributes = None
    if raw_attributes is not None:
        if not isinstance(raw_attributes, dict):
            msg = f"Expected 'attributes' to be a dict, got {type(raw_attributes).__name__}"
            raise ValueError(msg)
        attributes = {k: _deserialize_value(v) for k, v in raw_attributes.items()}

    return Element(
        element=tag,
        meta=meta,
        attributes=attributes,
        content=_deserialize_content(ElementKind.from_tag(tag), data.get("content")),
    )


def _deserialize_content(kind: ElementKind, raw: Any) -> Any:
    """Deserialize content according to the element kind."""
    if kind is ElementKind.MEMBER and isinstance(raw, dict) and "element" not in raw:
        key = raw.get("key")
        value = raw.get("value")
        return MemberContent(
            key=from_dict(key) if isinstance(key, dict) else None,
            value=from_dict(value) if isinstance(value, dict) else None,
        )
    if kind is ElementKind.REF:
        if isinstance(raw, dict) and "element" not in raw:
            return RefContent(href=raw.get("href"))
        if isinstance(raw, str):
            return RefContent(href=raw)
    return _deserialize_value(raw)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single meta, attribute or content value."""
    if isinstance(value, dict):
        if "element" in value:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_dict(element: Element) -> dict[str, Any]:
    """Convert an element tree to a Refract dict.

    Empty ``meta`` and absent ``attributes``/``content`` are left out.

    """
    result: dict[str, Any] = {"element": element.element}

    meta = {
        name: _serialize_value(getattr(element.meta, name))
        for name in _META_FIELDS
        if getattr(element.meta, name) is not None
    }
    if meta:
        result["meta"] = meta
    if element.attributes is not None:
        result["attributes"] = {k: _serialize_value(v) for k, v in element.attributes.items()}
    if element.content is not None:
        result["content"] = _serialize_value(element.content)

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Element):
        return to_dict(value)
    if isinstance(value, MemberContent):
        out: dict[str, Any] = {}
        if value.key is not None:
            out["key"] = to_dict(value.key)
        if value.value is not None:
            out["value"] = to_dict(value.value)
        return out
    if isinstance(value, RefContent):
        return {"href": value.href}
    if isinstance(value, (tuple, list)):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, float, bool, None, plain dicts
    return value


def to_json(element: Element, *, indent: int | None = None) -> str:
    """Serialize an element tree to a JSON string.

    Output is deterministic (sorted keys).

    """
    return json.dumps(to_dict(element), sort_keys=True, indent=indent)


def from_json(data: str) -> Element:
    """Deserialize an element tree from a Refract JSON string.

    Raises:
        ValueError: If the JSON is invalid or not a Refract element.

    """
    raw = json.loads(data)
    return from_dict(raw)
