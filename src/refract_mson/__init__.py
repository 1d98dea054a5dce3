"""refract-mson — render Refract element trees as MSON.

Takes an already built Refract element tree (as produced by API Blueprint or
Swagger parsers) and writes it as MSON, the Markdown-based structure
description syntax used in API Blueprint.

Quick Start:
    >>> from refract_mson import render
    >>> print(render({
    ...     "element": "dataStructure",
    ...     "meta": {"title": "User"},
    ...     "content": {
    ...         "element": "object",
    ...         "content": [{
    ...             "element": "member",
    ...             "content": {
    ...                 "key": {"element": "string", "content": "name"},
    ...                 "value": {"element": "string", "content": "Alice"},
    ...             },
    ...         }],
    ...     },
    ... }), end="")
    ### User
    <BLANKLINE>
        + name: Alice

Configuration:
    >>> from refract_mson import RenderConfig, render_config_context
    >>> with render_config_context(RenderConfig(spaces=2, marker="-")):
    ...     text = render({"element": "number", "content": 1})
    >>> text
    '  - Attributes: 1 (number)\\n'

"""

from typing import Any

from refract_mson.config import (
    RenderConfig,
    RenderOptions,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from refract_mson.elements import (
    Element,
    ElementKind,
    MemberContent,
    Meta,
    RefContent,
    to_value,
)
from refract_mson.errors import MalformedElementError, MsonError, RenderError
from refract_mson.renderers.mson import MsonRenderer, render_mson, type_attributes
from refract_mson.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def render(element: Element | dict[str, Any], *, config: RenderConfig | None = None) -> str:
    """Render an element tree to MSON.

    Args:
        element: Root Element, or a Refract dict to deserialize first
        config: Render config (the active context config if None)

    Returns:
        Newline-terminated MSON text

    Raises:
        ValueError: If a dict is not a Refract element
        MalformedElementError: In strict mode, for malformed members or refs
    """
    if isinstance(element, dict):
        element = from_dict(element)
    return render_mson(element, config=config)


def render_json(data: str, *, config: RenderConfig | None = None) -> str:
    """Render Refract JSON text to MSON."""
    return render_mson(from_json(data), config=config)


__all__ = [  # noqa: RUF022 — grouped by category
    # Version
    "__version__",
    # Core API
    "render",
    "render_json",
    "render_mson",
    # Elements
    "Element",
    "ElementKind",
    "MemberContent",
    "Meta",
    "RefContent",
    "to_value",
    # Renderer
    "MsonRenderer",
    "type_attributes",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "RenderOptions",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "MsonError",
    "RenderError",
    "MalformedElementError",
]
