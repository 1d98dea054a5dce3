"""ContextVar-based render configuration for refract-mson.

``RenderConfig`` holds the user-facing knobs (indent width, markers, strict
mode). ``RenderOptions`` is the per-call parameter object threaded down the
recursive renderer; each call derives its children's options with
``dataclasses.replace`` and never mutates its own.

Usage:
    from refract_mson.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(spaces=2, marker="-")):
        text = render(element)

Thread Safety:
    ContextVars are thread-local by design. Configs and options are frozen.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from refract_mson.elements import Element


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        spaces: Indent width per nesting level
        marker: Bullet marker for list lines
        heading_marker: Marker for a titled root (Data Structures section)
        attributes_label: Name written on an untitled root bullet
            ("Attributes" under a resource or payload); empty to omit
        strict: Raise MalformedElementError instead of omitting malformed
            pieces

    """

    spaces: int = 4
    marker: str = "+"
    heading_marker: str = "###"
    attributes_label: str = "Attributes"
    strict: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary, ignoring unknown keys.

        Example:
            >>> RenderConfig.from_dict({"spaces": 2, "colour": "red"}).spaces
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Per-call rendering options.

    Attributes:
        parent: Element whose content is being rendered (None at the root)
        spaces: Indent width
        marker: Bullet marker for nested lines
        initial_marker: Marker starting this element's line
        initial_indent: Indent this element's block (off for the root heading)
        attributes_element: Element supplying attributes and description
            (a member wrapper for its value); None means the element itself
        path: Location of the element in the tree, for error messages

    """

    parent: "Element | None" = None
    spaces: int = 4
    marker: str = "+"
    initial_marker: str = "+"
    initial_indent: bool = True
    attributes_element: "Element | None" = None
    path: str = ""

    @classmethod
    def from_config(cls, config: RenderConfig) -> "RenderOptions":
        return cls(spaces=config.spaces, marker=config.marker, initial_marker=config.marker)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the active render configuration for this context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context."""
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(marker="-")):
        ...     get_render_config().marker
        '-'

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "RenderOptions",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
