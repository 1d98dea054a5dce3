"""Exception classes for refract-mson.

The renderer trusts its input by default. Errors are raised only in strict
mode (``RenderConfig(strict=True)``) for structurally malformed elements.
"""

from __future__ import annotations


class MsonError(Exception):
    """Base exception for all refract-mson errors."""

    pass


class RenderError(MsonError):
    """Error during MSON rendering."""

    pass


class MalformedElementError(RenderError):
    """An element is missing a piece the renderer needs.

    Raised in strict mode, e.g. for a ``member`` without ``content.key``.
    """

    def __init__(self, path: str, message: str, element: str | None = None) -> None:
        """Initialize with the offending node path.

        Args:
            path: Location of the node in the tree (e.g. "content[0].content.key")
            message: Description of the problem
            element: Type tag of the offending element (optional)
        """
        self.path = path
        self.message = message
        self.element = element

        tag = f" ({element})" if element else ""
        super().__init__(f"{path or '<root>'}{tag}: {message}")
