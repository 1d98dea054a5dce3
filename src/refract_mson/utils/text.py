"""Text helpers for MSON output.

Example:
    >>> from refract_mson.utils.text import indent
    >>> indent("+ a\\n\\n+ b", 4)
    '+ a\\n\\n    + b'
"""

from __future__ import annotations

from typing import Any


def indent(text: str, width: int, *, first: bool = False) -> str:
    """Indent every non-blank line of a rendered block.

    Blank lines are never indented. After indenting, surrounding blank lines
    and trailing whitespace are trimmed; the prefix of an indented first line
    is kept.

    Args:
        text: Block of already rendered text
        width: Number of spaces to prefix (0 only trims)
        first: Also indent the first line. Off by default because callers
            usually emit the first line's marker already positioned.

    Returns:
        The reindented block

    Examples:
        >>> indent("+ a\\n+ b", 2, first=True)
        '  + a\\n  + b'
        >>> indent("+ a\\n+ b\\n\\n", 2)
        '+ a\\n  + b'
    """
    prefix = " " * width
    lines = text.split("\n")
    out: list[str] = []
    for i, line in enumerate(lines):
        if not line.strip():
            out.append("")
        elif i == 0 and not first:
            out.append(line)
        else:
            out.append(prefix + line)
    return "\n".join(out).strip("\n").rstrip()


def format_value(value: Any) -> str:
    """Format a resolved literal the way MSON writes sample values.

    Examples:
        >>> format_value(True)
        'true'
        >>> format_value(["a", 1])
        'a, 1'
    """
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case list() | tuple():
            return ", ".join(format_value(item) for item in value)
        case dict():
            return ", ".join(f"{k}: {format_value(v)}" for k, v in value.items())
        case _:
            return str(value)
