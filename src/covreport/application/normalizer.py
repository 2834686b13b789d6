"""Source line normalization for the annotated listing."""

from __future__ import annotations

TAB_STOP = 4
SOURCE_FIELD_WIDTH = 90
LINE_LENGTH = 150


def expand_tabs(text: str) -> str:
    """Replace tabs with spaces up to the next 4-column stop.

    Every other character passes through and advances the column by one.

    Example:
        >>> expand_tabs("ab\\tc")
        'ab  c'
    """
    parts: list[str] = []
    column = 0

    for char in text:
        if char == "\t":
            width = TAB_STOP - column % TAB_STOP
            parts.append(" " * width)
            column += width
        else:
            parts.append(char)
            column += 1

    return "".join(parts)


def format_source_line(text: str, annotation: str = "") -> str:
    """Align a listing line and append its annotation.

    The tab-expanded text is left-justified in a 90-column field, the
    result is cut to 150 characters, then the annotation is appended
    outside that budget. Source text beyond column 150 is dropped.

    Args:
        text: Raw source/disassembly text
        annotation: Suffix such as "<== NOT EXECUTED" ("" for none)

    Returns:
        Formatted line.
    """
    padded = expand_tabs(text).ljust(SOURCE_FIELD_WIDTH)
    return padded[:LINE_LENGTH] + annotation
