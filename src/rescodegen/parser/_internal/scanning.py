"""Balanced-delimiter scanning.

Every opener/closer character counts, wherever it appears. Spec files do not
put parentheses or angle brackets inside string literals or comments in type
positions, so no lexical awareness is needed.
"""

from __future__ import annotations

from rescodegen.config.constants import ARROW


def find_matching(text: str, open_index: int, opener: str = "(", closer: str = ")") -> int | None:
    """Return the index of the closer matching ``text[open_index]``.

    Returns None when ``open_index`` is not an opener or the text ends
    before the group closes.
    """
    if not (0 <= open_index < len(text)) or text[open_index] != opener:
        return None
    depth = 0
    for i in range(open_index, len(text)):
        char = text[i]
        if char == opener:
            depth += 1
        elif char == closer:
            depth -= 1
            if depth == 0:
                return i
    return None


def balance(text: str, opener: str = "(", closer: str = ")") -> int:
    """Openers minus closers in ``text``."""
    return text.count(opener) - text.count(closer)


def find_top_level_arrow(text: str) -> int | None:
    """Offset of the first ``=>`` outside parentheses and angle brackets.

    The ``>`` of an arrow is never treated as a closing angle bracket.
    """
    parens = 0
    angles = 0
    i = 0
    while i < len(text):
        if text.startswith(ARROW, i):
            if parens == 0 and angles == 0:
                return i
            i += len(ARROW)
            continue
        char = text[i]
        if char == "(":
            parens += 1
        elif char == ")":
            parens -= 1
        elif char == "<":
            angles += 1
        elif char == ">":
            angles -= 1
        i += 1
    return None


def split_function_signature(text: str) -> tuple[str, str] | None:
    """Split ``(params) => return`` into its parameter text and return text.

    The parameter group is the one opened by the first character and closed
    by its matching parenthesis; anything but an arrow after it means the
    text is not a parenthesized function type.
    """
    if not text.startswith("("):
        return None
    close = find_matching(text, 0)
    if close is None:
        return None
    remaining = text[close + 1 :].strip()
    if not remaining.startswith(ARROW):
        return None
    return text[1:close], remaining[len(ARROW) :].strip()
