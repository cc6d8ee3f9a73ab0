"""Segmentation of record bodies into named signatures.

A spec body is a list of ``name: signature`` fields. A field whose signature
opens more parentheses than it closes continues on the following lines until
the balance returns to zero.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from rescodegen.config.constants import ARROW, SPREAD_PREFIX, VIEW_PROPS_SPREAD
from rescodegen.core.logging import get_logger
from rescodegen.parser._internal.scanning import balance
from rescodegen.parser.models import MethodSignature, PropertySignature, PropsEntry, SpreadMarker

if TYPE_CHECKING:
    from rescodegen.parser._internal.positions import PositionIndex

log = get_logger("parser.segmenter")

_METHOD_LINE = re.compile(r"^(\w+)\s*:\s*(.*)$")
_PROPERTY_LINE = re.compile(r"^(\w+)(\?)?\s*:\s*(.+)$")


def _strip_trailing_comma(text: str) -> str:
    stripped = text.rstrip()
    if stripped.endswith(","):
        stripped = stripped[:-1].rstrip()
    return stripped


class SignatureSegmenter:
    """Splits record bodies and parameter lists.

    Failures are recorded against offset 0 and the partial result is
    returned; nothing raised here reaches the caller.
    """

    def __init__(self, index: PositionIndex, *, strip_trailing_commas: bool = True) -> None:
        self._index = index
        self._strip_trailing_commas = strip_trailing_commas

    def segment_methods(self, body: str) -> list[MethodSignature]:
        """Split a module spec body into (name, signature) pairs in source order."""
        methods: list[MethodSignature] = []
        name = ""
        current = ""
        in_group = False
        depth = 0

        def flush() -> None:
            if not (name and current):
                return
            signature = current
            if self._strip_trailing_commas:
                signature = _strip_trailing_comma(signature)
            methods.append(MethodSignature(name, signature))

        try:
            lines = [line.strip() for line in body.split("\n")]
            for line in lines:
                if not line or line.startswith(SPREAD_PREFIX):
                    continue

                match = _METHOD_LINE.match(line)
                if match and not in_group:
                    flush()
                    name, current = match.group(1), match.group(2)
                    depth = balance(current)
                    in_group = depth > 0
                elif in_group:
                    current += " " + line
                    depth += balance(line)
                    if depth <= 0:
                        in_group = False
                        current = _strip_trailing_comma(current)

            if in_group:
                log.debug("unclosed_signature", method=name, depth=depth)
            flush()
        except Exception as e:
            self._index.report(f"Method signature parsing error: {e}", 0)

        return methods

    def segment_properties(self, body: str) -> list[PropsEntry]:
        """Split a component props body into properties and spread markers."""
        entries: list[PropsEntry] = []

        try:
            for raw_line in body.split("\n"):
                line = raw_line.strip()
                if not line:
                    continue

                if line.startswith(VIEW_PROPS_SPREAD):
                    object_name, _, property_name = line[len(SPREAD_PREFIX) :].partition(".")
                    entries.append(SpreadMarker(object_name, property_name.rstrip(", ")))
                    continue

                match = _PROPERTY_LINE.match(line)
                if not match:
                    continue
                type_text = _strip_trailing_comma(match.group(3))
                if type_text:
                    entries.append(
                        PropertySignature(
                            name=match.group(1),
                            type_text=type_text,
                            optional=match.group(2) is not None,
                        )
                    )
        except Exception as e:
            self._index.report(f"Component props parsing error: {e}", 0)

        return entries

    def split_parameters(self, text: str) -> list[str]:
        """Split a parameter list on commas outside nested groups.

        Fragments are trimmed and empty fragments dropped, so a trailing
        comma or an empty list yields no extra parameters.
        """
        params: list[str] = []
        current: list[str] = []
        parens = 0
        angles = 0

        try:
            i = 0
            while i < len(text):
                if text.startswith(ARROW, i):
                    current.append(ARROW)
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
                elif char == "," and parens == 0 and angles == 0:
                    fragment = "".join(current).strip()
                    if fragment:
                        params.append(fragment)
                    current = []
                    i += 1
                    continue
                current.append(char)
                i += 1

            fragment = "".join(current).strip()
            if fragment:
                params.append(fragment)
        except Exception as e:
            self._index.report(f"Parameter list parsing error: {e}", 0)

        return params
