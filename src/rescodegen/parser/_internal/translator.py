"""Translation of ReScript type annotations into type nodes.

Resolution order matters because the shapes overlap; the first rule that
matches wins:

1. ``unit``                      -> VoidType
2. ``string``                    -> StringType
3. ``(a, b) => r``               -> FunctionType(a, b; r)
   ``(t)`` with nothing after    -> t
4. ``a => r``                    -> FunctionType(a; r), no parameter for ``unit``
5. ``option<t>``                 -> NullableType(t)
6. ``array<t>``                  -> ArrayType(t)
7. ``Js.Dict.t<t>``              -> DictionaryType(t)
8. ``Js.Json.t``                 -> MixedType
9. anything else                 -> VoidType

Arrows are split at the first top-level ``=>``, so ``a => b => c`` reads as
``a => (b => c)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rescodegen.config.constants import (
    ARRAY_WRAPPER,
    ARROW,
    DICT_WRAPPER,
    JSON_KEYWORD,
    OPTION_WRAPPER,
    STRING_KEYWORD,
    UNIT_KEYWORD,
)
from rescodegen.core.errors import ParseError, RescodegenError
from rescodegen.core.logging import get_logger
from rescodegen.parser._internal.scanning import (
    find_matching,
    find_top_level_arrow,
    split_function_signature,
)
from rescodegen.parser.models import (
    ArrayType,
    DictionaryType,
    FunctionType,
    MixedType,
    NullableType,
    StringType,
    TypeNode,
    VoidType,
)

if TYPE_CHECKING:
    from rescodegen.parser._internal.positions import PositionIndex
    from rescodegen.parser._internal.segmenter import SignatureSegmenter

log = get_logger("parser.translator")

DEFAULT_MAX_DEPTH = 32


def _unwrap(text: str, wrapper: str) -> str | None:
    """Inner text of ``wrapper<inner>``, or None."""
    prefix = f"{wrapper}<"
    if text.startswith(prefix) and text.endswith(">") and len(text) > len(prefix) + 1:
        return text[len(prefix) : -1]
    return None


class TypeTranslator:
    """Recursive translator from annotation text to type nodes.

    Pure apart from diagnostics: translating the same text twice yields
    equal nodes.
    """

    def __init__(
        self,
        index: PositionIndex,
        segmenter: SignatureSegmenter,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._index = index
        self._segmenter = segmenter
        self._max_depth = max_depth

    def translate(self, text: str) -> TypeNode:
        """Translate one annotation. Never raises; failures become VoidType."""
        try:
            return self._translate(text, 0)
        except RescodegenError as e:
            self._index.report(str(e), 0)
        except Exception as e:
            self._index.report(f"ReScript type parsing error: {e}", 0)
        return VoidType()

    def translate_signature(self, signature: str) -> FunctionType:
        """Translate a method signature into a function type.

        A single parameter that is itself a parenthesized function type,
        ``((a, b) => r) => main``, is named ``callback``. Signatures that are
        not function types yield a parameterless function returning void.
        """
        try:
            callback = self._callback_signature(signature)
            if callback is not None:
                return callback
            node = self._translate(signature, 0)
            if isinstance(node, FunctionType):
                return node
        except RescodegenError as e:
            self._index.report(str(e), 0)
        except Exception as e:
            self._index.report(f"Type signature parsing error: {e}", 0)
        return FunctionType((), VoidType())

    def _callback_signature(self, signature: str) -> FunctionType | None:
        outer = split_function_signature(signature.strip())
        if outer is None:
            return None
        params_text, main_return = outer
        params = self._segmenter.split_parameters(params_text)
        if len(params) != 1:
            return None
        inner = split_function_signature(params[0])
        if inner is None:
            return None
        callback = self._function(*inner, depth=1)
        return FunctionType.with_callback(callback, self._translate(main_return, 1))

    def _function(self, params_text: str, return_text: str, *, depth: int) -> FunctionType:
        param_types = [
            self._translate(param, depth + 1)
            for param in self._segmenter.split_parameters(params_text)
        ]
        return FunctionType.positional(param_types, self._translate(return_text, depth + 1))

    def _translate(self, text: str, depth: int) -> TypeNode:
        if depth > self._max_depth:
            raise ParseError.type_too_deep(self._max_depth, text.strip())
        text = text.strip()

        if text == UNIT_KEYWORD:
            return VoidType()
        if text == STRING_KEYWORD:
            return StringType()

        function = split_function_signature(text)
        if function is not None:
            return self._function(*function, depth=depth)
        if text.startswith("(") and find_matching(text, 0) == len(text) - 1:
            return self._translate(text[1:-1], depth + 1)

        arrow = find_top_level_arrow(text)
        if arrow is not None:
            left = text[:arrow].strip()
            right = text[arrow + len(ARROW) :].strip()
            if left and right:
                param_types = [] if left == UNIT_KEYWORD else [self._translate(left, depth + 1)]
                return FunctionType.positional(param_types, self._translate(right, depth + 1))

        inner = _unwrap(text, OPTION_WRAPPER)
        if inner is not None:
            return NullableType(self._translate(inner, depth + 1))
        inner = _unwrap(text, ARRAY_WRAPPER)
        if inner is not None:
            return ArrayType(self._translate(inner, depth + 1))
        inner = _unwrap(text, DICT_WRAPPER)
        if inner is not None:
            return DictionaryType(self._translate(inner, depth + 1))

        if text == JSON_KEYWORD:
            return MixedType()

        log.debug("unrecognized_type", text=text)
        return VoidType()
