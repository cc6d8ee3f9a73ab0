"""ReScript spec parser module."""

from rescodegen.parser.models import (
    ArrayType,
    DictionaryType,
    ErrorRecord,
    FunctionParam,
    FunctionType,
    MixedType,
    NullableType,
    ParseOptions,
    StringType,
    TypeNode,
    VoidType,
)
from rescodegen.parser.ops import ReScriptParser, parse, parse_with_diagnostics

__all__ = [
    # Entry points
    "ReScriptParser",
    "parse",
    "parse_with_diagnostics",
    "ParseOptions",
    # Type nodes
    "TypeNode",
    "VoidType",
    "StringType",
    "MixedType",
    "NullableType",
    "ArrayType",
    "DictionaryType",
    "FunctionParam",
    "FunctionType",
    # Diagnostics
    "ErrorRecord",
]
