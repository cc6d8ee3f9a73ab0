"""Data models for the spec parser.

Type nodes are a closed set of frozen variants, one per type-annotation
shape. Each knows how to render itself as the ESTree/Flow node the codegen
consumes. Recognizer matches carry the offsets the declaration builders
turn into spans.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel, ConfigDict

from rescodegen.config.constants import CALLBACK_PARAM_NAME, PARAM_NAME_PREFIX

if TYPE_CHECKING:
    from rescodegen.parser._internal.positions import PositionIndex

ESTreeNode = dict[str, Any]


class ParseOptions(BaseModel):
    """Options accepted by ``parse()``.

    ``filename`` is copied verbatim into every ``loc.source``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    filename: str | None = None


# =============================================================================
# Positions and diagnostics
# =============================================================================


@dataclass(frozen=True, slots=True)
class Position:
    """1-based line, 0-based column."""

    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True, slots=True)
class ErrorRecord:
    """A diagnostic recorded during one parse call."""

    message: str
    line: int
    column: int
    position: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "line": self.line,
            "column": self.column,
            "position": self.position,
        }


# =============================================================================
# Type nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class VoidType:
    """``unit``, and the fallback for anything unrecognized."""

    def to_estree(self, index: PositionIndex) -> ESTreeNode:
        return {"type": "VoidTypeAnnotation", **index.synthetic_span()}


@dataclass(frozen=True, slots=True)
class StringType:
    def to_estree(self, index: PositionIndex) -> ESTreeNode:
        return {"type": "StringTypeAnnotation", **index.synthetic_span()}


@dataclass(frozen=True, slots=True)
class MixedType:
    """``Js.Json.t``: an opaque JSON value."""

    def to_estree(self, index: PositionIndex) -> ESTreeNode:
        return {"type": "MixedTypeAnnotation", **index.synthetic_span()}


@dataclass(frozen=True, slots=True)
class NullableType:
    inner: TypeNode

    def to_estree(self, index: PositionIndex) -> ESTreeNode:
        return {
            "type": "NullableTypeAnnotation",
            "typeAnnotation": self.inner.to_estree(index),
            **index.synthetic_span(),
        }


@dataclass(frozen=True, slots=True)
class ArrayType:
    element: TypeNode

    def to_estree(self, index: PositionIndex) -> ESTreeNode:
        return {
            "type": "ArrayTypeAnnotation",
            "elementType": self.element.to_estree(index),
            **index.synthetic_span(),
        }


@dataclass(frozen=True, slots=True)
class DictionaryType:
    """String-keyed map. The key type is implied."""

    value: TypeNode

    def to_estree(self, index: PositionIndex) -> ESTreeNode:
        return {
            "type": "ObjectTypeAnnotation",
            "properties": [],
            "indexers": [
                {
                    "type": "ObjectTypeIndexer",
                    "key": {"type": "StringTypeAnnotation", **index.synthetic_span()},
                    "value": self.value.to_estree(index),
                    **index.synthetic_span(),
                }
            ],
            **index.synthetic_span(),
        }


@dataclass(frozen=True, slots=True)
class FunctionParam:
    name: str
    type: TypeNode

    def to_estree(self, index: PositionIndex) -> ESTreeNode:
        return {
            "type": "FunctionTypeParam",
            "name": {"type": "Identifier", "name": self.name, **index.synthetic_span()},
            "typeAnnotation": self.type.to_estree(index),
            **index.synthetic_span(),
        }


@dataclass(frozen=True, slots=True)
class FunctionType:
    params: tuple[FunctionParam, ...]
    return_type: TypeNode

    @classmethod
    def positional(cls, param_types: list[TypeNode], return_type: TypeNode) -> FunctionType:
        """Build a function whose parameters are named param0, param1, ..."""
        params = tuple(
            FunctionParam(f"{PARAM_NAME_PREFIX}{i}", typ) for i, typ in enumerate(param_types)
        )
        return cls(params, return_type)

    @classmethod
    def with_callback(cls, callback: FunctionType, return_type: TypeNode) -> FunctionType:
        return cls((FunctionParam(CALLBACK_PARAM_NAME, callback),), return_type)

    def to_estree(self, index: PositionIndex) -> ESTreeNode:
        return {
            "type": "FunctionTypeAnnotation",
            "params": [p.to_estree(index) for p in self.params],
            "returnType": self.return_type.to_estree(index),
            **index.synthetic_span(),
        }


TypeNode = Union[
    VoidType, StringType, MixedType, NullableType, ArrayType, DictionaryType, FunctionType
]


# =============================================================================
# Segmenter output
# =============================================================================


@dataclass(frozen=True, slots=True)
class MethodSignature:
    """A method name plus its untranslated signature text."""

    name: str
    signature: str


@dataclass(frozen=True, slots=True)
class PropertySignature:
    """A component prop: ``name?: type``."""

    name: str
    type_text: str
    optional: bool = False


@dataclass(frozen=True, slots=True)
class SpreadMarker:
    """A ``...Object.member`` line inside a props body."""

    object_name: str
    property_name: str


PropsEntry = Union[PropertySignature, SpreadMarker]


# =============================================================================
# Recognizer matches
# =============================================================================


@dataclass(frozen=True, slots=True)
class OpenMatch:
    """``open <Module>``."""

    module: str
    start: int
    end: int
    name_start: int


@dataclass(frozen=True, slots=True)
class TypeDefinitionMatch:
    """``type <name> = { <body> }``."""

    name: str
    body: str
    start: int
    end: int
    name_start: int

    @property
    def name_end(self) -> int:
        return self.name_start + len(self.name)


@dataclass(frozen=True, slots=True)
class ModuleRegistrationMatch:
    """``let <variable> = TurboModule.get("<module>")``."""

    variable: str
    module_name: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class ComponentRegistrationMatch:
    """``= codegenNativeComponent("<component>"``."""

    component_name: str
    start: int
    end: int


@dataclass
class ParseSummary:
    """Counts reported by ``rescodegen check``."""

    declarations: list[str] = field(default_factory=list)
    errors: list[ErrorRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
