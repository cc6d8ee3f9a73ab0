"""Construction of top-level declaration nodes.

Builders take recognizer matches whose text has already been segmented and
return finished ESTree dicts. A builder that fails records a diagnostic at
the declaration's start and returns None so the declaration is skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rescodegen.config.constants import (
    CODEGEN_MODULE,
    COMPONENT_FACTORY,
    MODULE_GETTER,
    PROPS_TYPE_NAME,
    REACT_NATIVE_SOURCE,
    SPEC_INTERFACE_NAME,
    SPEC_TYPE_NAME,
    TURBO_MODULE,
    TURBO_MODULE_REGISTRY,
    TURBO_MODULE_SPREADS,
    VIEW_PROPS_SPREAD,
    VIEW_PROPS_TYPE,
)
from rescodegen.core.logging import get_logger
from rescodegen.parser.models import (
    ComponentRegistrationMatch,
    ESTreeNode,
    MethodSignature,
    ModuleRegistrationMatch,
    OpenMatch,
    PropertySignature,
    PropsEntry,
    SpreadMarker,
    TypeDefinitionMatch,
)

if TYPE_CHECKING:
    from rescodegen.parser._internal.positions import PositionIndex
    from rescodegen.parser._internal.translator import TypeTranslator

log = get_logger("parser.synthesizer")

# open <Module> -> (imported name, importKind)
_IMPORTS: dict[str, tuple[str, str]] = {
    TURBO_MODULE: (TURBO_MODULE, "type"),
    CODEGEN_MODULE: (COMPONENT_FACTORY, "value"),
}


def is_component_props(match: TypeDefinitionMatch) -> bool:
    """Props types become type aliases; everything else is a module interface."""
    return match.name == PROPS_TYPE_NAME or VIEW_PROPS_SPREAD in match.body


def extends_turbo_module(match: TypeDefinitionMatch) -> bool:
    return any(marker in match.body for marker in TURBO_MODULE_SPREADS)


def interface_name(type_name: str) -> str:
    """``spec`` -> ``Spec``, the name the codegen looks for."""
    return type_name.replace(SPEC_TYPE_NAME, SPEC_INTERFACE_NAME, 1)


class DeclarationSynthesizer:
    def __init__(self, index: PositionIndex, translator: TypeTranslator) -> None:
        self._index = index
        self._translator = translator

    def _identifier(self, name: str, span: dict[str, Any]) -> ESTreeNode:
        return {"type": "Identifier", "name": name, **span}

    def _skipped(self, kind: str, error: Exception, position: int) -> None:
        self._index.report(f"Error creating {kind}: {error}", position)
        log.debug("declaration_skipped", kind=kind, position=position)

    # -------------------------------------------------------------------------
    # open statements
    # -------------------------------------------------------------------------

    def import_declaration(self, match: OpenMatch) -> ESTreeNode | None:
        try:
            imported, import_kind = _IMPORTS[match.module]
            span = self._index.span(match.start, match.end)
            name_span = self._index.span(match.name_start, match.end)
            return {
                "type": "ImportDeclaration",
                **span,
                "specifiers": [
                    {
                        "type": "ImportSpecifier",
                        **name_span,
                        "imported": self._identifier(imported, name_span),
                        "local": self._identifier(imported, name_span),
                    }
                ],
                "source": {
                    "type": "Literal",
                    "value": REACT_NATIVE_SOURCE,
                    "raw": f"'{REACT_NATIVE_SOURCE}'",
                    **span,
                },
                "importKind": import_kind,
            }
        except Exception as e:
            self._skipped("open statement", e, match.start)
            return None

    # -------------------------------------------------------------------------
    # type definitions
    # -------------------------------------------------------------------------

    def method_property(self, method: MethodSignature) -> ESTreeNode:
        synthetic = self._index.synthetic_span()
        function = self._translator.translate_signature(method.signature)
        return {
            "type": "ObjectTypeProperty",
            **synthetic,
            "key": self._identifier(method.name, synthetic),
            "value": function.to_estree(self._index),
            "method": True,
        }

    def props_property(self, entry: PropsEntry) -> ESTreeNode:
        synthetic = self._index.synthetic_span()
        if isinstance(entry, SpreadMarker):
            return {
                "type": "ObjectTypeSpreadProperty",
                "argument": {
                    "type": "MemberExpression",
                    "object": self._identifier(entry.object_name, synthetic),
                    "property": self._identifier(entry.property_name, synthetic),
                    "id": self._identifier(VIEW_PROPS_TYPE, synthetic),
                    "computed": False,
                    **synthetic,
                },
                **synthetic,
            }
        return self._property(entry, synthetic)

    def _property(self, prop: PropertySignature, synthetic: dict[str, Any]) -> ESTreeNode:
        return {
            "type": "ObjectTypeProperty",
            "key": self._identifier(prop.name, synthetic),
            "value": self._translator.translate(prop.type_text).to_estree(self._index),
            "optional": prop.optional,
            **synthetic,
        }

    def interface_declaration(
        self, match: TypeDefinitionMatch, methods: list[MethodSignature]
    ) -> ESTreeNode | None:
        try:
            span = self._index.span(match.start, match.end)
            properties = [self.method_property(m) for m in methods]
            extends = []
            if extends_turbo_module(match):
                extends.append(
                    {
                        "type": "InterfaceExtends",
                        **span,
                        "id": self._identifier(TURBO_MODULE, span),
                    }
                )
            return {
                "type": "ExportNamedDeclaration",
                **span,
                "declaration": {
                    "type": "InterfaceDeclaration",
                    **span,
                    "id": self._identifier(
                        interface_name(match.name),
                        self._index.span(match.name_start, match.name_end),
                    ),
                    "extends": extends,
                    "body": {"type": "ObjectTypeAnnotation", **span, "properties": properties},
                },
                "exportKind": "type",
            }
        except Exception as e:
            self._skipped("interface statement", e, match.start)
            return None

    def type_alias_declaration(
        self, match: TypeDefinitionMatch, entries: list[PropsEntry]
    ) -> ESTreeNode | None:
        try:
            span = self._index.span(match.start, match.end)
            properties = [self.props_property(entry) for entry in entries]
            return {
                "type": "ExportNamedDeclaration",
                **span,
                "declaration": {
                    "type": "TypeAlias",
                    **span,
                    "id": self._identifier(
                        match.name, self._index.span(match.name_start, match.name_end)
                    ),
                    "right": {
                        "type": "ObjectTypeAnnotation",
                        **span,
                        "properties": properties,
                        "typeParameters": {"params": [{"properties": properties}]},
                    },
                },
                "exportKind": "type",
            }
        except Exception as e:
            self._skipped("type alias statement", e, match.start)
            return None

    # -------------------------------------------------------------------------
    # registrations
    # -------------------------------------------------------------------------

    def _type_arguments(self, name: str, span: dict[str, Any]) -> ESTreeNode:
        return {
            "type": "TypeParameterInstantiation",
            "params": [
                {"type": "GenericTypeAnnotation", "id": self._identifier(name, span), **span}
            ],
            **span,
        }

    def _literal(self, value: str, span: dict[str, Any]) -> ESTreeNode:
        return {"type": "Literal", "value": value, "raw": f'"{value}"', **span}

    def module_registration(self, match: ModuleRegistrationMatch) -> ESTreeNode | None:
        """``TurboModuleRegistry.get<Spec>("<Module>")`` as the default export."""
        try:
            span = self._index.span(match.start, match.end)
            return {
                "type": "ExportDefaultDeclaration",
                **span,
                "declaration": {
                    "type": "CallExpression",
                    **span,
                    "callee": {
                        "type": "MemberExpression",
                        **span,
                        "object": self._identifier(TURBO_MODULE_REGISTRY, span),
                        "property": self._identifier(MODULE_GETTER, span),
                        "computed": False,
                    },
                    "arguments": [self._literal(match.module_name, span)],
                    "typeArguments": self._type_arguments(SPEC_INTERFACE_NAME, span),
                },
            }
        except Exception as e:
            self._skipped("module registration", e, match.start)
            return None

    def component_registration(self, match: ComponentRegistrationMatch) -> ESTreeNode | None:
        """``codegenNativeComponent<props>("<Component>")`` as the default export."""
        try:
            span = self._index.span(match.start, match.end)
            return {
                "type": "ExportDefaultDeclaration",
                **span,
                "declaration": {
                    "type": "CallExpression",
                    **span,
                    "callee": self._identifier(COMPONENT_FACTORY, span),
                    "arguments": [self._literal(match.component_name, span)],
                    "typeArguments": self._type_arguments(PROPS_TYPE_NAME, span),
                },
            }
        except Exception as e:
            self._skipped("component registration", e, match.start)
            return None
