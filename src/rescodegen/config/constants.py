"""Language constants.

Keywords and fixed names of the ReScript spec dialect and of the emitted
tree. These are not user-configurable: downstream codegen depends on them.

For configurable values, see models.py (ParserConfig, LoggingConfig).
"""

# =============================================================================
# Type annotation keywords
# =============================================================================

UNIT_KEYWORD = "unit"
"""The "no value" type. Translates to VoidTypeAnnotation."""

STRING_KEYWORD = "string"
"""Primitive string type."""

OPTION_WRAPPER = "option"
"""Nullable wrapper: option<T>."""

ARRAY_WRAPPER = "array"
"""Array wrapper: array<T>."""

DICT_WRAPPER = "Js.Dict.t"
"""String-keyed dictionary wrapper: Js.Dict.t<T>."""

JSON_KEYWORD = "Js.Json.t"
"""Opaque JSON value. Translates to MixedTypeAnnotation."""

ARROW = "=>"

# =============================================================================
# Source markers
# =============================================================================

SPREAD_PREFIX = "..."

TURBO_MODULE_SPREADS = ("...turboModule", "...TurboModule.turboModule")
"""Body markers that make a spec interface extend TurboModule."""

VIEW_PROPS_SPREAD = "...View.viewProps"
"""Body marker that makes a type a component props alias."""

PROPS_TYPE_NAME = "props"

SPEC_TYPE_NAME = "spec"
SPEC_INTERFACE_NAME = "Spec"

TYPE_KEYWORD = "type"
LET_KEYWORD = "let"
OPEN_KEYWORD = "open"

TURBO_MODULE = "TurboModule"
CODEGEN_MODULE = "CodegenNativeComponent"
MODULE_GETTER = "get"
COMPONENT_FACTORY = "codegenNativeComponent"

# =============================================================================
# Emitted tree names
# =============================================================================

REACT_NATIVE_SOURCE = "react-native"
TURBO_MODULE_REGISTRY = "TurboModuleRegistry"
VIEW_PROPS_TYPE = "ViewProps"
CALLBACK_PARAM_NAME = "callback"
PARAM_NAME_PREFIX = "param"
