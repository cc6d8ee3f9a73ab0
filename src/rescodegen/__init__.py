"""rescodegen - ReScript spec parser for React Native codegen."""

from rescodegen.parser import ParseOptions, ReScriptParser, parse, parse_with_diagnostics

__version__ = "0.1.0"

__all__ = ["ParseOptions", "ReScriptParser", "parse", "parse_with_diagnostics", "__version__"]
