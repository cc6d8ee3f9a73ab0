"""Token scanners for the four top-level source patterns.

Each scanner walks the raw text with plain string operations and returns a
match record carrying the offsets the declaration builders need, or None.
Keywords must stand on word boundaries.
"""

from __future__ import annotations

from rescodegen.config.constants import (
    CODEGEN_MODULE,
    COMPONENT_FACTORY,
    LET_KEYWORD,
    MODULE_GETTER,
    OPEN_KEYWORD,
    TURBO_MODULE,
    TYPE_KEYWORD,
)
from rescodegen.parser.models import (
    ComponentRegistrationMatch,
    ModuleRegistrationMatch,
    OpenMatch,
    TypeDefinitionMatch,
)


def _is_ident_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def _is_word_at(source: str, index: int, word: str) -> bool:
    if not source.startswith(word, index):
        return False
    if index > 0 and _is_ident_char(source[index - 1]):
        return False
    end = index + len(word)
    return end >= len(source) or not _is_ident_char(source[end])


def _keyword_offsets(source: str, keyword: str) -> list[int]:
    offsets: list[int] = []
    i = source.find(keyword)
    while i != -1:
        if _is_word_at(source, i, keyword):
            offsets.append(i)
        i = source.find(keyword, i + len(keyword))
    return offsets


def _skip_whitespace(source: str, index: int) -> int:
    while index < len(source) and source[index].isspace():
        index += 1
    return index


def _read_identifier(source: str, index: int) -> int:
    while index < len(source) and _is_ident_char(source[index]):
        index += 1
    return index


def _read_quoted(source: str, index: int) -> tuple[str, int] | None:
    """Read a non-empty ``"..."`` literal starting at ``index``; return (value, end)."""
    if not source.startswith('"', index):
        return None
    close = source.find('"', index + 1)
    if close in (-1, index + 1):
        return None
    return source[index + 1 : close], close + 1


def find_open(source: str, module: str) -> OpenMatch | None:
    """First ``open <module>`` statement."""
    for start in _keyword_offsets(source, OPEN_KEYWORD):
        name_start = _skip_whitespace(source, start + len(OPEN_KEYWORD))
        if name_start == start + len(OPEN_KEYWORD):
            continue
        if _is_word_at(source, name_start, module):
            return OpenMatch(module, start, name_start + len(module), name_start)
    return None


def find_type_definition(source: str) -> TypeDefinitionMatch | None:
    """First ``type <name> = { ... }`` record definition.

    The body runs to the first closing brace and must not be empty.
    """
    for start in _keyword_offsets(source, TYPE_KEYWORD):
        name_start = _skip_whitespace(source, start + len(TYPE_KEYWORD))
        if name_start == start + len(TYPE_KEYWORD):
            continue
        name_end = _read_identifier(source, name_start)
        if name_end == name_start:
            continue
        equals = _skip_whitespace(source, name_end)
        if not source.startswith("=", equals):
            continue
        brace = _skip_whitespace(source, equals + 1)
        if not source.startswith("{", brace):
            continue
        close = source.find("}", brace + 1)
        if close in (-1, brace + 1):
            continue
        return TypeDefinitionMatch(
            name=source[name_start:name_end],
            body=source[brace + 1 : close],
            start=start,
            end=close + 1,
            name_start=name_start,
        )
    return None


def _assignment_offset(prefix: str, qualifier: str) -> int | None:
    """Offset of the ``=`` that ``prefix`` ends with, after an optional ``qualifier.``."""
    qualified = f"{qualifier}."
    if prefix.endswith(qualified):
        prefix = prefix[: -len(qualified)]
    head = prefix.rstrip()
    if not head.endswith("=") or head.endswith("=="):
        return None
    return len(head) - 1


def find_module_registration(source: str) -> ModuleRegistrationMatch | None:
    """First ``let <name> = TurboModule.get("<Module>")`` binding.

    The ``TurboModule.`` qualifier is optional. The call must sit on the
    same line as the bound name.
    """
    call = f"{MODULE_GETTER}("
    for start in _keyword_offsets(source, LET_KEYWORD):
        name_start = _skip_whitespace(source, start + len(LET_KEYWORD))
        if name_start == start + len(LET_KEYWORD):
            continue
        name_end = _read_identifier(source, name_start)
        if name_end == name_start:
            continue
        line_end = source.find("\n", name_end)
        if line_end == -1:
            line_end = len(source)

        pos = source.find(call, name_end, line_end)
        while pos != -1:
            if _assignment_offset(source[name_end:pos], TURBO_MODULE) is not None:
                quoted = _read_quoted(source, pos + len(call))
                if quoted is not None and source.startswith(")", quoted[1]):
                    module_name, end = quoted
                    return ModuleRegistrationMatch(
                        variable=source[name_start:name_end],
                        module_name=module_name,
                        start=start,
                        end=end + 1,
                    )
            pos = source.find(call, pos + len(call), line_end)
    return None


def find_component_registration(source: str) -> ComponentRegistrationMatch | None:
    """First ``= codegenNativeComponent("<Component>"`` call.

    The ``CodegenNativeComponent.`` qualifier is optional. The match starts
    at the ``=``.
    """
    call = f"{COMPONENT_FACTORY}("
    pos = source.find(call)
    while pos != -1:
        equals = None
        if _is_word_at(source, pos, COMPONENT_FACTORY):
            equals = _assignment_offset(source[:pos], CODEGEN_MODULE)
        if equals is not None:
            quoted = _read_quoted(source, pos + len(call))
            if quoted is not None:
                component_name, end = quoted
                return ComponentRegistrationMatch(component_name, equals, end)
        pos = source.find(call, pos + len(call))
    return None
