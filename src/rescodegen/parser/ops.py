"""Spec parsing entry points.

``parse()`` always returns a well-formed Program node. Diagnostics from a
normal parse are available through ``parse_with_diagnostics()`` or
``ReScriptParser.get_errors()``; only a Program that could not be built at
all carries an ``errors`` field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rescodegen.config.constants import CODEGEN_MODULE, TURBO_MODULE
from rescodegen.config.models import ParserConfig
from rescodegen.core.errors import InternalError, ParseError
from rescodegen.core.logging import clear_parse_id, get_logger, set_parse_id
from rescodegen.parser._internal.diagnostics import Diagnostics
from rescodegen.parser._internal.positions import PositionIndex
from rescodegen.parser._internal.recognizers import (
    find_component_registration,
    find_module_registration,
    find_open,
    find_type_definition,
)
from rescodegen.parser._internal.segmenter import SignatureSegmenter
from rescodegen.parser._internal.synthesizer import DeclarationSynthesizer, is_component_props
from rescodegen.parser._internal.translator import TypeTranslator
from rescodegen.parser.models import ESTreeNode, ParseOptions

log = get_logger("parser")

OptionsLike = ParseOptions | Mapping[str, Any] | None


def _coerce_options(options: OptionsLike) -> ParseOptions:
    if options is None:
        return ParseOptions()
    if isinstance(options, ParseOptions):
        return options
    return ParseOptions.model_validate(dict(options))


def _empty_program(filename: str | None, errors: list[dict[str, Any]]) -> ESTreeNode:
    return {
        "type": "Program",
        "loc": {
            "source": filename,
            "start": {"line": 1, "column": 0},
            "end": {"line": 1, "column": 0},
        },
        "body": [],
        "comments": [],
        "interpreter": None,
        "range": [0, 0],
        "sourceType": "module",
        "docblock": None,
        "errors": errors,
    }


class ReScriptParser:
    """Parses one ReScript spec source into a Program node.

    All state (positions, diagnostics, collected declarations) belongs to
    this instance; create a new parser per source text.
    """

    def __init__(
        self,
        source: str,
        options: OptionsLike = None,
        *,
        config: ParserConfig | None = None,
    ) -> None:
        if not isinstance(source, str):
            raise ParseError.invalid_input(type(source).__name__)
        config = config or ParserConfig()
        self.options = _coerce_options(options)
        self.source = source
        self.diagnostics = Diagnostics()
        self.index = PositionIndex(source, self.options.filename, self.diagnostics)
        self.segmenter = SignatureSegmenter(
            self.index, strip_trailing_commas=config.strip_trailing_commas
        )
        self.translator = TypeTranslator(
            self.index, self.segmenter, max_depth=config.max_type_depth
        )
        self.synthesizer = DeclarationSynthesizer(self.index, self.translator)

    def parse(self) -> ESTreeNode:
        set_parse_id()
        log.debug("parse_started", filename=self.options.filename, length=self.index.length)
        try:
            program: ESTreeNode = {
                "type": "Program",
                "loc": self.index.program_loc(),
                "body": self._parse_program(),
                "comments": [],
                "interpreter": None,
                "range": [0, self.index.length],
                "sourceType": "module",
                "docblock": None,
            }
        except Exception as e:
            error = InternalError.unexpected(str(e), filename=self.options.filename)
            log.error("parse_failed", **error.to_dict())
            self.index.report(f"Parse error: {e}", 0)
            program = _empty_program(self.options.filename, self.get_errors())
        log.debug(
            "parse_completed",
            declarations=len(program["body"]),
            diagnostics=len(self.diagnostics),
        )
        clear_parse_id()
        return program

    def get_errors(self) -> list[dict[str, Any]]:
        return self.diagnostics.to_list()

    def _parse_program(self) -> list[ESTreeNode]:
        statements: list[ESTreeNode] = []
        try:
            self._parse_open_statements(statements)
            self._parse_type_definition(statements)
            self._parse_module_registration(statements)
            self._parse_component_registration(statements)
        except Exception as e:
            self.index.report(f"Program parsing error: {e}", 0)
        return statements

    def _parse_open_statements(self, statements: list[ESTreeNode]) -> None:
        try:
            for module in (TURBO_MODULE, CODEGEN_MODULE):
                match = find_open(self.source, module)
                if match is None:
                    continue
                statement = self.synthesizer.import_declaration(match)
                if statement is not None:
                    statements.append(statement)
        except Exception as e:
            self.index.report(f"Open statement parsing error: {e}", 0)

    def _parse_type_definition(self, statements: list[ESTreeNode]) -> None:
        try:
            match = find_type_definition(self.source)
            if match is None:
                return
            if not match.name or not match.body:
                error = ParseError.malformed_declaration("type definition", "missing name or body")
                self.index.report(error.message, match.start)
                return

            if is_component_props(match):
                entries = self.segmenter.segment_properties(match.body)
                statement = self.synthesizer.type_alias_declaration(match, entries)
            else:
                methods = self.segmenter.segment_methods(match.body)
                statement = self.synthesizer.interface_declaration(match, methods)
            if statement is not None:
                statements.append(statement)
        except Exception as e:
            self.index.report(f"Type definition parsing error: {e}", 0)

    def _parse_module_registration(self, statements: list[ESTreeNode]) -> None:
        try:
            match = find_module_registration(self.source)
            if match is None:
                return
            log.debug("module_registration", variable=match.variable, module=match.module_name)
            statement = self.synthesizer.module_registration(match)
            if statement is not None:
                statements.append(statement)
        except Exception as e:
            self.index.report(f"Let statement parsing error: {e}", 0)

    def _parse_component_registration(self, statements: list[ESTreeNode]) -> None:
        try:
            match = find_component_registration(self.source)
            if match is None:
                return
            statement = self.synthesizer.component_registration(match)
            if statement is not None:
                statements.append(statement)
        except Exception as e:
            self.index.report(f"Codegen call parsing error: {e}", 0)


def parse_with_diagnostics(
    source: str,
    options: OptionsLike = None,
    *,
    config: ParserConfig | None = None,
) -> tuple[ESTreeNode, list[dict[str, Any]]]:
    """Parse ``source`` and return the Program node with its diagnostics."""
    try:
        parser = ReScriptParser(source, options, config=config)
    except Exception as e:
        filename = options.get("filename") if isinstance(options, Mapping) else None
        if isinstance(options, ParseOptions):
            filename = options.filename
        errors = [
            {"message": f"Parser creation error: {e}", "line": 1, "column": 0, "position": 0}
        ]
        log.debug("parser_creation_failed", error=str(e))
        return _empty_program(filename if isinstance(filename, str) else None, errors), errors
    program = parser.parse()
    return program, parser.get_errors()


def parse(
    source: str,
    options: OptionsLike = None,
    *,
    config: ParserConfig | None = None,
) -> ESTreeNode:
    """Parse a ReScript spec source into a Program node. Never raises."""
    program, _ = parse_with_diagnostics(source, options, config=config)
    return program
