"""
Module AST Transformer

Converts the Lark parse tree into module AST nodes.
"""

import logging
import re
from typing import List, Optional, Union

from lark import Transformer, v_args
from lark.lexer import Token
from typing_extensions import TypeAlias

from ..shared.nodes import (
    Identifier, ImportDeclaration, ImportDefaultSpecifier, ImportNamespaceSpecifier,
    ImportSpecifier, Program, RawStatement, Specifier, Statement, StringLiteral,
)
from ..shared.source_location import SourceLocation

# Lark Meta object carries the position information
LarkMeta: TypeAlias = object
ClauseResult: TypeAlias = Union[Specifier, List[Specifier]]

logger: logging.Logger = logging.getLogger(__name__)

_ESCAPE = re.compile(r"\\(u\{[0-9A-Fa-f]+\}|u[0-9A-Fa-f]{4}|x[0-9A-Fa-f]{2}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}


def _unescape(match: "re.Match") -> str:
    escape = match.group(1)
    if len(escape) > 1:
        # \uXXXX, \u{X...} or \xXX
        return chr(int(escape[1:].strip("{}"), 16))
    return _SIMPLE_ESCAPES.get(escape, escape)


def unquote(raw: str) -> str:
    """Value of a quoted string literal."""
    return _ESCAPE.sub(_unescape, raw[1:-1])


@v_args(inline=True, meta=True)
class ModuleTransformer(Transformer):
    """Parse tree -> Program, tracking source locations from Lark meta."""

    def __init__(self) -> None:
        super().__init__()
        self.current_file: str = ""  # Must be set by parser before use

    def _extract_location(self, meta: Optional[LarkMeta]) -> SourceLocation:
        if not self.current_file:
            raise RuntimeError(
                "Parser bug: current_file not set. "
                "Parser must set current_file before transforming."
            )
        if meta is None or getattr(meta, "empty", True):
            return SourceLocation(file=self.current_file, line=0, column=0)
        return SourceLocation(
            file=self.current_file,
            line=meta.line,
            column=meta.column,
            start=meta.start_pos,
            end=meta.end_pos,
            end_line=meta.end_line,
            end_column=meta.end_column,
        )

    def _token_location(self, token: Token) -> SourceLocation:
        return SourceLocation(
            file=self.current_file,
            line=token.line or 0,
            column=token.column or 0,
            start=token.start_pos or 0,
            end=token.end_pos or 0,
            end_line=token.end_line or 0,
            end_column=token.end_column or 0,
        )

    # =========================================================================
    # PROGRAM STRUCTURE
    # =========================================================================

    def program(self, meta: LarkMeta, *statements: Statement) -> Program:
        return Program(statements=list(statements), location=self._extract_location(meta))

    def raw_line(self, meta: LarkMeta, line: Token) -> RawStatement:
        return RawStatement(str(line), location=self._token_location(line))

    # =========================================================================
    # IMPORT DECLARATIONS
    # =========================================================================

    def import_bare(self, meta: LarkMeta, source: StringLiteral) -> ImportDeclaration:
        """Grammar: 'import' string ';'?"""
        return ImportDeclaration([], source, location=self._extract_location(meta))

    def import_with_clause(self, meta: LarkMeta, clause: ClauseResult, source: StringLiteral) -> ImportDeclaration:
        """Grammar: 'import' import_clause 'from' string ';'?"""
        specifiers = clause if isinstance(clause, list) else [clause]
        return ImportDeclaration(specifiers, source, location=self._extract_location(meta))

    def import_clause(self, meta: LarkMeta, first: ClauseResult, second: Optional[ClauseResult] = None) -> List[Specifier]:
        specifiers: List[Specifier] = []
        for part in (first, second):
            if part is None:
                continue
            if isinstance(part, list):
                specifiers.extend(part)
            else:
                specifiers.append(part)
        return specifiers

    def default_binding(self, meta: LarkMeta, name: Token) -> ImportDefaultSpecifier:
        location = self._extract_location(meta)
        return ImportDefaultSpecifier(Identifier(str(name), location), location=location)

    def namespace_binding(self, meta: LarkMeta, name: Token) -> ImportNamespaceSpecifier:
        location = self._extract_location(meta)
        return ImportNamespaceSpecifier(Identifier(str(name), self._token_location(name)), location=location)

    def named_imports(self, meta: LarkMeta, *specifiers: ImportSpecifier) -> List[Specifier]:
        return list(specifiers)

    def import_specifier(self, meta: LarkMeta, imported: Token, local: Optional[Token] = None) -> ImportSpecifier:
        """Grammar: NAME ('as' NAME)?"""
        location = self._extract_location(meta)
        imported_id = Identifier(str(imported), self._token_location(imported))
        if local is None:
            return ImportSpecifier(Identifier(str(imported), imported_id.location), imported_id, location=location)
        return ImportSpecifier(Identifier(str(local), self._token_location(local)), imported_id, location=location)

    def string(self, meta: LarkMeta, token: Token) -> StringLiteral:
        return StringLiteral(unquote(str(token)), location=self._token_location(token))
