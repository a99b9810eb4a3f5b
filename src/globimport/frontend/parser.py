"""
Parser

Source text -> Program. Uses Lark (LALR, cached) with position propagation
so every import declaration carries its SourceLocation.
"""

import logging
from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import UnexpectedInput, LarkError

from ..shared.errors import GlobImportSourceError
from ..shared.nodes import Program
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_PARSER_CACHE_FILE
from .transformer import ModuleTransformer

logger = logging.getLogger("globimport.frontend.parser")


class ParseError(GlobImportSourceError):
    """Parse error with source location"""
    error_code = "E0001"

    def __init__(self, message: str, source_file: str, location: Optional[SourceLocation] = None,
                 source_code: Optional[str] = None):
        super().__init__(message, location, source_code=source_code)
        self.source_file = source_file


class Parser:
    """
    Module parser.

    - Takes source code, returns AST
    - Preserves source locations
    - Converts Lark errors into ParseError
    """

    def __init__(self, cache_file: Optional[str] = DEFAULT_PARSER_CACHE_FILE):
        grammar_path = Path(__file__).parent / "grammar.lark"
        self.parser = Lark.open(
            str(grammar_path),
            start='program',
            parser='lalr',              # Required for caching
            cache=cache_file or False,
            propagate_positions=True,
            maybe_placeholders=False,
        )
        self.transformer = ModuleTransformer()

    def parse(self, source: str, source_file: str = "main.js") -> Program:
        """Parse source code to AST."""
        self.transformer.current_file = source_file
        try:
            tree = self.parser.parse(source)
        except UnexpectedInput as e:
            location = SourceLocation(file=source_file, line=e.line, column=e.column)
            raise ParseError(f"Parse error: {e}", source_file, location, source_code=source) from e
        except LarkError as e:
            raise ParseError(f"Parse error: {e}", source_file, source_code=source) from e
        program = self.transformer.transform(tree)
        logger.debug(f"parsed {source_file}: {len(program.statements)} statement(s)")
        return program
