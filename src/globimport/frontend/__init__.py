"""Frontend: source text to module AST."""
from .parser import Parser, ParseError
