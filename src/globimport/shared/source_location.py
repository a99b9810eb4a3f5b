"""
Source Location (Span)

Position of a statement in the file being transformed, attached to every
fatal glob-import diagnostic.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """
    Source location of a node.

    - File, line, column (1-based, as reported by the parser)
    - Optional byte offsets and end position for caret rendering
    - Immutable (frozen) for hashability
    """
    file: str
    line: int
    column: int
    start: int = 0
    end: int = 0
    end_line: int = 0
    end_column: int = 0

    def __str__(self) -> str:
        """Format as file:line:column"""
        return f"{self.file}:{self.line}:{self.column}"
