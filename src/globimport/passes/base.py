"""
Base Pass System

A pass takes the program of one file plus the transform context and returns
the (possibly rewritten) program.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from ..shared.errors import ErrorReporter
from ..shared.nodes import Program
from ..utils.config import GlobImportOptions


class TransformContext:
    """
    Per-file state shared by the passes of one transform run.

    Created fresh for every file; nothing here outlives the run.
    """

    def __init__(self, filename: str, options: Optional[GlobImportOptions] = None,
                 source: Optional[str] = None):
        self.filename = filename
        self.options: GlobImportOptions = options or GlobImportOptions()
        self.source_files: Dict[str, str] = {}
        if source is not None:
            self.source_files[filename] = source
        self.reporter: ErrorReporter = ErrorReporter(self.source_files)


class BasePass(ABC):
    """Base class for program passes."""

    @abstractmethod
    def run(self, program: Program, ctx: TransformContext) -> Program:
        raise NotImplementedError
